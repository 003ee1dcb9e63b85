"""Level-order text encoding of binary trees."""

from __future__ import annotations

import re
from collections import deque
from typing import Deque, Iterator, List, Optional

from leetkit.trees import TreeNode

_NUMBER = re.compile(r"-?[0-9]*")
_END = object()


def _values(data: str) -> Iterator[Optional[int]]:
    """Yield the values of an encoded tree, ``None`` for null, until ``]``."""
    pos = 0
    size = len(data)
    while pos < size:
        ch = data[pos]
        if ch == "]":
            return
        if ch in "[,":
            pos += 1
        elif ch == "n":
            if data[pos:pos + 4] != "null":
                raise ValueError("broken format")
            pos += 4
            yield None
        elif ch == "-" or "0" <= ch <= "9":
            match = _NUMBER.match(data, pos)
            end = match.end()  # type: ignore[union-attr]
            if end >= size:
                raise ValueError("unterminated number")
            text = match.group()  # type: ignore[union-attr]
            yield int(text) if text != "-" else 0
            pos = end
        else:
            raise ValueError(f"unexpected character {ch!r}")


class Codec:
    """Serializes trees to ``[1,2,null,3]`` form and back."""

    def serialize(self, root: Optional[TreeNode]) -> str:
        """Encode the tree level by level, dropping trailing nulls."""
        parts: List[str] = []
        pending_nulls = 0
        queue: Deque[Optional[TreeNode]] = deque([root])
        while queue:
            node = queue.popleft()
            if node is None:
                pending_nulls += 1
                continue
            parts.extend(["null"] * pending_nulls)
            pending_nulls = 0
            parts.append(str(node.val))
            queue.append(node.left)
            queue.append(node.right)
        return "[" + ",".join(parts) + "]"

    def deserialize(self, data: str) -> Optional[TreeNode]:
        """Decode text produced by :meth:`serialize`; a null root reads as 0."""
        values = _values(data)
        first = next(values, _END)
        if first is _END:
            return None
        root = TreeNode(first or 0)  # type: ignore[arg-type]
        queue: Deque[TreeNode] = deque([root])
        while queue:
            parent = queue.popleft()
            left = next(values, _END)
            if left is _END:
                break
            if left is not None:
                parent.left = TreeNode(left)  # type: ignore[arg-type]
                queue.append(parent.left)
            right = next(values, _END)
            if right is _END:
                break
            if right is not None:
                parent.right = TreeNode(right)  # type: ignore[arg-type]
                queue.append(parent.right)
        return root