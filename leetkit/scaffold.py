"""Create the skeleton directory for a new numbered task."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

MIN_TASK = 1
MAX_TASK = 99999

_NUMBER = re.compile(r"[+-]?\d+")


def task_package_name(number: int) -> str:
    """Return the directory name for task ``number``, e.g. ``t00013``."""
    return f"t{number:05d}"


def create_task(number: int, directory: Union[str, Path]) -> Path:
    """Create the task directory with a module and a test file; return its path."""
    if not MIN_TASK <= number <= MAX_TASK:
        raise ValueError(
            f"expected task number to be in range [{MIN_TASK};{MAX_TASK}]"
        )

    name = task_package_name(number)
    task_dir = Path(directory) / name
    task_dir.mkdir(mode=0o775)

    for path in (task_dir / f"{name}.py", task_dir / f"test_{name}.py"):
        path.touch(mode=0o664)
        path.write_text(f'"""Task {name}."""\n', encoding="utf-8")

    return task_dir


def _print_usage(error: Optional[BaseException]) -> None:
    print("Usage:")
    print("[program] <nr_of_task>")
    if error is not None:
        print(f"error: {error}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: create the task named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        _print_usage(None)
        return 1

    text = args[0]
    if not _NUMBER.fullmatch(text):
        _print_usage(ValueError(f"invalid task number: {text!r}"))
        return 1

    try:
        create_task(int(text), Path.cwd())
    except ValueError as exc:
        _print_usage(exc)
        return 1
    except OSError as exc:
        _print_usage(OSError(f"unable to create task: {exc}"))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())