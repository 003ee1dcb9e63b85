"""Algorithm puzzle solutions, small data structures, LRU/LFU caches, a tree codec and a task scaffolding command."""

__version__ = "0.1.0"