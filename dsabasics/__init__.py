"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"
__all__ = ["cafe", "linked_lists", "numbers", "queues", "stacks", "strings", "tree"]