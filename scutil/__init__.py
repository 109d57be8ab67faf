"""A hash map, a rotating logger, memory-mapped files, a mutex and option parsing."""

__version__ = "2.0.0"

__all__ = ["hashing", "hashmap", "logger", "memmap", "mutex", "option"]