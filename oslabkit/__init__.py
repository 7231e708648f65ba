"""Operating-systems lab exercises: Banker's algorithm, disk scheduling, file allocation and parallel reductions."""

__version__ = "0.1.0"

__all__ = ["banker", "disk", "filealloc", "reduce"]