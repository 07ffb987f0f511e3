"""Classic algorithms on trees, linked lists, arrays, stacks, strings, backtracking and dynamic programming."""

__version__ = "0.1.0"