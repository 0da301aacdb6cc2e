"""Classic data structures: binary, search, AVL and m-way trees, heaps, tries and linked lists."""

__version__ = "0.1.0"