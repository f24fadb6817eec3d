"""Classic algorithms and data structures: sorts, searches, heaps, stacks, queues,
linked lists, trees, tries, skip lists, an LRU cache and small puzzles."""

__version__ = "0.1.0"