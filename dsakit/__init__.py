"""Classic data structures and algorithms: searching, sorting, recursion, Tower of Hanoi, queues, stacks, linked lists and expression conversion."""

__version__ = "0.1.0"

__all__ = [
    "doubly_linked_list",
    "expressions",
    "hanoi",
    "linked_list",
    "queues",
    "recursion",
    "searching",
    "sorting",
    "stacks",
]