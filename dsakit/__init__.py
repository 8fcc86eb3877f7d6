"""Classic data structures and algorithms in plain Python: linked lists,
stacks, sorting, searching, expression handling and array utilities."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "doubly_linked_list",
    "expressions",
    "linked_list",
    "searching",
    "sorting",
    "stacks",
]