"""Classic data structures: array list, linked list, queues and stack."""

__version__ = "0.1.0"
__all__ = [
    "array_list",
    "linked_list",
    "queue_linked_list",
    "queue_list",
    "stack_linked_list",
]