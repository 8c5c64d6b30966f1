"""Small building blocks: containers, a hash map, optional values, logging and range helpers."""

__version__ = "0.1.0"

__all__ = [
    "algo",
    "byteorder",
    "fixed",
    "hashmap",
    "linkedlist",
    "log",
    "maybe",
    "scope",
    "threaddata",
    "unknown",
]