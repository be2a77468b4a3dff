"""Small building blocks: collections, JSON5/CSV parsing, timers, processor topology and processes."""

__version__ = "0.1.0"

__all__ = [
    "affinity",
    "buffer",
    "csv_parser",
    "json_parser",
    "linked_list",
    "memory",
    "node",
    "process",
    "ring",
    "timer",
]