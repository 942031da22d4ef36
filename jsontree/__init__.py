"""A mutable JSON document tree with constructors and structural comparison."""

__version__ = "1.7.16"

__all__ = ["compare", "factory", "item"]