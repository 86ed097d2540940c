"""Future and pager augmentation for client code generation."""

__version__ = "0.1.0"
