"""A text adventure shell for exploring a directory-based world, in a pygame window or over HTTP."""

__version__ = "0.1.0"