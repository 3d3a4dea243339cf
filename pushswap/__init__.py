"""Sort integers with two stacks and eleven operations, and check instruction sequences."""

__version__ = "0.1.0"