"""A fixed-capacity circular array with deque-like operations, helper algorithms and a demo."""

__version__ = "0.1.0"
__all__ = ["algorithms", "array", "demo"]