"""Record a command's output with timing data and replay it later."""

__version__ = "0.1.0"
__all__ = ["__version__"]