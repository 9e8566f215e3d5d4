"""A printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

__version__ = "0.1.0"
__all__ = ["convert", "handlers", "printf", "spec"]