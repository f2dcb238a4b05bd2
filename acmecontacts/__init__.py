"""An interactive contact book kept in id order and saved to a data file."""

__version__ = "0.1.0"
__all__ = ["__version__"]