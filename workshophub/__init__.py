"""Workshop catalogue, participant registration and a console menu over them."""

__version__ = "1.0.0"
__all__ = ["__version__"]