"""Button-driven terminal menu for Melee tournament setups."""

__version__ = "0.1.0"
__all__ = ["__version__"]