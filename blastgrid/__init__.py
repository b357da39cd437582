"""A grid arcade game of explosions, destructible blocks and falling enemies."""

__version__ = "0.1.0"
__all__ = ["__version__"]