"""Casa Luna booking site backend: rate cards, season calendar and stay quotes."""

__version__ = "0.1.0"
