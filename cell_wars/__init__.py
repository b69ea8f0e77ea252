"""Cell Wars: a turn-based territory-control game on a square grid."""

__version__ = "0.1.0"
