"""A maze chase arcade game: stars, fruit, wandering and chasing ghosts, and a high-score file."""

__version__ = "0.1.0"
__all__ = ["__version__"]