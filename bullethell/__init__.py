"""A small top-down arcade game: input, audio, resources, sprites and the game window."""

__version__ = "0.1.0"
__all__ = ["__version__"]