"""A Flappy Bird game: a headless game model, a pygame view and the loop joining them."""

__version__ = "0.1.0"
__all__ = ["__version__"]