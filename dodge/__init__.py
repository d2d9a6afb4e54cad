"""falling-obstacle dodge game: survive as long as you can."""

__version__ = "0.1.0"
