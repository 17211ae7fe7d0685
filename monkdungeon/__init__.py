"""A text adventure in which a monk explores a randomly generated dungeon."""

__version__ = "0.1.0"