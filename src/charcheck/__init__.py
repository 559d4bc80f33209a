"""charcheck — character-creation form validation."""

__version__ = "0.1.0"
