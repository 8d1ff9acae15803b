"""imperium-calendar — Imperial dating codes and Gregorian conversion."""

__version__ = "0.3.0"
