"""howoldami — calculate how old you are."""

__version__ = "0.1.1"
