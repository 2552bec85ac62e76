"""Configuration layers, discovery, and logging setup."""
