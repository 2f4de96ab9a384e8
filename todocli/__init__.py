"""A simple command-line to-do application backed by SQLite."""

__version__ = "0.5.0"