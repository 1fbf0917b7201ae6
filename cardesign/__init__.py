"""Worked examples of object-oriented design: cars and a document editor."""

__version__ = "0.1.0"