"""Rekard - Leitner box flashcard API."""

__version__ = "1.0.0"
