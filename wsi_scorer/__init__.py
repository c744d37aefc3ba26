"""Scoring of word sense induction output against multi-annotator gold senses."""

__version__ = "0.1.0"
