"""
Manual Assistant.

Answers questions about product manuals from retrieved PDF excerpts.
"""

__version__ = "0.1.0"
