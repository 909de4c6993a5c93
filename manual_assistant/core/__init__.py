"""
Core domain layer.

Document processing, retrieval and answering logic.
"""
