"""
Boundary layer.

Adapters for external embedding and language model services.
"""
