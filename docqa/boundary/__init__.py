"""
Boundary layer.

Adapters for external capabilities: vector index, embedding and chat models.
"""
