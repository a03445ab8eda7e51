"""Application layer - use cases for Signboard.

Ports (abstract interfaces) live in ``ports``; services that orchestrate
domain logic against those ports live in ``services``.
"""
