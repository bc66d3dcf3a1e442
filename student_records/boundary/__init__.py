"""
Boundary layer: adapters for external systems.

Currently a single Redis-backed record store under ``boundary.kv``.
"""
