"""
Core utilities shared across the records API.

This package hosts:
- configuration helpers (env vars, data paths, upload limits)
- logging setup
- small cross-cutting helpers (timestamps, upload URLs)

Routers and services depend on these primitives instead of reading the
environment directly.
"""
