"""
Core utilities shared across the blog API.

This package hosts configuration helpers (env vars, feature flags) and
cross-cutting concerns such as logging setup. Routers and services depend on
these primitives instead of reading os.environ directly.
"""
