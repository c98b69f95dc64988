"""
Core utilities shared across the Friendbook app.

This package hosts configuration helpers (env vars, feature flags) and the
logging setup. Routers, workflows and services depend on these primitives
instead of reading os.environ directly.
"""
