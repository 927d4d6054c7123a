"""CLI layer — prompts, console output, and the ``clivo`` error boundary.

This package is the outermost layer.  It may import from ``core`` and
``infra``, but no other layer may import from ``cli``.
"""
