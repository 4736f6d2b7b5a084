"""Runs the configured exchange solvers on every simulated matrix."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
