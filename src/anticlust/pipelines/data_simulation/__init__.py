"""Simulated feature matrices for the exchange benchmark."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
