"""Deterministic registry deployment helpers."""

__version__ = "0.1.0"
