"""Texel Architect: texture density calculator for game environments."""

__version__ = "0.1.0"
