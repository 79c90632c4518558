"""Quantities with ISQ dimensions, SI and other units, and checked arithmetic."""

__version__ = "0.1.0"