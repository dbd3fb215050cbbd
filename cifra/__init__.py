"""Cifra — symbol↔letter substitution cipher translator."""

from cifra.__version__ import __version__

__all__ = ["__version__"]
