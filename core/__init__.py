"""
Core modules for the Pali script transliterator.

Contains:
- models: Scripts, engines, requests and results
- errors: Custom exceptions
"""

from . import models
from . import errors

__all__ = ['models', 'errors']
