# src/mm1_fifo/models/__init__.py

"""
Initializes the 'models' sub-package.

This file "lifts" the concrete queue implementations from their
individual modules to this package level, e.g.:

from mm1_fifo.models import BoundedFifoQueue
"""

from .bounded_fifo import BoundedFifoQueue

__all__ = [
    "BoundedFifoQueue"
]
