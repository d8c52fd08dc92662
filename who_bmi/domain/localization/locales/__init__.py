"""Shipped locale bundles."""

from .en import EN
from .id import ID

__all__ = ["EN", "ID"]
