"""Root of the assignbook exception hierarchy."""
from __future__ import annotations


class AssignbookError(Exception):
    """Base class for all assignbook errors."""
