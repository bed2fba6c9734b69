"""Errors surfaced by the command layer."""
from __future__ import annotations

from assignbook.errors import AssignbookError


class CommandError(AssignbookError):
    """A command failed; the message is meant for the end user."""
