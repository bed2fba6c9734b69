"""CLI package.

The ``cli`` sub-package contains the Click application and the YAML
request-script loader used by ``assignbook run``.
"""
from __future__ import annotations
