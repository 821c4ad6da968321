"""Validation of node component names (xnames)."""

from __future__ import annotations

import re

_NODE_XNAME = re.compile(r"x\d{4}c[0-7]s([0-9]|[1-5][0-9]|6[0-4])b[0-1]n[0-7]")


def validate_xname_format(xname: str) -> bool:
    """Return whether ``xname`` is a well-formed node xname."""
    return _NODE_XNAME.fullmatch(xname) is not None