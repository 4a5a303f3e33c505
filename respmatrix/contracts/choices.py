from __future__ import annotations

"""Literal-based "choice" types used across schemas.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Prefer importing choice sets from here rather than repeating Literal[...] in
  multiple schema files.
"""

from typing import Literal, TypeAlias


# -----------------------------
# Output tensor
# -----------------------------

ResponseDTypeName: TypeAlias = Literal["float64", "float32", "int64"]


# -----------------------------
# Input hygiene
# -----------------------------

# How trials whose stimulus value is NaN/None are treated.
MissingStimulusPolicy: TypeAlias = Literal["raise", "drop"]


__all__ = [
    "ResponseDTypeName",
    "MissingStimulusPolicy",
]
