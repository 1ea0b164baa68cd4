"""
Merge variant selection.
"""

from __future__ import annotations

import os
from typing import Optional

from algorithms.sorting.sort_errors import UnknownVariantError

VARIANT_ENV = "MERGESORT_VARIANT"
VARIANT_NAMES = ("sentinel", "buffered")
DEFAULT_VARIANT = "sentinel"


def resolve_variant(explicit: Optional[str] = None) -> str:
    """
    Resolve which merge technique to use.

    Priority:
    1) explicit argument
    2) env MERGESORT_VARIANT
    3) DEFAULT_VARIANT

    A blank environment value counts as unset. Any other unknown name
    raises UnknownVariantError.
    """
    raw = explicit
    context = "argument"
    if raw is None:
        raw = os.getenv(VARIANT_ENV)
        context = VARIANT_ENV
    if raw is None or not str(raw).strip():
        return DEFAULT_VARIANT

    name = str(raw).strip().lower()
    if name not in VARIANT_NAMES:
        raise UnknownVariantError(raw, VARIANT_NAMES, context=context)
    return name
