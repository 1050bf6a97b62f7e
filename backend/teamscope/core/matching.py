"""
Free-text matching used by directory and team search.

Matching is always case-insensitive. The mode decides whether the query may
appear anywhere in the value ("substring") or only at its start ("prefix").
The same predicate is expressed both in Python and as a MongoDB $regex so a
store can push the filter down while the engine re-checks every candidate.
"""

import re
from typing import Any, Dict, Optional

from teamscope.core.constants import MATCH_MODE_PREFIX, MATCH_MODE_SUBSTRING, MATCH_MODES


def normalize_query(query: Optional[str]) -> str:
    """A missing or whitespace-only query is blank. Anything else is used as given."""
    if query is None or not query.strip():
        return ""
    return query


def validate_mode(mode: str) -> str:
    if mode not in MATCH_MODES:
        raise ValueError(f"Unknown match mode '{mode}'. Expected one of: {', '.join(MATCH_MODES)}")
    return mode


def matches(value: Optional[str], query: str, mode: str = MATCH_MODE_SUBSTRING) -> bool:
    """Case-insensitive substring or prefix match. An empty query matches everything."""
    validate_mode(mode)
    if not query:
        return True
    if value is None:
        return False
    # Per-character lowering, the same folding a case-insensitive $regex applies
    haystack = value.lower()
    needle = query.lower()
    if mode == MATCH_MODE_PREFIX:
        return haystack.startswith(needle)
    return needle in haystack


def build_regex_filter(query: str, mode: str = MATCH_MODE_SUBSTRING) -> Dict[str, Any]:
    """Build the equivalent MongoDB $regex condition for a query."""
    validate_mode(mode)
    pattern = re.escape(query)
    if mode == MATCH_MODE_PREFIX:
        pattern = f"^{pattern}"
    return {"$regex": pattern, "$options": "i"}
