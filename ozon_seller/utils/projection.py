"""Field projection helpers for MCP tools."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def project_items(
    items: List[Dict[str, Any]],
    fields: Optional[List[str]],
    base_fields: set[str],
) -> List[Dict[str, Any]]:
    """Project a list of dicts to base_fields + requested fields.

    - fields=None: only base_fields
    - fields=["x"]: base_fields + x
    - fields=["*"]: items unchanged
    Non-dict entries pass through untouched.
    """
    if fields is not None and "*" in fields:
        return items
    allowed = base_fields | set(fields or [])
    projected: List[Dict[str, Any]] = []
    for it in items:
        if isinstance(it, dict):
            projected.append({k: v for k, v in it.items() if k in allowed})
        else:
            projected.append(it)
    return projected
