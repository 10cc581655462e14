from typing import Any, Dict, Optional


def build_response(kind: str, query: str, record: Dict[str, Any]) -> Dict[str, Any]:
    """Compose the public API response around a scrubbed record.

    - `found` is False when the record came back empty (for example a
      company lookup that failed upstream).
    - `data` holds the record itself with backend keys.
    """
    return {
        "kind": kind,
        "query": query,
        "found": bool(record),
        "data": record,
    }


def build_error(kind: str, query: Optional[str], error: str) -> Dict[str, Any]:
    """Build a consistent error response for rejected or failed requests."""
    return {
        "kind": kind,
        "query": query,
        "found": False,
        "error": error,
        "data": {},
    }
