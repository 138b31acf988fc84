from typing import Any, Dict, List, Sequence


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs."""
    details = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        details.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return details


def error_body(message: str, details: List[Dict[str, str]] = None) -> Dict[str, Any]:
    body = {"error": message}
    if details:
        body["details"] = details
    return body
