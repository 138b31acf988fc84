from typing import Any, Optional


def parse_user_id(value: Any) -> Optional[int]:
    """Positive integer id from a header or form value, else ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if not isinstance(value, str):
        return None
    try:
        user_id = int(value.strip())
    except ValueError:
        return None
    return user_id if user_id > 0 else None
