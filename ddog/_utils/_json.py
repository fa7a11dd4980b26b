import json
from typing import Optional


def validate_json(body: str) -> Optional[json.JSONDecodeError]:
    """Checks whether a request body parses as JSON.

    Returns:
        Optional[json.JSONDecodeError]: None when the body is valid JSON,
            otherwise the parse error so the caller can inspect it.
    """
    try:
        json.loads(body)
    except json.JSONDecodeError as e:
        return e
    return None
