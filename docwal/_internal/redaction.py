"""Redaction of secrets in request and response data shown in debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "x-api-key",
    "claim_token",
    "token",
    "secret",
    "password",
    "authorization",
    "private_key",
})

REDACTED_VALUE = "[REDACTED]"


def redact(data: Any) -> Any:
    """Recursively redact sensitive keys.

    Creates a copy - the original data is never mutated, so the outgoing
    request body is unaffected.

    Args:
        data: A JSON-serializable value (dict, list or scalar).

    Returns:
        A new value with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact(value)
        return result
    elif isinstance(data, list):
        return [redact(item) for item in data]
    else:
        return data
