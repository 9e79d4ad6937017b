import re
from typing import Any

# (prefix)(secret) pairs for the credentials this tool sends
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=:]+)",
    r"(DeepL-Auth-Key\s+)([a-zA-Z0-9\-\._~+/=:]+)",
    r"(auth_key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=:]+['\"]?)",
]

SENSITIVE_KEYS = {
    "authorization",
    "auth_key",
    "api_key",
    "token",
    "secret",
}


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)
    return redacted_text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    elif isinstance(value, dict):
        return redact_dict(value)
    elif isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Redacts sensitive keys and values in a dictionary (recursive).
    """
    new_obj = {}
    for k, v in obj.items():
        key_lower = str(k).lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            new_obj[k] = "[REDACTED]"
        else:
            new_obj[k] = redact_value(v)
    return new_obj


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Structlog processor that scrubs credentials from log event fields.
    The event message is left as written: it quotes translation text verbatim.
    """
    redacted = redact_dict(event_dict)
    if "event" in event_dict:
        redacted["event"] = event_dict["event"]
    return redacted
