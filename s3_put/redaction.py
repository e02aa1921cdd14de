import re
from typing import Any


REDACTED = "[REDACTED]"

_SECRET_KEYS = {"accesskeyid", "secretaccesskey", "sessiontoken", "continuationtoken"}

_TOKEN_PATTERNS = [
    re.compile(r"((?:AKIA|ASIA)[A-Z0-9]{4})[A-Z0-9]{12}"),
    re.compile(r"((?:X-Amz-Credential|X-Amz-Security-Token|X-Amz-Signature)=)[^&\s]+", re.IGNORECASE),
    re.compile(r"((?:aws_secret_access_key|aws_session_token)\s*[=:]\s*)\S+", re.IGNORECASE),
]


def redact_text(value: str) -> str:
    if not value:
        return value
    redacted = value
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub(r"\1" + REDACTED, redacted)
    return redacted


def redact_event(value: Any) -> Any:
    if isinstance(value, dict):
        cleaned = {}
        for key, item in value.items():
            if isinstance(key, str) and key.lower() in _SECRET_KEYS and item:
                cleaned[key] = REDACTED
            else:
                cleaned[key] = redact_event(item)
        return cleaned
    if isinstance(value, list):
        return [redact_event(item) for item in value]
    if isinstance(value, str):
        return redact_text(value)
    return value
