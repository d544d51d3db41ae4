"""
Helper functions for API operations.

Scrubs credentials from error text and sensitive keys from payloads.
"""

import re
from typing import Any, Iterable, Optional

from ..core import constants


REDACTED = "[REDACTED]"

_QUERY_SECRETS = re.compile(r"(publicKey|privateKey|signature)=[^&\s]+")
_HMAC_HEADER = re.compile(r"hmac\s+\S+:\S+")


def sanitize_error(
    error_text: str,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None
) -> str:
    """
    Remove credentials from an upstream error message.

    Args:
        error_text: Raw error text
        public_key: Public key to redact wherever it appears
        private_key: Private key to redact wherever it appears

    Returns:
        Error text safe to log or return to a client
    """
    if not error_text:
        return ""

    text = _QUERY_SECRETS.sub(lambda m: f"{m.group(1)}={REDACTED}", error_text)
    text = _HMAC_HEADER.sub(f"hmac {REDACTED}", text)
    for secret in (public_key, private_key):
        if secret:
            text = text.replace(secret, REDACTED)
    return text


def strip_sensitive(payload: Any, keys: Iterable[str] = constants.SENSITIVE_KEYS) -> Any:
    """
    Return a copy of a station payload without sensitive keys.

    Dicts lose the given keys; lists are processed item by item.
    Other values are returned unchanged.
    """
    keys = tuple(keys)
    if isinstance(payload, dict):
        return {k: v for k, v in payload.items() if k not in keys}
    if isinstance(payload, list):
        return [strip_sensitive(item, keys) for item in payload]
    return payload
