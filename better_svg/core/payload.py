"""Payload envelope: base64 wrapping for text that must survive SVGO.

WHY: Arbitrary JSX expressions (arrow functions, object literals, quotes,
``>``) cannot sit inside a quoted SVG attribute without SVGO escaping,
rewriting, or dropping them. Wrapping them in an opaque ASCII envelope
makes them look like an ordinary attribute value that SVGO copies verbatim.

HOW: ``PAYLOAD_PREFIX + base64(utf-8 body) + PAYLOAD_SUFFIX``; lone
surrogates pass through the codec unchanged. Decoding
checks the envelope and the base64 alphabet strictly and returns None on
any mismatch instead of raising.

RULES:
- The envelope literals are a stable wire format: never change them
- decode_payload(encode_payload(s)) == s for every string s
- decode_payload never raises; None means "not a payload"
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

PAYLOAD_PREFIX = "__JSX_BASE64__"
PAYLOAD_SUFFIX = "__"

PAYLOAD_RE = re.compile(
    re.escape(PAYLOAD_PREFIX) + r"[A-Za-z0-9+/]*={0,2}" + re.escape(PAYLOAD_SUFFIX)
)
"""Matches one complete envelope; base64 never contains ``_``."""


def encode_payload(body: str) -> str:
    """Wrap ``body`` in the payload envelope."""
    encoded = base64.b64encode(body.encode("utf-8", "surrogatepass")).decode("ascii")
    return PAYLOAD_PREFIX + encoded + PAYLOAD_SUFFIX


def is_payload(value: str) -> bool:
    """True if ``value`` is exactly one envelope and nothing else."""
    return PAYLOAD_RE.fullmatch(value) is not None


def decode_payload(value: str) -> Optional[str]:
    """Unwrap an envelope produced by encode_payload.

    Returns None when ``value`` is not an envelope, when the base64 body
    has been mangled, or when the bytes are not valid UTF-8.
    """
    if not is_payload(value):
        return None
    body = value[len(PAYLOAD_PREFIX):len(value) - len(PAYLOAD_SUFFIX)]
    try:
        return base64.b64decode(body, validate=True).decode("utf-8", "surrogatepass")
    except (binascii.Error, ValueError):
        return None
