"""
PEM framing for DER key material.

    -----BEGIN <LABEL>-----
    base64 body, 64 characters per line
    -----END <LABEL>-----

Both helpers are pure and know nothing about the key type they wrap.
"""

import base64

from .config import RSA_SETTINGS
from .errors import CryptoError

PUBLIC_KEY  = "PUBLIC KEY"
PRIVATE_KEY = "PRIVATE KEY"


def header(label: str) -> str:
    return f"-----BEGIN {label}-----"


def footer(label: str) -> str:
    return f"-----END {label}-----"


def encode_pem(der: bytes, label: str) -> str:
    """Wrap DER bytes in a PEM block (no trailing newline)."""
    body  = base64.b64encode(der).decode("ascii")
    width = RSA_SETTINGS["pem_line_length"]
    lines = [body[i:i + width] for i in range(0, len(body), width)]
    return "\n".join([header(label), *lines, footer(label)])


def decode_pem(text: str, label: str) -> bytes:
    """Strip header, footer and line breaks, then base64-decode the body."""
    body = (text.replace(header(label), "")
                .replace(footer(label), "")
                .replace("\r", "")
                .replace("\n", "")
                .strip())
    if not body:
        raise CryptoError(f"No {label} found in PEM text.")
    try:
        return base64.b64decode(body, validate=True)
    except ValueError as exc:
        raise CryptoError(f"Malformed {label} PEM body: {exc}") from exc
