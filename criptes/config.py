"""
Settings shared by the engines.

Values that end up in envelopes, PEM blocks or stego images are part of
the wire format: changing them breaks compatibility with existing data.
"""

import logging
import os

APP_NAME    = "CriptES"
APP_VERSION = "1.0.0"

# Symmetric: PBKDF2-HMAC-SHA256 with a per-algorithm fixed salt
KDF_SETTINGS = {
    "iterations": 65_536,
    "salt_bytes": 16,
    "salt_template": "CriptES_{name}_sal",
    "salt_fill": "0",
}

# ChaCha20 nonce (12 bytes, 00..0b) and the 32-bit block counter it starts at
CHACHA20_NONCE   = bytes(range(12))
CHACHA20_COUNTER = 0

# Asymmetric
RSA_SETTINGS = {
    "key_size": 2048,
    "public_exponent": 65537,
    "max_plaintext_chars": 200,
    "pem_line_length": 64,
}

# Steganography
STEGO_SETTINGS = {
    "terminator": "<<<CRIPTES_FIN>>>",
    "safety_margin": 10,
    "bits_per_pixel": 3,
}

LOGGING_SETTINGS = {
    "level": os.environ.get("CRIPTES_LOG_LEVEL", "WARNING"),
    "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
}


def setup_logging(level: str = None) -> None:
    """Configure the root logger from LOGGING_SETTINGS."""
    logging.basicConfig(
        level=(level or LOGGING_SETTINGS["level"]).upper(),
        format=LOGGING_SETTINGS["format"],
    )
