"""
Hashing: MD5, SHA-1, SHA-256, SHA-512
======================================
A hash maps any input to a fixed-length fingerprint. Good hashes are
deterministic, one-way, and show an avalanche effect: change one input
character and roughly half of the output bits flip.

MD5 (collisions since 2004) and SHA-1 (SHAttered, 2017) are kept for
comparison and legacy checksums only; they are flagged as insecure.

Hex output is lowercase and zero-padded, 2 characters per byte:
    MD5 32   SHA-1 40   SHA-256 64   SHA-512 128
"""

import hashlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

from cryptography.hazmat.primitives.constant_time import bytes_eq

from ..encoding import utf8
from ..errors import CryptoError, ValidationError
from ..result import as_result

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "ERROR"

_HEX_DIGITS = frozenset("0123456789abcdef")


class HashAlgorithm(Enum):
    """Supported digests: (hashlib name, label, bits, secure)."""

    MD5    = ("md5",    "MD5",     128, False)
    SHA1   = ("sha1",   "SHA-1",   160, False)
    SHA256 = ("sha256", "SHA-256", 256, True)
    SHA512 = ("sha512", "SHA-512", 512, True)

    def __init__(self, provider_name: str, label: str, bits: int, secure: bool):
        self.provider_name = provider_name
        self.label         = label
        self.bits          = bits
        self.secure        = secure

    @property
    def hex_length(self) -> int:
        return self.bits // 4

    def hexdigest(self, data: bytes) -> str:
        """Raw digest of data, no input validation."""
        try:
            return hashlib.new(self.provider_name, data).hexdigest()
        except ValueError as exc:
            # e.g. MD5 disabled on FIPS builds
            raise CryptoError(f"{self.label} unavailable: {exc}") from exc


# hex length -> algorithm, for identify_by_length()
_BY_HEX_LENGTH = {alg.hex_length: alg for alg in HashAlgorithm}


@dataclass(frozen=True)
class HashDigest:
    hex: str
    algorithm: HashAlgorithm

    @property
    def hex_length(self) -> int:
        return len(self.hex)

    def __str__(self):
        return self.hex


class HashEngine:
    """Digest, compare and identify text hashes."""

    @as_result
    def digest(self, text: str, algorithm: HashAlgorithm) -> HashDigest:
        """Hash UTF-8 text. Blank text is rejected."""
        if not text or not text.strip():
            raise ValidationError("Text must not be empty.")
        return HashDigest(algorithm.hexdigest(utf8(text)), algorithm)

    def digest_all(self, text: str) -> Dict[HashAlgorithm, str]:
        """
        Hash text with every algorithm.

        Each entry is computed on its own; a failing algorithm maps to
        "ERROR" without affecting the others.
        """
        results = {}
        for algorithm in HashAlgorithm:
            outcome = self.digest(text, algorithm)
            results[algorithm] = outcome.value.hex if outcome.ok else ERROR_SENTINEL
        return results

    def verify(self, text: str, expected_hex: str,
               algorithm: HashAlgorithm) -> bool:
        """Constant-time, case-insensitive check of text against a hex digest."""
        outcome = self.digest(text, algorithm)
        if not outcome.ok or expected_hex is None:
            return False
        return bytes_eq(outcome.value.hex.encode("ascii"),
                        expected_hex.strip().lower().encode("utf-8", "replace"))

    @staticmethod
    def identify_by_length(hex_string: str) -> FrozenSet[HashAlgorithm]:
        """
        Guess the algorithm from the length of a hex digest.

        This is a heuristic, not a proof: any 64-character hex string looks
        like SHA-256 whether or not it came from one. Non-hex input and
        unknown lengths give an empty set.
        """
        cleaned = (hex_string or "").strip().lower()
        if not cleaned or not set(cleaned) <= _HEX_DIGITS:
            return frozenset()
        match = _BY_HEX_LENGTH.get(len(cleaned))
        return frozenset({match}) if match else frozenset()
