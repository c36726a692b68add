"""
Symmetric ciphers: AES-256, DES, 3DES, ChaCha20
================================================
Password-based encryption of short texts.

The password is stretched into a key with PBKDF2-HMAC-SHA256
(65 536 iterations). The salt is NOT random: it is derived from the
algorithm name, so the same password and algorithm always give the same
key. Envelopes produced by earlier releases depend on this, so it stays.

Envelope format (base64 text):
    AES, DES, 3DES   IV || CBC ciphertext (PKCS#7 padded)
                     IV is 16 bytes for AES, 8 for the 64-bit block ciphers
    ChaCha20         ciphertext only
                     the nonce is fixed (00 01 .. 0b, counter 0) and never
                     stored, so the algorithm must be known to decrypt

Dependencies: cryptography >= 43.0
"""

import base64
import logging
import os
from enum import Enum

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..config import CHACHA20_COUNTER, CHACHA20_NONCE, KDF_SETTINGS
from ..encoding import utf8
from ..errors import CryptoError, ValidationError
from ..provider import ensure_provider
from ..result import as_result

logger = logging.getLogger(__name__)


class SymmetricAlgorithm(Enum):
    """Supported symmetric algorithms and their parameters."""

    #             label       description                              transform           key  iv  secure
    AES        = ("AES-256",  "Current standard, the safest choice",   "AES/CBC/PKCS7",    32,  16, True)
    DES        = ("DES",      "Classic, obsolete today",               "DES/CBC/PKCS7",     8,   8, False)
    TRIPLE_DES = ("3DES",     "Triple DES, stronger than plain DES",   "DESede/CBC/PKCS7", 24,   8, False)
    CHACHA20   = ("ChaCha20", "Modern and fast, used in TLS 1.3",      "ChaCha20",         32,   0, True)

    def __init__(self, label: str, description: str, transform: str,
                 key_length: int, iv_length: int, secure: bool):
        self.label       = label
        self.description = description
        self.transform   = transform
        self.key_length  = key_length    # bytes
        self.iv_length   = iv_length     # bytes stored in the envelope
        self.secure      = secure

    @property
    def is_stream(self) -> bool:
        return self.iv_length == 0


class SymmetricCipherEngine:
    """Encrypt and decrypt text with a password."""

    def __init__(self):
        ensure_provider()

    # ── key derivation ───────────────────────────────────────────────────────

    @staticmethod
    def salt_for(algorithm: SymmetricAlgorithm) -> bytes:
        """Fixed 16-byte salt: 'CriptES_<NAME>_sal' zero-filled, then cut."""
        size = KDF_SETTINGS["salt_bytes"]
        text = KDF_SETTINGS["salt_template"].format(name=algorithm.name)
        return text.ljust(size, KDF_SETTINGS["salt_fill"]).encode("utf-8")[:size]

    def derive_key(self, password: str, algorithm: SymmetricAlgorithm) -> bytes:
        """PBKDF2-HMAC-SHA256 key of exactly algorithm.key_length bytes."""
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=algorithm.key_length,
            salt=self.salt_for(algorithm),
            iterations=KDF_SETTINGS["iterations"],
        )
        # surrogatepass: any str is accepted here
        return kdf.derive(password.encode("utf-8", "surrogatepass"))

    # ── public API ───────────────────────────────────────────────────────────

    @as_result
    def encrypt(self, plaintext: str, password: str,
                algorithm: SymmetricAlgorithm) -> str:
        """
        Encrypt plaintext with a key derived from password.

        Returns:
            Ok(base64 envelope) or Err(ValidationError | CryptoError)
        """
        if not plaintext or not plaintext.strip():
            raise ValidationError("Text must not be empty.")
        if not password or not password.strip():
            raise ValidationError("Password must not be empty.")

        data = utf8(plaintext)
        utf8(password, "Password")
        key  = self.derive_key(password, algorithm)
        try:
            if algorithm.is_stream:
                envelope = self._chacha20(key).encryptor().update(data)
            else:
                envelope = self._encrypt_cbc(data, key, algorithm)
        except ValueError as exc:
            raise CryptoError(f"Encryption failed: {exc}") from exc

        logger.debug("%s: %d plaintext bytes -> %d envelope bytes",
                     algorithm.label, len(data), len(envelope))
        return base64.b64encode(envelope).decode("ascii")

    @as_result
    def decrypt(self, envelope: str, password: str,
                algorithm: SymmetricAlgorithm) -> str:
        """
        Decrypt a base64 envelope produced by encrypt().

        The password and algorithm must be the ones used to encrypt.
        """
        if not envelope or not envelope.strip():
            raise ValidationError("Encrypted text must not be empty.")
        if not password or not password.strip():
            raise ValidationError("Password must not be empty.")
        utf8(password, "Password")

        try:
            raw = base64.b64decode(envelope.strip(), validate=True)
        except ValueError as exc:
            raise CryptoError(f"Envelope is not valid base64: {exc}") from exc

        key = self.derive_key(password, algorithm)
        try:
            if algorithm.is_stream:
                data = self._chacha20(key).decryptor().update(raw)
            else:
                data = self._decrypt_cbc(raw, key, algorithm)
            return data.decode("utf-8")
        except (ValueError, UnicodeDecodeError) as exc:
            raise CryptoError(
                f"Decryption failed, check the password and algorithm: {exc}"
            ) from exc

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _block_algorithm(key: bytes, algorithm: SymmetricAlgorithm):
        if algorithm is SymmetricAlgorithm.AES:
            return algorithms.AES(key)
        # an 8-byte key makes TripleDES collapse to single DES (K1 = K2 = K3)
        return TripleDES(key)

    def _encrypt_cbc(self, data: bytes, key: bytes,
                     algorithm: SymmetricAlgorithm) -> bytes:
        cipher_alg = self._block_algorithm(key, algorithm)
        iv         = os.urandom(algorithm.iv_length)
        padder     = padding.PKCS7(cipher_alg.block_size).padder()
        padded     = padder.update(data) + padder.finalize()
        encryptor  = Cipher(cipher_alg, modes.CBC(iv)).encryptor()
        return iv + encryptor.update(padded) + encryptor.finalize()

    def _decrypt_cbc(self, raw: bytes, key: bytes,
                     algorithm: SymmetricAlgorithm) -> bytes:
        cipher_alg = self._block_algorithm(key, algorithm)
        block      = cipher_alg.block_size // 8
        if len(raw) < algorithm.iv_length + block:
            raise CryptoError(
                f"Envelope too short for {algorithm.label}: {len(raw)} bytes."
            )
        iv        = raw[:algorithm.iv_length]
        ct        = raw[algorithm.iv_length:]
        decryptor = Cipher(cipher_alg, modes.CBC(iv)).decryptor()
        padded    = decryptor.update(ct) + decryptor.finalize()
        unpadder  = padding.PKCS7(cipher_alg.block_size).unpadder()
        return unpadder.update(padded) + unpadder.finalize()

    @staticmethod
    def _chacha20(key: bytes) -> Cipher:
        # cryptography takes the 4-byte little-endian counter ahead of the nonce
        nonce = CHACHA20_COUNTER.to_bytes(4, "little") + CHACHA20_NONCE
        return Cipher(algorithms.ChaCha20(key, nonce), mode=None)
