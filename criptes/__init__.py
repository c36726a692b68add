"""
criptes: CriptES cryptography core
===================================
The operations layer behind the CriptES educational toolkit.

Engines:
    SYMMETRIC      AES-256 / DES / 3DES (CBC) and ChaCha20, password based
    ASYMMETRIC     RSA-2048 + OAEP, PEM key exchange
    HASHING        MD5, SHA-1, SHA-256, SHA-512; verify and identify
    STEGANOGRAPHY  LSB text-in-image hiding

Every public operation returns a Result (Ok / Err) instead of raising.

License: Apache 2.0
"""

__version__ = "1.0.0"
__project__ = "CriptES"

from .errors  import (CriptesError, ValidationError, CryptoError,
                      CapacityError, NotFoundError)
from .result  import Ok, Err, Result
from .engines import (SymmetricAlgorithm, SymmetricCipherEngine,
                      AsymmetricKeyEngine, KeyPair,
                      HashAlgorithm, HashDigest, HashEngine,
                      SteganographyCodec)

__all__ = [
    "CriptesError",
    "ValidationError",
    "CryptoError",
    "CapacityError",
    "NotFoundError",
    "Ok",
    "Err",
    "Result",
    "SymmetricAlgorithm",
    "SymmetricCipherEngine",
    "AsymmetricKeyEngine",
    "KeyPair",
    "HashAlgorithm",
    "HashDigest",
    "HashEngine",
    "SteganographyCodec",
]
