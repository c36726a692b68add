"""
Error taxonomy
==============
Every failure an engine can report is one of four kinds:

    ValidationError  blank or out-of-bound input, caught before any provider call
    CryptoError      provider-level failure (bad key, bad padding, bad ciphertext)
    CapacityError    stego payload larger than the carrier, caught before any write
    NotFoundError    extraction scanned the whole carrier without a terminator

Engines raise these internally; the public methods hand them back inside
an ``Err`` value (see ``criptes.result``).
"""

__all__ = [
    "CriptesError",
    "ValidationError",
    "CryptoError",
    "CapacityError",
    "NotFoundError",
]


class CriptesError(Exception):
    """Base class for every error the engines report."""

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(CriptesError):
    """Input rejected before reaching the crypto provider."""


class CryptoError(CriptesError):
    """The provider failed; the original cause is kept in ``__cause__``."""


class CapacityError(CriptesError):
    """Payload does not fit in the carrier image."""


class NotFoundError(CriptesError):
    """No terminator found in the carrier image."""
