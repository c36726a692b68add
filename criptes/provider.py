"""
Crypto provider registration.

The engines delegate every primitive to ``cryptography`` (OpenSSL
underneath). ``ensure_provider()`` confirms the backend once per process
and logs which OpenSSL build is in use; later calls are no-ops.
"""

import logging
import threading

from cryptography.hazmat.backends.openssl import backend as _openssl

logger = logging.getLogger(__name__)

_lock     = threading.Lock()
_provider = None


def ensure_provider() -> str:
    """Register the provider if needed and return its version text."""
    global _provider
    with _lock:
        if _provider is None:
            _provider = _openssl.openssl_version_text()
            logger.info("Crypto provider: %s", _provider)
    return _provider
