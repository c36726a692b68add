"""The four CriptES engines. None of them depends on another."""

from .asymmetric    import AsymmetricKeyEngine, KeyPair
from .hashing       import HashAlgorithm, HashDigest, HashEngine
from .steganography import SteganographyCodec
from .symmetric     import SymmetricAlgorithm, SymmetricCipherEngine
