"""
criptes: Symmetric engine tests
=================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import base64

import pytest
from criptes.engines.symmetric import SymmetricAlgorithm, SymmetricCipherEngine
from criptes.errors import CryptoError, ValidationError

PW       = "correct horse battery staple"
ALL_ALGS = list(SymmetricAlgorithm)
PAYLOADS = [
    "x",
    "Cifrado simétrico: ñandú, 日本語, 🔐",
    "CriptES " * 1280,   # 10 KB
]


@pytest.fixture(scope="module")
def engine():
    return SymmetricCipherEngine()


# ── key derivation ───────────────────────────────────────────────────────────
@pytest.mark.parametrize("alg", ALL_ALGS)
def test_derived_key_length_matches_algorithm(engine, alg):
    assert len(engine.derive_key(PW, alg)) == alg.key_length


def test_derive_key_is_deterministic(engine):
    k1 = engine.derive_key(PW, SymmetricAlgorithm.AES)
    k2 = engine.derive_key(PW, SymmetricAlgorithm.AES)
    assert k1 == k2
    assert engine.derive_key("other", SymmetricAlgorithm.AES) != k1


def test_salt_is_derived_from_algorithm_name():
    salt = SymmetricCipherEngine.salt_for
    assert salt(SymmetricAlgorithm.AES)        == b"CriptES_AES_sal0"
    assert salt(SymmetricAlgorithm.DES)        == b"CriptES_DES_sal0"
    assert salt(SymmetricAlgorithm.TRIPLE_DES) == b"CriptES_TRIPLE_D"
    assert salt(SymmetricAlgorithm.CHACHA20)   == b"CriptES_CHACHA20"


def test_different_algorithms_use_different_salts(engine):
    aes    = engine.derive_key(PW, SymmetricAlgorithm.AES)
    chacha = engine.derive_key(PW, SymmetricAlgorithm.CHACHA20)
    assert len(aes) == len(chacha)
    assert aes != chacha


# ── round trips ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("alg", ALL_ALGS)
@pytest.mark.parametrize("text", PAYLOADS, ids=["1-char", "utf8", "10KB"])
def test_roundtrip(engine, alg, text):
    env = engine.encrypt(text, PW, alg)
    assert env.ok
    out = engine.decrypt(env.value, PW, alg)
    assert out.ok
    assert out.value == text


# ── envelope layout ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("alg, iv_len, block", [
    (SymmetricAlgorithm.AES,        16, 16),
    (SymmetricAlgorithm.DES,         8,  8),
    (SymmetricAlgorithm.TRIPLE_DES,  8,  8),
])
def test_block_envelope_is_iv_plus_padded_ciphertext(engine, alg, iv_len, block):
    raw = base64.b64decode(engine.encrypt("hello", PW, alg).value)
    assert alg.iv_length == iv_len
    # "hello" pads to exactly one block
    assert len(raw) == iv_len + block


def test_block_envelopes_use_random_iv(engine):
    a = engine.encrypt("same text", PW, SymmetricAlgorithm.AES).value
    b = engine.encrypt("same text", PW, SymmetricAlgorithm.AES).value
    assert a != b


def test_chacha20_envelope_has_no_iv_and_is_deterministic(engine):
    alg = SymmetricAlgorithm.CHACHA20
    a   = engine.encrypt("stream", PW, alg).value
    b   = engine.encrypt("stream", PW, alg).value
    assert a == b   # fixed nonce
    assert len(base64.b64decode(a)) == len("stream")


def test_envelope_is_single_line_base64(engine):
    env = engine.encrypt("A" * 500, PW, SymmetricAlgorithm.AES).value
    assert "\n" not in env
    base64.b64decode(env, validate=True)


# ── validation ───────────────────────────────────────────────────────────────
@pytest.mark.parametrize("alg", ALL_ALGS)
def test_empty_plaintext_rejected(engine, alg):
    res = engine.encrypt("", PW, alg)
    assert not res.ok
    assert isinstance(res.error, ValidationError)


@pytest.mark.parametrize("text, pw", [("   ", PW), ("text", ""), ("text", " \t")])
def test_blank_inputs_rejected(engine, text, pw):
    res = engine.encrypt(text, pw, SymmetricAlgorithm.AES)
    assert isinstance(res.error, ValidationError)
    assert res.message


def test_decrypt_blank_envelope_rejected(engine):
    res = engine.decrypt("  ", PW, SymmetricAlgorithm.AES)
    assert isinstance(res.error, ValidationError)


@pytest.mark.parametrize("text, pw", [("a\ud800b", PW), ("text", "pw\udfff")])
def test_lone_surrogates_rejected(engine, text, pw):
    res = engine.encrypt(text, pw, SymmetricAlgorithm.AES)
    assert isinstance(res.error, ValidationError)


def test_decrypt_lone_surrogate_password_rejected(engine):
    res = engine.decrypt("AAAA", "pw\ud800", SymmetricAlgorithm.AES)
    assert isinstance(res.error, ValidationError)


def test_derive_key_accepts_any_str(engine):
    key = engine.derive_key("pw\ud800", SymmetricAlgorithm.AES)
    assert len(key) == SymmetricAlgorithm.AES.key_length


# ── failures ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("alg", [SymmetricAlgorithm.AES,
                                 SymmetricAlgorithm.DES,
                                 SymmetricAlgorithm.TRIPLE_DES])
def test_wrong_password_fails(engine, alg):
    # 64 bytes of text: a wrong key yields valid PKCS#7 padding only by chance,
    # and then the garbage still has to decode as UTF-8
    env = engine.encrypt("attack at dawn " * 4, PW, alg).value
    res = engine.decrypt(env, "not the password", alg)
    assert not res.ok
    assert isinstance(res.error, CryptoError)


def test_malformed_base64_fails(engine):
    res = engine.decrypt("not base64 at all!!", PW, SymmetricAlgorithm.AES)
    assert isinstance(res.error, CryptoError)


@pytest.mark.parametrize("envelope", ["ñandú", "AAAA日本"])
def test_non_ascii_envelope_fails(engine, envelope):
    res = engine.decrypt(envelope, PW, SymmetricAlgorithm.AES)
    assert not res.ok
    assert isinstance(res.error, CryptoError)


def test_undersized_envelope_fails(engine):
    short = base64.b64encode(b"\x00" * 10).decode()
    res   = engine.decrypt(short, PW, SymmetricAlgorithm.AES)
    assert isinstance(res.error, CryptoError)


def test_truncated_ciphertext_fails(engine):
    raw = base64.b64decode(engine.encrypt("x" * 40, PW, SymmetricAlgorithm.AES).value)
    bad = base64.b64encode(raw[:-3]).decode()
    res = engine.decrypt(bad, PW, SymmetricAlgorithm.AES)
    assert isinstance(res.error, CryptoError)


def test_unwrap_reraises(engine):
    with pytest.raises(ValidationError):
        engine.encrypt("", PW, SymmetricAlgorithm.DES).unwrap()
