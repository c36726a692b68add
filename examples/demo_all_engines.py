"""
criptes: Live Demo: All Four Engines
======================================
Run:  python examples/demo_all_engines.py

Shows every engine working on a real message, with timing and sizes
printed for each.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PIL import Image

from criptes.config                import setup_logging
from criptes.engines.symmetric     import SymmetricAlgorithm, SymmetricCipherEngine
from criptes.engines.asymmetric    import AsymmetricKeyEngine
from criptes.engines.hashing       import HashAlgorithm, HashEngine
from criptes.engines.steganography import SteganographyCodec

LINE = "═" * 70
MSG  = "Criptografía para todos — The CriptES Project."
PW   = "demo-password"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def fail(label, result):
    print(f"  ✗  {label}: {result.message}")

setup_logging()

print(f"\n{LINE}")
print("  criptes — Four-Engine Demo")
print("  The CriptES Project  |  Apache 2.0")
print(LINE)
print(f"  Message: {MSG}\n")

# ── SYMMETRIC ────────────────────────────────────────────────────────────────
header("SYMMETRIC — AES-256 / DES / 3DES / ChaCha20")
sym = SymmetricCipherEngine()
for alg in SymmetricAlgorithm:
    t0  = time.perf_counter()
    env = sym.encrypt(MSG, PW, alg)
    if not env.ok:
        fail(alg.label, env)
        continue
    pt  = sym.decrypt(env.value, PW, alg)
    elapsed = time.perf_counter() - t0
    flag = "" if alg.secure else "  (insecure, educational only)"
    ok(f"{alg.label:<9} {len(env.value):>4} b64 chars  {elapsed*1000:6.1f} ms",
       ("round-trip OK" if pt.ok and pt.value == MSG else "MISMATCH") + flag)

bad = sym.decrypt(sym.encrypt(MSG, PW, SymmetricAlgorithm.AES).value,
                  "wrong-password", SymmetricAlgorithm.AES)
ok("Wrong password", f"{type(bad.error).__name__}")

# ── ASYMMETRIC ───────────────────────────────────────────────────────────────
header("ASYMMETRIC — RSA-2048 + OAEP")
print("  (Generating 2048-bit keypair — takes a moment...)")
rsa_engine = AsymmetricKeyEngine()
t0   = time.perf_counter()
keys = rsa_engine.generate_key_pair().unwrap()
ct   = rsa_engine.encrypt(MSG, keys.public_pem).unwrap()
pt   = rsa_engine.decrypt(ct, keys.private_pem).unwrap()
elapsed = time.perf_counter() - t0
ok("Public key",  keys.public_pem.splitlines()[1][:40] + "...")
ok("Ciphertext",  f"{len(ct)} b64 chars")
ok("Round-trip",  f"{elapsed*1000:.0f} ms")
ok("Decrypted",   pt)
too_long = rsa_engine.encrypt("x" * 201, keys.public_pem)
ok("201 chars",   too_long.message)

# ── HASHING ──────────────────────────────────────────────────────────────────
header("HASHING — MD5 / SHA-1 / SHA-256 / SHA-512")
hasher = HashEngine()
for alg, hex_ in hasher.digest_all(MSG).items():
    ok(f"{alg.label:<8}", hex_[:48] + ("..." if len(hex_) > 48 else ""))
sha = hasher.digest(MSG, HashAlgorithm.SHA256).value.hex
ok("Verify",   str(hasher.verify(MSG, sha.upper(), HashAlgorithm.SHA256)))
ok("Identify", ", ".join(a.label for a in hasher.identify_by_length(sha)))

# ── STEGANOGRAPHY ────────────────────────────────────────────────────────────
header("STEGANOGRAPHY — LSB Text-in-Image")
carrier = Image.new("RGB", (100, 100), color=(200, 120, 40))
steg    = SteganographyCodec()
t0      = time.perf_counter()
stego   = steg.embed(carrier, MSG).unwrap()
png     = steg.to_png_bytes(stego)
found   = steg.extract(png).unwrap()
elapsed = time.perf_counter() - t0
ok("Carrier capacity", f"{steg.capacity(carrier).value:,} characters (100×100)")
ok("Stego image",      f"{len(png):,} bytes PNG (visually identical)")
ok("Extracted",        found)
ok("Round-trip",       f"{elapsed*1000:.2f} ms")
small = steg.embed(Image.new("RGB", (8, 8)), MSG)
ok("8×8 carrier",      small.message)

print(f"\n{LINE}")
print("  ALL ENGINES COMPLETE")
print(LINE + "\n")
