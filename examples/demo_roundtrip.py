"""
chachacrypt — Live Demo: file roundtrip
=======================================
Run:  python examples/demo_roundtrip.py

Encrypts "hello world" under a key of 32 bytes of 0x01, shows the blob
layout, decrypts it back, then shows tamper and wrong-key rejection.
"""

import sys, os, tempfile, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chachacrypt import (ChaChaCipher, DecryptionError, SecretKey,
                         crypt_path, decrypt_file, encrypt_file)

LINE = "═" * 70
MSG  = b"hello world"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  chachacrypt — ChaCha20-Poly1305 file roundtrip")
print(LINE)

workdir = tempfile.mkdtemp(prefix="chachacrypt-demo-")
path    = os.path.join(workdir, "note.txt")
with open(path, "wb") as f:
    f.write(MSG)

with SecretKey(b"\x01" * 32) as key:
    # ── ENCRYPT ──────────────────────────────────────────────────────────────
    header(1, "ENCRYPT")
    t0  = time.perf_counter()
    out = encrypt_file(path, key)
    elapsed = time.perf_counter() - t0
    with open(out, "rb") as f:
        blob = f.read()
    ok("Output",     out)
    ok("Nonce",      blob[:ChaChaCipher.NONCE_SIZE].hex())
    ok("Blob size",  f"{len(blob)} bytes (nonce=12 + data={len(MSG)} + tag=16)")
    ok("Elapsed",    f"{elapsed*1000:.2f} ms")

    # ── DECRYPT ──────────────────────────────────────────────────────────────
    header(2, "DECRYPT")
    os.remove(path)
    decrypt_file(path, key)
    with open(path, "rb") as f:
        ok("Recovered", f.read().decode())

    # ── TAMPER ───────────────────────────────────────────────────────────────
    header(3, "TAMPER + WRONG KEY")
    tampered = bytearray(blob)
    tampered[15] ^= 0xFF
    with open(crypt_path(path), "wb") as f:
        f.write(bytes(tampered))
    try:
        decrypt_file(path, key)
    except DecryptionError as exc:
        ok("Tampered blob rejected", str(exc))

    with open(crypt_path(path), "wb") as f:
        f.write(blob)
    try:
        decrypt_file(path, b"\x02" * 32)
    except DecryptionError as exc:
        ok("Wrong key rejected", str(exc))

print(f"\n{LINE}")
print(f"  Files left in {workdir}")
print(LINE + "\n")
