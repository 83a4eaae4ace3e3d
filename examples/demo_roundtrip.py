"""
aesgcm_tuple — Live Demo
========================
Run:  python examples/demo_roundtrip.py

Encrypts a message, prints the wire string, parses it back, decrypts,
then shows what tampering and a wrong AAD look like.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aesgcm_tuple import (
    GCMTuple,
    AuthenticationFailure,
    MalformedTuple,
    generate_key,
    encrypt,
    decrypt,
)

LINE = "═" * 70
MSG  = b"Meet at the usual place, 9pm."
AAD  = b"msg-id:42"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.DEBUG, format=' %(name)s %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
header("AES-256-GCM — encrypt → string → parse → decrypt")
key = generate_key()
t0  = time.perf_counter()
t   = encrypt(key, MSG, AAD)
wire = str(t)
back = GCMTuple.parse(wire)
pt   = decrypt(key, back, AAD)
elapsed = time.perf_counter() - t0
ok("Key size",   f"{len(key) * 8} bits")
ok("IV / tag",   f"{len(t.iv)} / {len(t.auth_tag)} bytes")
ok("Wire",       wire)
ok("Round-trip", f"{elapsed*1000:.2f} ms")
ok("Decrypted",  pt.decode())

# ─────────────────────────────────────────────────────────────────────────────
header("Failure modes")
tampered = back._replace(ciphertext=bytes([back.ciphertext[0] ^ 1]) + back.ciphertext[1:])
try:
    decrypt(key, tampered, AAD)
except AuthenticationFailure as e:
    ok("Tampered ciphertext rejected", e)

try:
    decrypt(key, back, b"msg-id:43")
except AuthenticationFailure as e:
    ok("Wrong AAD rejected", e)

try:
    GCMTuple.parse("not-a-tuple")
except MalformedTuple as e:
    ok("Malformed string rejected", e)

print(f"\n{LINE}\n")
