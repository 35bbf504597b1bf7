import hashlib
import hmac

import pytest

from hmacdrbg.hasher import HashVariant, Hasher
from hmacdrbg.nonce import ORDERS, bits2int, bits2octets, int2octets, signing_nonce


def rfc6979(x, h1, q, hash=hashlib.sha256, extra=b""):
  """RFC 6979 section 3.2 written out step by step. Returns (k, candidates tried)."""
  qlen = q.bit_length()
  rlen = (qlen + 7) // 8
  z = int.from_bytes(h1, "big")
  if 8 * len(h1) > qlen:
    z >>= 8 * len(h1) - qlen
  bx = x.to_bytes(rlen, "big") + (z % q).to_bytes(rlen, "big") + extra
  n = hash().digest_size
  V = b"\x01" * n
  K = b"\x00" * n
  K = hmac.new(K, V + b"\x00" + bx, hash).digest()
  V = hmac.new(K, V, hash).digest()
  K = hmac.new(K, V + b"\x01" + bx, hash).digest()
  V = hmac.new(K, V, hash).digest()
  tries = 0
  while True:
    tries += 1
    T = b""
    while len(T) < rlen:
      V = hmac.new(K, V, hash).digest()
      T += V
    k = int.from_bytes(T[:rlen], "big") >> (8 * rlen - qlen)
    if 0 < k < q:
      return k, tries
    K = hmac.new(K, V + b"\x00", hash).digest()
    V = hmac.new(K, V, hash).digest()


KEYS = [
  0xC9AFA9D845BA75166B5C215767B1D6934E50C3DB36E89B127B8A622B120F6721,
  1,
  0x0123456789ABCDEF,
]


@pytest.mark.parametrize("curve", list(ORDERS))
def test_matches_rfc6979(curve):
  q = ORDERS[curve]
  # Keys must be valid scalars for the smaller ed25519 order too
  for x in (key % q for key in KEYS):
    for msg in (b"sample", b"test"):
      h1 = hashlib.sha256(msg).digest()
      assert signing_nonce(x, h1, q) == rfc6979(x, h1, q)[0]
      assert signing_nonce(x, h1, q, extra=b"extra") == rfc6979(x, h1, q, extra=b"extra")[0]


def test_rejection_loop():
  # About half of all candidates exceed this order, forcing retries
  q = 2**255 + 1
  retried = 0
  for x in range(1, 21):
    h1 = hashlib.sha256(x.to_bytes(4, "big")).digest()
    k, tries = rfc6979(x, h1, q)
    assert signing_nonce(x, h1, q) == k
    retried += tries > 1
  assert retried


def test_hash_variants():
  q = ORDERS["p256"]
  x = KEYS[0]
  h1 = hashlib.sha512(b"sample").digest()
  k = signing_nonce(x, h1, q, hasher=Hasher(HashVariant.SHA512))
  assert k == rfc6979(x, h1, q, hash=hashlib.sha512)[0]
  assert k != signing_nonce(x, h1, q)


def test_bytes_key():
  q = ORDERS["secp256k1"]
  h1 = hashlib.sha256(b"message").digest()
  x = KEYS[0]
  assert signing_nonce(x.to_bytes(32, "big"), h1, q) == signing_nonce(x, h1, q)


def test_deterministic():
  q = ORDERS["p256"]
  h1 = hashlib.sha256(b"sample").digest()
  k1 = signing_nonce(KEYS[0], h1, q)
  assert k1 == signing_nonce(KEYS[0], h1, q)
  assert 0 < k1 < q
  assert k1 != signing_nonce(KEYS[0], hashlib.sha256(b"samplf").digest(), q)
  assert k1 != signing_nonce(KEYS[0] + 1, h1, q)


def test_invalid_key():
  q = ORDERS["ed25519"]
  h1 = bytes(32)
  with pytest.raises(ValueError):
    signing_nonce(0, h1, q)
  with pytest.raises(ValueError):
    signing_nonce(q, h1, q)
  with pytest.raises(ValueError):
    signing_nonce(1, h1, 1)


def test_conversions():
  assert bits2int(b"\xff\x00", 16) == 0xFF00
  assert bits2int(b"\xff\x00", 12) == 0xFF0
  assert bits2int(b"\x01", 16) == 1
  q = ORDERS["ed25519"]  # 253 bits
  assert int2octets(1, q) == bytes(31) + b"\x01"
  # A digest that is at least the order gets reduced
  assert bits2octets(((q + 5) << 3).to_bytes(32, "big"), q) == int2octets(5, q)
  assert bits2octets(b"\x00" * 32, q) == bytes(32)
