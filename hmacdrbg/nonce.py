from typing import Optional, Union

from hmacdrbg.drbg import HmacDrbg
from hmacdrbg.hasher import Hasher

# Deterministic signing nonces in the manner of RFC 6979 section 3.2
# https://www.rfc-editor.org/rfc/rfc6979#section-3.2

# The generator is seeded with the private key as entropy and the message digest as
# nonce. Candidates are drawn until one falls within [1, order - 1]. Between
# candidates the generator performs an update without seed, which is exactly the
# K/V refresh of step h.3 of the RFC.

# Group orders of commonly used curves (only the order is needed for nonces)
ORDERS = dict(
  p256=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
  secp256k1=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
  ed25519=2**252 + 27742317777372353535851937790883648493,
)


def bits2int(data: bytes, qlen: int) -> int:
  """Leftmost qlen bits of data as a big-endian integer"""
  x = int.from_bytes(data, "big")
  blen = 8 * len(data)
  return x >> (blen - qlen) if blen > qlen else x

def int2octets(x: int, order: int) -> bytes:
  return x.to_bytes((order.bit_length() + 7) // 8, "big")

def bits2octets(data: bytes, order: int) -> bytes:
  """Message digest reduced mod order, in the octet length of the order"""
  z = bits2int(data, order.bit_length())
  return int2octets(z - order if z >= order else z, order)


def signing_nonce(
  private_key: Union[int, bytes],
  digest: bytes,
  order: int,
  extra: Optional[bytes] = None,
  hasher: Optional[Hasher] = None,
) -> int:
  """Derive the per-signature secret scalar k from the private key and message digest.

  :param private_key: secret scalar as int or big-endian bytes, 0 < x < order
  :param digest: hash of the message being signed
  :param order: order of the group generator
  :param extra: additional data mixed in as personalization (RFC 6979 section 3.6)
  :raises ValueError: if the private key is out of range
  """
  if order < 2:
    raise ValueError("Invalid group order")
  x = private_key if isinstance(private_key, int) else int.from_bytes(private_key, "big")
  if not 0 < x < order:
    raise ValueError("Private key out of range")
  qlen = order.bit_length()
  rlen = (qlen + 7) // 8
  hasher = hasher or Hasher()
  # Signing never reseeds, so any variant works with the key length as minimum
  minimum = hasher.min_entropy or rlen
  key, msg = int2octets(x, order), bits2octets(digest, order)
  with HmacDrbg.from_signing_key(key, msg, extra, hasher=hasher, minimum_entropy=minimum) as drbg:
    while True:
      k = bits2int(drbg.generate(rlen), qlen)
      if 0 < k < order:
        return k
