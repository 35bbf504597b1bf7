from enum import Enum
from typing import Optional

from cryptography.hazmat.primitives import hashes, hmac

from hmacdrbg.exceptions import UnsupportedHashVariant


class HashVariant(Enum):
  """Hash functions available for HMAC, as (algorithm, digest size, default minimum entropy)"""
  # SHA-256 provides 192 bits of security strength for the generator
  SHA256 = (hashes.SHA256, 32, 192 // 8)
  SHA384 = (hashes.SHA384, 48, None)
  SHA512 = (hashes.SHA512, 64, None)

  def __init__(self, algorithm, digest_size: int, min_entropy: Optional[int]):
    self.algorithm = algorithm
    self.digest_size = digest_size
    self.min_entropy = min_entropy

  @classmethod
  def parse(cls, name: str) -> "HashVariant":
    """Look up a variant by a name such as sha256, SHA-512 or sha2-384."""
    key = name.upper().replace("-", "").replace("_", "")
    if key.startswith("SHA2") and len(key) == 7:
      key = "SHA" + key[4:]
    try:
      return cls[key]
    except KeyError:
      raise UnsupportedHashVariant(f"Unknown hash variant {name!r}") from None


class Hasher:
  """HMAC provider for a fixed hash variant.

  Every call is a complete and independent HMAC computation, no state is carried
  from one call to the next. Subclass and override `hmac` to plug in another
  implementation with the same digest size.
  """

  def __init__(self, variant: HashVariant = HashVariant.SHA256):
    self.variant = variant

  def __repr__(self):
    return f"Hasher({self.variant.name})"

  @property
  def digest_size(self) -> int:
    return self.variant.digest_size

  @property
  def min_entropy(self) -> Optional[int]:
    return self.variant.min_entropy

  def hmac(self, key: bytes, message: bytes) -> bytes:
    h = hmac.HMAC(bytes(key), self.variant.algorithm())
    h.update(bytes(message))
    return h.finalize()

  def __call__(self, key: bytes, message: bytes) -> bytes:
    return self.hmac(key, message)
