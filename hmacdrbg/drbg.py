from typing import Optional, Tuple

from hmacdrbg.exceptions import InsufficientEntropy, ReseedRequired, UnsupportedHashVariant
from hmacdrbg.hasher import Hasher

# Implements HMAC_DRBG of NIST SP 800-90A rev 1, section 10.1.2
# https://nvlpubs.nist.gov/nistpubs/SpecialPublications/NIST.SP.800-90Ar1.pdf

# The number of generate calls allowed between reseeds (NIST maximum)
RESEED_INTERVAL = 1 << 48


class HmacDrbg:
  """Deterministic random bit generator using HMAC as the pseudo-random function.

  The same entropy, nonce and personalization followed by the same sequence of
  generate and reseed calls always produce the same output. The instance is not
  thread-safe and holds secret state in K and V, which are zeroed by `wipe`.

  Entropy length is only enforced by `reseed`. Instantiation accepts any entropy,
  the caller is responsible for providing enough of it.
  """

  def __init__(
    self,
    entropy: bytes,
    nonce: bytes,
    personalization: Optional[bytes] = None,
    hasher: Optional[Hasher] = None,
    minimum_entropy: Optional[int] = None,
    reseed_interval: int = RESEED_INTERVAL,
  ):
    self.hasher = hasher or Hasher()
    if minimum_entropy is None:
      minimum_entropy = self.hasher.min_entropy
      if minimum_entropy is None:
        raise UnsupportedHashVariant(f"No default minimum entropy for {self.hasher!r}, please specify one")
    if reseed_interval <= 0:
      raise ValueError("Reseed interval must be positive")
    self.minimum_entropy = minimum_entropy
    self._interval = reseed_interval
    self._counter = reseed_interval
    self._wiped = False
    n = self.hasher.digest_size
    self.K = bytearray(n)
    self.V = bytearray(b"\x01" * n)
    self._update(bytes(entropy) + bytes(nonce) + bytes(personalization or b""))

  @classmethod
  def from_signing_key(cls, private_key: bytes, digest: bytes, personalization: Optional[bytes] = None, **kwargs):
    """Generator for deterministic signing nonces, seeded by the private key and the message digest."""
    return cls(private_key, digest, personalization, **kwargs)

  def __repr__(self):
    return f"HmacDrbg({self.hasher!r}, reseed_counter={self._counter})"

  def __enter__(self):
    return self

  def __exit__(self, *exc):
    self.wipe()

  def __del__(self):
    # Partially constructed instances have no buffers to clear
    if "V" in self.__dict__:
      self.wipe()

  @property
  def reseed_counter(self) -> int:
    """Generate calls left until a reseed is required"""
    return self._counter

  @property
  def reseed_interval(self) -> int:
    return self._interval

  def generate(self, byte_count: int, additional: Optional[bytes] = None) -> bytes:
    """Return byte_count pseudo-random bytes, mixing in the optional additional input."""
    return self.generate_with_state(byte_count, additional)[0]

  def generate_with_state(self, byte_count: int, additional: Optional[bytes] = None) -> Tuple[bytes, str, str]:
    """Generate bytes and also return the resulting K and V as hex, for test vectors.

    :raises ReseedRequired: if the reseed counter is exhausted (state is not modified)
    """
    self._check_alive()
    if not isinstance(byte_count, int) or byte_count < 0:
      raise ValueError(f"Invalid byte count {byte_count!r}")
    if self._counter <= 0:
      raise ReseedRequired("Reseed is required, the generator has reached its reseed interval")
    if additional is not None:
      additional = bytes(additional)
      self._update(additional)
    out = bytearray()
    while len(out) < byte_count:
      self.V[:] = self._hmac(self.V)
      out += self.V
    result = bytes(out[:byte_count])
    out[:] = bytes(len(out))
    self._update(additional)
    self._counter -= 1
    return result, self.K.hex(), self.V.hex()

  def reseed(self, entropy: bytes, additional: bytes = b"") -> None:
    """Mix in fresh entropy and restore the full reseed interval.

    :raises InsufficientEntropy: if entropy is shorter than `minimum_entropy` (state is not modified)
    """
    self._check_alive()
    if len(entropy) < self.minimum_entropy:
      raise InsufficientEntropy(f"Not enough entropy, minimum is {self.minimum_entropy} bytes but got {len(entropy)}")
    seed = bytes(entropy) + bytes(additional)
    try:
      self._update(seed)
    finally:
      self._counter = self._interval

  def wipe(self) -> None:
    """Overwrite the secret state. The generator cannot be used afterwards."""
    self.K[:] = bytes(len(self.K))
    self.V[:] = bytes(len(self.V))
    self._counter = 0
    self._wiped = True

  def _check_alive(self):
    if self._wiped:
      raise ValueError("The generator has been wiped")

  def _hmac(self, data) -> bytes:
    return self.hasher.hmac(self.K, data)

  def _update(self, seed: Optional[bytes] = None) -> None:
    """Refresh K and V. The second round only runs when a seed is given, even an empty one."""
    provided = b"" if seed is None else seed
    self.K[:] = self._hmac(self.V + b"\x00" + provided)
    self.V[:] = self._hmac(self.V)
    if seed is None:
      return
    self.K[:] = self._hmac(self.V + b"\x01" + provided)
    self.V[:] = self._hmac(self.V)
