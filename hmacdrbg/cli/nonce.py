from hmacdrbg.cli.gen import make_hasher
from hmacdrbg.nonce import ORDERS, int2octets, signing_nonce
from hmacdrbg.util import unhex


def main_nonce(args):
  if not args.key or not args.digest:
    raise ValueError("Private key (-k) and message digest (-d) are required")
  if args.curve and args.order:
    raise ValueError("Specify either a curve (-C) or a group order (-q), not both")
  if args.order:
    order = int.from_bytes(unhex(args.order, "order"), "big")
  else:
    curve = (args.curve or "p256").lower()
    if curve not in ORDERS:
      raise ValueError(f"Unknown curve {curve!r}, expected one of {', '.join(ORDERS)}")
    order = ORDERS[curve]
  k = signing_nonce(
    unhex(args.key, "private key"),
    unhex(args.digest, "digest"),
    order,
    extra=unhex(args.personalization, "extra data") if args.personalization else None,
    hasher=make_hasher(args),
  )
  print(int2octets(k, order).hex())
