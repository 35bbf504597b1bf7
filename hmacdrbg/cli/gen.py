from hmacdrbg.drbg import HmacDrbg
from hmacdrbg.hasher import HashVariant, Hasher
from hmacdrbg.util import parse_count, unhex


def make_hasher(args) -> Hasher:
  return Hasher(HashVariant.parse(args.hash)) if args.hash else Hasher()


def main_gen(args):
  if not args.entropy or not args.nonce:
    raise ValueError("Entropy (-e) and nonce (-n) are required")
  hasher = make_hasher(args)
  additional = [unhex(a, "additional input") for a in args.additional]
  count = parse_count(args.count, "count", max(1, len(additional)))
  if len(additional) > count:
    raise ValueError(f"Got {len(additional)} additional inputs for only {count} generate calls")
  size = parse_count(args.bytes, "bytes", hasher.digest_size)
  minimum = parse_count(args.minentropy, "minimum entropy", None)
  drbg = HmacDrbg(
    unhex(args.entropy, "entropy"),
    unhex(args.nonce, "nonce"),
    unhex(args.personalization, "personalization") if args.personalization else None,
    hasher=hasher,
    minimum_entropy=minimum,
  )
  with drbg:
    for i in range(count):
      add = additional[i] if i < len(additional) else None
      out, K, V = drbg.generate_with_state(size, add)
      print(f"{out.hex()} {K} {V}" if args.state else out.hex(), flush=True)
