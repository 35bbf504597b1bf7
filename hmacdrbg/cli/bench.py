from secrets import token_bytes
from time import perf_counter

from hmacdrbg.drbg import HmacDrbg
from hmacdrbg.hasher import HashVariant, Hasher

DATASIZE = 10 << 20
BLOCKSIZE = 4096


def main_bench(args):
  datasize, blocksize = DATASIZE, BLOCKSIZE
  rounds = 3
  for variant in HashVariant:
    hasher = Hasher(variant)
    total = 0.0
    print(f"{variant.name:8}", end="", flush=True)
    for i in range(rounds):
      with HmacDrbg(token_bytes(48), token_bytes(16), hasher=hasher, minimum_entropy=32) as drbg:
        t0 = perf_counter()
        for _ in range(datasize // blocksize):
          drbg.generate(blocksize)
        dur = perf_counter() - t0
      total += dur
      print(f"{datasize / dur * 1e-6:6.1f} MB/s", end="", flush=True)
    print(f"   ➤  average {rounds * datasize / total * 1e-6:6.1f} MB/s")
  print(f"\nRan {rounds} cycles per variant, each generating {datasize * 1e-6:.0f} MB in {blocksize} byte calls.")
