import sys
from typing import NoReturn

import colorama

from hmacdrbg.cli.args import argparse
from hmacdrbg.cli.bench import main_bench
from hmacdrbg.cli.gen import main_gen
from hmacdrbg.cli.nonce import main_nonce

modes = {
  "gen": main_gen,
  "nonce": main_nonce,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Python code should use hmacdrbg.HmacDrbg or hmacdrbg.nonce.signing_nonce directly.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid input or generator failure (bad hex, insufficient entropy, ...)

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
