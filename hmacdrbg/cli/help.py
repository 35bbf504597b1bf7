import sys
from typing import NoReturn

import hmacdrbg

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  gen=f"""\
{C}hmacdrbg {F}gen -e {N}entropy {F}-n {N}nonce {D}[{F}-p {N}pers{D}] [{F}-a {N}add{D}]… [{F}-b {N}32{D}] [{F}-c {N}1{D}] [{F}-H {N}sha256{D}] [{F}-s{D}]{N}
""",
  nonce=f"{C}hmacdrbg {F}nonce -k {N}privkey {F}-d {N}digest {D}[{F}-C {N}p256 {D}| {F}-q {N}order{D}] [{F}-p {N}extra{D}] [{F}-H {N}sha256{D}]{N}\n",
  bench=f"{C}hmacdrbg {F}bench {D}—{N} measure generator throughput for each hash variant\n",
)

usagetext = dict(
  gen=f"""\
Instantiate a generator and print its output in hex, one line per generate call.
All inputs are given in hex. The same inputs always produce the same output.

  {F}-e {N}hex              Entropy input
  {F}-n {N}hex              Nonce
  {F}-p {N}hex              Personalization string
  {F}-a {N}hex              Additional input for a generate call (repeat for each call,
                      an empty string "" is still mixed in, unlike no input at all)
  {F}-b {N}bytes            Output bytes per call (default: the digest size)
  {F}-c {N}count            Number of generate calls (default: 1 or one per {F}-a{N})
  {F}-H {N}hash             sha256 (default), sha384 or sha512
  {F}-m {N}bytes            Minimum entropy for reseeding (required unless sha256)
  {F}-s --state{N}          Also print K and V after each call
""",
  nonce=f"""\
Derive the secret signing nonce k for a private key and a message digest, the
way deterministic ECDSA does (RFC 6979). Key and digest are given in hex.

  {F}-k {N}hex              Private key (big-endian scalar)
  {F}-d {N}hex              Message digest
  {F}-C {N}curve            p256 (default), secp256k1 or ed25519
  {F}-q {N}hex              Explicit group order instead of a named curve
  {F}-p {N}hex              Extra data mixed in as personalization
  {F}-H {N}hash             HMAC hash variant (default sha256)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"HMAC-DRBG {hmacdrbg.__version__} - Deterministic random bit generator (NIST SP 800-90A)"
introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
  {F}--help --version{N}   Useful information. Help applies to subcommands too.
  {F}--debug{N}            Show a traceback instead of an error message
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"HMAC-DRBG {hmacdrbg.__version__}")
  sys.exit(0)
