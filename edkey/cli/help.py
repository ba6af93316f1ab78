import sys
from typing import NoReturn

import edkey

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}edkey {F}keygen {D}—{N} create a random keypair and print it in hex\n",
  shared=f"{C}edkey {F}shared -i {N}privhex {F}-r {N}pubhex {D}—{N} derive a Diffie-Hellman shared point\n",
  bench=f"{C}edkey {F}bench {D}[{F}-n {N}100{D}] —{N} time key agreement against libsodium\n",
)

usagetext = dict(
  keygen=f"""\
Prints the private scalar as 32 bytes of big endian hex, followed by the public
key as 64 bytes of hex (affine x and y, big endian). This is NOT the standard
32-byte Ed25519 public key format.
""",
  shared=f"""\
Multiplies the peer public key by your private scalar. The peer key is checked
to be a curve point in the prime order group before use.

  {F}-i {N}privhex        Your private scalar (64 hex digits)
  {F}-r {N}pubhex         Their public key (128 hex digits)
""",
  bench=f"""\
Each round generates two keypairs and derives the shared point from both sides,
then the same is repeated using libsodium for comparison. The pure Python code
is orders of magnitude slower and it is not constant time.

  {F}-n --rounds {N}N     Number of rounds (default 100)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"""\
{T}{f"edkey {edkey.__version__} - Ed25519 point arithmetic and keys":78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
  {F}--debug{N}           Show full tracebacks on errors
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  stream.write(cmdhelp.get(modehelp, shorthelp))
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"edkey {edkey.__version__}")
  sys.exit(0)
