import sys

from edkey.elliptic import tobytes, toint
from edkey.elliptic.util import fromhex
from edkey.key import Key


def main_keygen(args):
  key = Key()
  print(tobytes(key.priv).hex())
  print(key.pubbytes.hex())
  if sys.stderr.isatty():
    sys.stderr.write(f"\x1B[1;30m 🔑 {key!r}  first line secret, second line public\x1B[0m\n")


def main_shared(args):
  if len(args.identities) != 1 or len(args.recipients) != 1:
    raise ValueError("Exactly one private key (-i) and one peer public key (-r) are needed")
  local = Key(priv=toint(fromhex(args.identities[0])))
  peer = Key.from_pubbytes(fromhex(args.recipients[0]))
  print(local.shared(peer))
