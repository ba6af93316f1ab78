import sys
from secrets import token_bytes
from time import perf_counter

import nacl.bindings as sodium
from tqdm import tqdm

from edkey.key import Key


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise ValueError(f"Invalid number of rounds: {args.rounds}") from None
  if rounds < 1:
    raise ValueError("Number of rounds must be positive")

  def progress(desc):
    return tqdm(range(rounds), desc=desc, delay=1.0, ncols=78, unit='dh', leave=False, file=sys.stderr)

  # Both parties generate keys and derive the shared point from each side
  t0 = perf_counter()
  for i in progress("edkey"):
    alice, bob = Key(), Key()
    if alice.shared(bob) != bob.shared(alice):
      raise ValueError(f"Shared point mismatch on round {i}")
  ours = perf_counter() - t0

  t0 = perf_counter()
  for i in progress("sodium"):
    a = sodium.crypto_core_ed25519_scalar_reduce(token_bytes(64))
    b = sodium.crypto_core_ed25519_scalar_reduce(token_bytes(64))
    A = sodium.crypto_scalarmult_ed25519_base_noclamp(a)
    B = sodium.crypto_scalarmult_ed25519_base_noclamp(b)
    if sodium.crypto_scalarmult_ed25519_noclamp(a, B) != sodium.crypto_scalarmult_ed25519_noclamp(b, A):
      raise ValueError(f"libsodium shared point mismatch on round {i}")
  theirs = perf_counter() - t0

  print(f"Ran {rounds} rounds, each with two keypairs and two shared point derivations.\n")
  print(f"edkey  {rounds / ours:10.1f} rounds/s  {ours * 1e3 / rounds:10.3f} ms/round")
  print(f"sodium {rounds / theirs:10.1f} rounds/s  {theirs * 1e3 / rounds:10.3f} ms/round")
  print(f"\nlibsodium is {ours / theirs:.0f} times faster")
