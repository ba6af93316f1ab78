from __future__ import annotations

from secrets import token_bytes
from typing import Optional

from edkey.elliptic import G, EdPoint, mod, q, toint
from edkey.exceptions import MissingKeyError


def random_scalar() -> int:
  """Uniform-ish secret scalar from 32 random bytes, reduced mod q"""
  return mod(toint(token_bytes(32)), q)


class Key:
  """
  Ed25519 key: an optional private scalar and its public point.

  Key()                   Generate a new random keypair
  Key(priv=k)             Private key, public key derived as k * G
  Key(priv=k, pub=P)      Trusted pair, consistency is NOT checked
  Key(pub=P)              Public key only (priv is None)
  """

  def __init__(self, *, priv: Optional[int] = None, pub: Optional[EdPoint] = None):
    if priv is None and pub is None:
      priv = random_scalar()
    self.priv = priv
    self.pub = pub if pub is not None else G * priv

  @staticmethod
  def private(priv: int, nopublic=False) -> Key:
    """
    Key from a private scalar.

    With nopublic the public point is set to the placeholder G * q instead of
    being derived. Such keys are only for tests and must never be published.
    """
    return Key(priv=priv, pub=G * q if nopublic else G * priv)

  @staticmethod
  def from_pubbytes(b) -> Key:
    """Peer public key from the 64-byte point encoding. Raises FormatError if invalid."""
    return Key(pub=EdPoint.from_bytes(b).check())

  @property
  def has_private(self) -> bool:
    return self.priv is not None

  @property
  def pubbytes(self) -> bytes:
    return bytes(self.pub)

  def shared(self, peer: Key) -> EdPoint:
    """Diffie-Hellman shared point of our private and their public key"""
    if not self.has_private: raise MissingKeyError(f"Missing private key for {self!r}")
    return peer.pub * self.priv

  def __eq__(self, other):
    # Keys are identified by their public points
    if not isinstance(other, Key): return NotImplemented
    return self.pub == other.pub

  def __hash__(self):
    return hash(self.pub)

  def __repr__(self):
    t = 'SK' if self.has_private else 'PK'
    return f"Key[{bytes(self.pub.y).hex()[:8]}:{t}]"
