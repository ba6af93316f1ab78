from __future__ import annotations

from functools import cached_property
from typing import Optional

from ..exceptions import FormatError, InvalidPointError
from .scalar import fe, minus1, one, q, two, zero
from .util import fromhex, tobytes, toint

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Ed25519 constants:
a = minus1
d = fe(37095705934669439343138083508754565189542113879843219016388785533085940283555)

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Read the raw 64-byte x || y encoding. The point is not validated."""
    if len(b) != 64: raise FormatError(f"Point encoding must be 64 bytes, got {len(b)}")
    return EdPoint(fe(toint(b[:32])), fe(toint(b[32:])))

  @staticmethod
  def from_hex(s: str) -> EdPoint:
    return EdPoint.from_bytes(fromhex(s))

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.to_bytes()
  def __hash__(self): return hash((self.x.val, self.y.val))

  def to_bytes(self) -> bytes:
    """Affine x and y as 32-byte big endian integers, concatenated."""
    return tobytes(self.x.val) + tobytes(self.y.val)

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  @cached_property
  def is_identity(self) -> bool: return self == ZERO

  @cached_property
  def is_on_curve(self) -> bool:
    """Curve equation and T = XY/Z, checked without inversion"""
    if not self.Z: return False
    X2, Y2, Z2 = self.X.sq, self.Y.sq, self.Z.sq
    return (
      (a * X2 + Y2) * Z2 == Z2.sq + d * X2 * Y2 and
      self.X * self.Y == self.Z * self.T
    )

  @cached_property
  def is_prime_group(self) -> bool:
    """Point of order q (excludes ZERO)"""
    if not self.is_on_curve: return False
    # Low order ZERO and (0, -1) are the only points with x = 0
    if not self.X: return False
    return (q * self).is_identity

  def check(self) -> EdPoint:
    """Return self if the point is usable as a public key, raise InvalidPointError otherwise."""
    if not self.is_on_curve: raise InvalidPointError("Not a curve point on Ed25519")
    if not self.is_prime_group: raise InvalidPointError("Point is not in the prime order group")
    return self

  def double(self) -> EdPoint:
    # dbl-2008-hwcd for twisted Edwards curves in extended coordinates
    A = self.X.sq
    B = self.Y.sq
    C = two * self.Z.sq
    D = a * A
    E = (self.X + self.Y).sq - A - B
    G = D + B
    F = G - C
    H = D - B
    return EdPoint(E * F, G * H, F * G, E * H)

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    # add-2008-hwcd-4 (a = -1), which fails on doubling so that goes separately.
    # F is also zero for Q = P + (0, -1), never the case within the prime group.
    A = (self.Y - self.X) * (othr.Y + othr.X)
    B = (self.Y + self.X) * (othr.Y - othr.X)
    F = B - A
    if not F: return self.double()
    C = two * self.Z * othr.T
    D = two * self.T * othr.Z
    E, G, H = D + C, B + A, D - C
    return EdPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar using double-and-add (not constant time)."""
    if not isinstance(s, int): return NotImplemented
    if s < 0: return -self * -s
    Q = ZERO  # Neutral element
    P = self
    while s > 0:
      if s & 1: Q += P
      P = P.double()
      s >>= 1
    return Q

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      self.X * othr.Z == othr.X * self.Z and
      self.Y * othr.Z == othr.Y * self.Z
    )

# Neutral element
ZERO = EdPoint(zero, one, one, zero)

# Base point (prime group generator)
G = EdPoint(
  fe(15112221349535400772501151409588531511454012693041857206046113283949847762202),
  fe(46316835694926478169428394003475163141307993866256225615783033603165251855960),
  one,
  fe(46827403850823179245072216630277197565144205554125654976674165829533817101731),
)


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  if P.Z:
    for name, val in globals().items():
      if isinstance(val, EdPoint) and P == val:
        return name
  return f"EdPoint({P.X!r}, {P.Y!r}, {P.Z!r}, {P.T!r})"
