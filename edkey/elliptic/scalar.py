from __future__ import annotations

from functools import cached_property

from ..exceptions import DomainError

# Field prime (M)
p = 57896044618658097711785492504343953926634992332820282019728792003956564819949

# Prime group order (N), scalars are reduced modulo this
q = 7237005577332262213973186563042994240857116359379907606001950938285454250989

assert p == 2**255 - 19
assert q == 2**252 + 27742317777372353535851937790883648493


def mod(a: int, m: int = p) -> int:
  """Reduce a into [0, m)"""
  # Python's % already follows the sign of the divisor
  return a % m

def mod_inverse(a: int, m: int = p) -> int:
  """Multiplicative inverse of a modulo m by the extended Euclidean algorithm."""
  if m <= 0: raise DomainError(f"Modulus must be positive, got {m}")
  a = mod(a, m)
  if a == 0: raise DomainError("Zero has no modular inverse")
  b, x, u = m, 0, 1
  while a:
    quot, rem = divmod(b, a)
    b, a, x, u = a, rem, u, x - u * quot
  if b != 1: raise DomainError(f"No inverse exists, gcd with modulus is {b}")
  return mod(x, m)


class fe:
  """An element of the prime field modulo p = 2^255 - 19"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, "big")
  def __bool__(self): return self.val != 0

  def __eq__(self, other):
    # Returning NotImplemented would silently make fe(1) == 1 False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p. Raises DomainError on division by zero."""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return fe(mod_inverse(self.val))

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self


zero, one, two, minus1 = fe(0), fe(1), fe(2), fe(-1)


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  return f"fe({s.val})"
