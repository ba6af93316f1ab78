from secrets import randbelow, token_bytes

import nacl.bindings as sodium
import pytest

from edkey.elliptic import *
from edkey.exceptions import DomainError, FormatError, InvalidPointError

# 5 * G in the raw x || y encoding
FIVE_G = bytes.fromhex(
  "49fda73eade3587bfcef7cf7d12da5de5c2819f93e1be1a591409cc0322ef233"
  "5f4825b298feae6fe02c6e148992466631282eca89430b5d10d21f83d676c8ed"
)

# The order two point (0, -1), on the curve but outside the prime group
LO2 = EdPoint(zero, minus1)


def edpk(P: EdPoint) -> bytes:
  """Standard compressed Ed25519 encoding, for comparison with libsodium"""
  return (P.y.val | (P.x.val & 1) << 255).to_bytes(32, "little")

def randpoint() -> EdPoint:
  return randbelow(q) * G


def test_fe():
  assert one + zero == one
  assert zero - one == minus1
  assert fe(1234) / fe(324123) == (fe(324123) / fe(1234)).inv
  assert fe(p + 5) == fe(5)
  assert repr(fe(1234)) == "fe(1234)"
  assert repr(fe(-1)) == "minus1"
  assert bytes(zero) == bytes(32)
  assert str(one) == 31 * "00" + "01"

  x = fe(toint(token_bytes(32)))
  assert x.inv.inv == x
  assert x**3 == x * x * x
  assert x * fe(2) == x + x

  with pytest.raises(TypeError):
    one == 1

  with pytest.raises(DomainError):
    one / zero


def test_mod():
  assert mod(-1) == p - 1
  assert mod(-1, q) == q - 1
  assert mod(p) == 0
  assert mod(7, 5) == 2


def test_mod_inverse():
  for m in (p, q):
    for a in (1, 2, m - 1, toint(token_bytes(32)) % (m - 1) + 1):
      assert a * mod_inverse(a, m) % m == 1
      assert mod_inverse(a, m) == pow(a, m - 2, m)
  # Composite modulus works for coprime values
  assert mod_inverse(7, 40) == 23
  assert mod_inverse(-3, 40) == 13


@pytest.mark.parametrize("a, m", [(0, p), (p, p), (0, q), (q, q), (6, 9), (5, 0), (1, -7)])
def test_mod_inverse_errors(a, m):
  with pytest.raises(DomainError):
    mod_inverse(a, m)


def test_constants():
  assert p == 57896044618658097711785492504343953926634992332820282019728792003956564819949
  assert q == 7237005577332262213973186563042994240857116359379907606001950938285454250989
  assert a == minus1
  assert d == -fe(121665) / fe(121666)
  assert G.T == G.X * G.Y
  assert G.y == fe(4) / fe(5)
  assert G.is_on_curve
  assert G.is_prime_group
  assert ZERO.is_identity
  assert not G.is_identity
  assert repr(ZERO) == "ZERO"
  assert repr(G) == "G"
  assert repr(2 * G).startswith("EdPoint(fe(")


def test_identity():
  P = randpoint()
  assert P + ZERO == P
  assert ZERO + P == P
  assert 0 * P == ZERO
  assert 1 * P == P
  assert ZERO + ZERO == ZERO
  assert ZERO.double() == ZERO
  assert P - P == ZERO
  assert (P + -P).is_identity


def test_double():
  for P in (G, randpoint(), LO2):
    assert P + P == P.double()
  assert G.double() == 2 * G
  assert LO2.double() == ZERO
  # Doubling keeps T consistent
  Q = G.double().double()
  assert Q.X * Q.Y == Q.Z * Q.T


def test_equality():
  P = randpoint()
  # Scaling all coordinates gives the same point
  s = fe(toint(token_bytes(32)))
  Ps = EdPoint(P.X * s, P.Y * s, P.Z * s, P.T * s)
  assert Ps == P
  assert hash(Ps) == hash(P)
  assert len({G, 2 * G, G + G, G.double()}) == 2
  assert P != -P
  assert P != G + P
  with pytest.raises(TypeError):
    G == bytes(G)


def test_negate():
  P = randpoint()
  N = -P
  assert N.X == -P.X and N.T == -P.T
  assert N.Y == P.Y and N.Z == P.Z
  assert N.x == -P.x
  assert -N == P
  assert -ZERO == ZERO


def test_scalar_multiplication():
  k1, k2 = randbelow(q), randbelow(q)
  P = randpoint()
  assert (k1 + k2) * P == k1 * P + k2 * P
  assert (k1 * k2) * G == k2 * (k1 * G)
  assert 5 * G == G + G + G + G + G
  assert G * 3 == 3 * G
  assert -3 * G == -(3 * G)
  assert (3 * G).is_on_curve
  # No reduction of the scalar, the group order just wraps around
  assert (q + 5) * G == 5 * G
  assert q * G == ZERO
  assert (q - 1) * G == -G
  with pytest.raises(TypeError):
    G * 1.5


def test_codec():
  P = 5 * G
  assert bytes(P) == FIVE_G
  assert P.to_bytes() == FIVE_G
  assert str(P) == FIVE_G.hex()
  assert P.x == fe(33467004535436536005251147249499675200073690106659565782908757308821616914995)
  assert P.y == fe(43097193783671926753355113395909008640284023746042808659097434958891230611693)

  Q = EdPoint.from_bytes(FIVE_G)
  assert Q == P
  assert Q.Z == one
  assert Q.T == Q.X * Q.Y
  assert Q.is_prime_group
  assert EdPoint.from_hex(FIVE_G.hex()) == P

  # The identity encodes as x = 0, y = 1
  assert bytes(ZERO) == bytes(63) + b"\x01"
  assert EdPoint.from_bytes(bytes(ZERO)).is_identity

  # Round trip of projective points with Z != 1
  P = randpoint()
  assert P.Z != one
  assert EdPoint.from_bytes(bytes(P)) == P
  assert len(bytes(P)) == 64


@pytest.mark.parametrize("length", [0, 32, 63, 65, 128])
def test_codec_length(length):
  with pytest.raises(FormatError) as exc:
    EdPoint.from_bytes(bytes(length))
  assert "64 bytes" in str(exc.value)


def test_codec_errors():
  with pytest.raises(FormatError):
    EdPoint.from_hex("not hex")
  with pytest.raises(FormatError):
    toint(bytes(31))
  # No inverse for Z = 0
  with pytest.raises(DomainError):
    bytes(EdPoint(one, one, zero, zero))


def test_validation():
  assert (5 * G).check() == 5 * G
  assert not ZERO.is_prime_group
  with pytest.raises(InvalidPointError):
    ZERO.check()
  # Decoding does not validate, checking does
  bogus = EdPoint.from_bytes(tobytes(1) + tobytes(2))
  assert not bogus.is_on_curve
  with pytest.raises(InvalidPointError) as exc:
    bogus.check()
  assert "Not a curve point" in str(exc.value)

  # Low order points are on the curve but not in the prime group
  assert LO2.is_on_curve
  assert not LO2.is_prime_group
  with pytest.raises(InvalidPointError) as exc:
    (G + LO2).check()
  assert "prime order group" in str(exc.value)

  # Inconsistent T
  assert not EdPoint(G.X, G.Y, one, one).is_on_curve
  assert not EdPoint(one, one, zero, zero).is_on_curve


def test_vs_sodium():
  assert edpk(5 * G).hex() == "edc876d6831fd2105d0b4389ca2e283166469289146e2ce06faefe98b22548df"
  assert edpk(G) == sodium.crypto_scalarmult_ed25519_base_noclamp(tobytes(1)[::-1])

  k = randbelow(q - 1) + 1
  K = k * G
  assert edpk(K) == sodium.crypto_scalarmult_ed25519_base_noclamp(k.to_bytes(32, "little"))

  P, Q = randpoint(), randpoint()
  assert edpk(P + Q) == sodium.crypto_core_ed25519_add(edpk(P), edpk(Q))
  assert edpk(P - Q) == sodium.crypto_core_ed25519_sub(edpk(P), edpk(Q))
  assert edpk(k * P) == sodium.crypto_scalarmult_ed25519_noclamp(k.to_bytes(32, "little"), edpk(P))
