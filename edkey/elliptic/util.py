from ..exceptions import FormatError


def toint(x) -> int:
  """Unsigned big endian 32-byte integer"""
  if isinstance(x, int): return x
  if len(x) != 32: raise FormatError("Should be exactly 32 bytes")
  return int.from_bytes(x, "big")

def tobytes(x: int) -> bytes:
  """Left zero-padded 32-byte big endian encoding"""
  return x.to_bytes(32, "big")

def fromhex(s: str) -> bytes:
  try:
    return bytes.fromhex(s.strip())
  except ValueError:
    raise FormatError(f"Invalid hex string {s[:16]!r}") from None
