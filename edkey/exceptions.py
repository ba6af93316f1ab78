class DomainError(ValueError):
  """Modular inverse requested for a value that has none"""

class FormatError(ValueError):
  """Byte buffer or string does not hold a valid encoding"""

class InvalidPointError(FormatError):
  """Point is not on the curve or not in the prime order group"""

class MissingKeyError(ValueError):
  """Private key operation attempted with a public-only key"""
