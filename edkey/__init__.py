__version__ = "0.1.0"

from .elliptic import G, ZERO, EdPoint, q
from .exceptions import DomainError, FormatError, InvalidPointError, MissingKeyError
from .key import Key
