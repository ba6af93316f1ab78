# A plain Python submodule for Ed25519 point arithmetic

# Formulas for extended twisted Edwards coordinates from the Explicit-Formulas
# Database: https://www.hyperelliptic.org/EFD/g1p/auto-twisted-extended-1.html

# Not constant time and not zeroing buffers after use. Scalar multiplication
# leaks the bit pattern of the scalar through timing, so a side-channel resistant
# library should be preferred wherever an attacker can measure.

# Public symbols are imported here. Lower case constants are scalars (int or fe),
# upper case are EdPoints.

from .ed import ZERO, EdPoint, G, a, d
from .scalar import fe, minus1, mod, mod_inverse, one, p, q, two, zero
from .util import tobytes, toint
