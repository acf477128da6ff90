"""
Special functions and mathematical constants.

Evaluated with mpmath at its default working precision and rounded back to
doubles, so the functions accept complex arguments and the constants are
correctly rounded.
"""

import mpmath as mpm

from .errors import DomainError

## constants
pi = float(mpm.pi)
e = float(mpm.e)
catalan = float(mpm.catalan)
euler = float(mpm.euler)
phi = float(mpm.phi)


def _to_mp(z: complex):
    z = complex(z)
    if z.imag == 0:
        return mpm.mpf(z.real)
    return mpm.mpc(z.real, z.imag)


def _to_complex(x) -> complex:
    return complex(x)


def gamma(z: complex) -> complex:
    """Euler gamma function; the poles at 0, -1, -2, ... raise DomainError."""
    try:
        return _to_complex(mpm.gamma(_to_mp(z)))
    except ValueError:
        raise DomainError(f"gamma is undefined at {complex(z)}")


def beta(a: complex, b: complex) -> complex:
    try:
        return _to_complex(mpm.beta(_to_mp(a), _to_mp(b)))
    except ValueError:
        raise DomainError(f"beta is undefined at ({complex(a)}, {complex(b)})")


def zeta(s: complex) -> complex:
    """Riemann zeta function; s = 1 is a pole."""
    if complex(s) == 1:
        raise DomainError("zeta has a pole at 1")
    return _to_complex(mpm.zeta(_to_mp(s)))


def erf(z: complex) -> complex:
    return _to_complex(mpm.erf(_to_mp(z)))
