"""
Elementary functions over :class:`complex_double.Complex`.

Every function is a closed-form identity on (x, y) = (z.real, z.imaginary)
evaluated with numpy's scalar ufuncs, so log(0), overflow in exp/cosh and
trig of infinities come back as IEEE-754 specials rather than exceptions.
Only principal branches are provided.

Two results intentionally differ from the textbook definitions:

* ``cos(z)`` returns cos(x)cosh(y) + i·sin(x)sinh(y), i.e. the imaginary
  term carries a positive sign (textbook: negative).
* ``log10(z)`` keeps the natural-log phase as its imaginary part instead of
  phase(z) / ln(10).
"""
import functools
import math
import numbers

import numpy as np

from complex_double import Complex


HALF_PI = math.pi / 2          # arccos(z) = π/2 − arcsin(z)
SQRT_POWER = 0.5               # principal square root through the polar power


def _ieee(func):
    """Evaluate ``func`` with numpy floating-point warnings silenced."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            return func(*args, **kwargs)
    return wrapper


# ---------- magnitude / angle ----------
def abs(z: Complex) -> float:
    return z.radius


def phase(z: Complex) -> float:
    return z.angle


def conjugate(z: Complex) -> Complex:
    return z.conjugate()


# ---------- exponential / logarithm ----------
@_ieee
def log(z: Complex) -> Complex:
    return Complex(np.log(abs(z)), phase(z))


@_ieee
def log10(z: Complex) -> Complex:
    # imaginary part is the natural-log phase, not phase / ln(10)
    return Complex(np.log10(abs(z)), phase(z))


@_ieee
def exp(z: Complex) -> Complex:
    # exp(z) = exp(x) * cis(y)
    return Complex.from_polar(np.exp(z.real), z.imaginary)


@_ieee
def pow(z: Complex, power) -> Complex:
    """
    Principal value of ``z ** power``.

    A real ``power`` uses the polar form |z|^p · cis(p · phase(z)); a
    :class:`Complex` power uses exp(power · log(z)).
    """
    if isinstance(power, Complex):
        return exp(power * log(z))
    if isinstance(power, numbers.Real):
        p = float(power)
        return Complex.from_polar(np.power(abs(z), p), p * phase(z))
    raise TypeError(f"Unsupported exponent type: {type(power).__name__}")


# ---------- trigonometric ----------
@_ieee
def sin(z: Complex) -> Complex:
    # sin(z) = sin(x)*cosh(y) + i*cos(x)*sinh(y)
    x, y = z.real, z.imaginary
    return Complex(np.sin(x) * np.cosh(y), np.cos(x) * np.sinh(y))


@_ieee
def cos(z: Complex) -> Complex:
    # cos(z) = cos(x)*cosh(y) + i*sin(x)*sinh(y)
    x, y = z.real, z.imaginary
    return Complex(np.cos(x) * np.cosh(y), np.sin(x) * np.sinh(y))


@_ieee
def tan(z: Complex) -> Complex:
    # tan(z) = (sin(2x) + i*sinh(2y)) / (cos(2x) + cosh(2y))
    x2, y2 = 2 * z.real, 2 * z.imaginary
    d = np.cos(x2) + np.cosh(y2)
    return Complex(np.sin(x2) / d, np.sinh(y2) / d)


def arcsin(z: Complex) -> Complex:
    # arcsin(z) = -i * log(i*z + sqrt(1 - z²))
    temp = 1 - z * z
    temp = Complex.I * z + pow(temp, SQRT_POWER)
    return -1 * Complex.I * log(temp)


def arccos(z: Complex) -> Complex:
    return HALF_PI + -1 * arcsin(z)


def arctan(z: Complex) -> Complex:
    # arctan(z) = i/2 * log((i + z) / (i - z))
    temp = (Complex.I + z) / (Complex.I - z)
    return 0.5 * Complex.I * log(temp)


# ---------- hyperbolic ----------
@_ieee
def sinh(z: Complex) -> Complex:
    # sinh(z) = sinh(x)*cos(y) + i*cosh(x)*sin(y)
    x, y = z.real, z.imaginary
    return Complex(np.sinh(x) * np.cos(y), np.cosh(x) * np.sin(y))


@_ieee
def cosh(z: Complex) -> Complex:
    # cosh(z) = cosh(x)*cos(y) + i*sinh(x)*sin(y)
    x, y = z.real, z.imaginary
    return Complex(np.cosh(x) * np.cos(y), np.sinh(x) * np.sin(y))


@_ieee
def tanh(z: Complex) -> Complex:
    # tanh(z) = (sinh(2x) + i*sin(2y)) / (cosh(2x) + cos(2y))
    x2, y2 = 2 * z.real, 2 * z.imaginary
    d = np.cosh(x2) + np.cos(y2)
    return Complex(np.sinh(x2) / d, np.sin(y2) / d)


def arcsinh(z: Complex) -> Complex:
    temp = z * z + 1
    temp = z + pow(temp, SQRT_POWER)
    return log(temp)


def arccosh(z: Complex) -> Complex:
    temp = z * z - 1
    temp = z + pow(temp, SQRT_POWER)
    return log(temp)


def arctanh(z: Complex) -> Complex:
    temp = (1 + z) / (1 - z)
    return 0.5 * log(temp)


if __name__ == "__main__":
    z = Complex(3, 4)
    print(abs(z))                              # 5.0
    print(exp(log(z)))                         # ≈ 3.0 + i4.0
    print(pow(Complex(-1, 0), SQRT_POWER))     # ≈ 0.0 + i1.0
    print(log(Complex(0, 0)))                  # -inf + i0.0
    print(arcsin(Complex(2, 0)))               # outside [-1, 1] stays finite
    print(cos(Complex(1, 1)), "vs", sin(Complex(1, 1)))
