import math
import numbers

import numpy as np


_QUIET_BIT = 1 << 51                               # IEEE-754 binary64 quiet-NaN flag
_SMALLEST_NORMAL = float(np.finfo(np.float64).tiny)


def _to_real(value) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    return float(value)


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 gives ±inf or nan instead of raising."""
    with np.errstate(all="ignore"):
        return float(np.true_divide(a, b))


def _bits(x: float) -> int:
    return int(np.asarray(x, dtype=np.float64).view(np.uint64))


# ---------- per-component classification ----------
def _is_normal(x: float) -> bool:
    return bool(np.isfinite(x)) and math.fabs(x) >= _SMALLEST_NORMAL


def _is_subnormal(x: float) -> bool:
    return x != 0.0 and math.fabs(x) < _SMALLEST_NORMAL


def _is_signaling(x: float) -> bool:
    return bool(np.isnan(x)) and not (_bits(x) & _QUIET_BIT)


class Complex:
    """
    An immutable complex number backed by two 64-bit floats.

    Constructors
    ------------
    Complex(a, b)                 -> a + b i          (rectangular)
    Complex(r, theta, polar=True) -> r·e^{iθ}         (polar)
    Complex(x)                    -> x + 0 i          (real embedding)

    Complex.from_rectangular, Complex.from_polar, Complex.from_int and
    Complex.from_float are the explicit spellings.

    Every operator returns a new instance. Division by zero, overflow and
    NaN operands follow IEEE-754 and never raise.

    Instances are frozen: the parts are set once in ``__new__`` and any
    later attribute assignment or deletion raises AttributeError.
    """

    __slots__ = ("_real", "_imaginary")

    # ---------- construction ----------
    def __new__(cls, *args, polar: bool = False):
        if polar:                              # polar form
            if len(args) != 2:
                raise ValueError("Polar form needs (r, θ)")
            r, theta = (_to_real(a) for a in args)
            with np.errstate(all="ignore"):
                real = float(r * np.cos(theta))
                imaginary = float(r * np.sin(theta))
        else:                                  # rectangular or real embedding
            if len(args) == 1:                 # x + 0i, imaginary is always +0.0
                real, imaginary = _to_real(args[0]), 0.0
            elif len(args) == 2:               # a + b i
                real, imaginary = (_to_real(a) for a in args)
            else:
                raise ValueError("Rectangular form needs (a, b) or a single real")
        self = super().__new__(cls)
        object.__setattr__(self, "_real", real)
        object.__setattr__(self, "_imaginary", imaginary)
        return self

    def __setattr__(self, name, value):
        raise AttributeError(f"Complex is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Complex is immutable, cannot delete {name!r}")

    def __reduce__(self):
        return (Complex, (self._real, self._imaginary))

    # ---------- convenience makers ----------
    @classmethod
    def from_rectangular(cls, real: float, imaginary: float) -> "Complex":
        return cls(real, imaginary)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Complex":
        """Explicit polar constructor. The angle is not reduced and a negative radius is kept."""
        return cls(radius, angle, polar=True)

    @classmethod
    def from_int(cls, value: int) -> "Complex":
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"Expected an integer, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> "Complex":
        return cls(value)

    # ---------- components ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imaginary(self) -> float:
        return self._imaginary

    imag = imaginary

    @property
    def radius(self) -> float:
        """Magnitude, computed with hypot so that it does not overflow early."""
        with np.errstate(all="ignore"):
            return float(np.hypot(self._real, self._imaginary))

    @property
    def angle(self) -> float:
        """Four-quadrant angle in radians, in [-π, π]."""
        with np.errstate(all="ignore"):
            return float(np.arctan2(self._imaginary, self._real))

    def conjugate(self) -> "Complex":
        return Complex(self._real, -self._imaginary)

    # ---------- classification ----------
    # "both" predicates need real AND imaginary, "either" ones real OR imaginary
    def is_finite(self) -> bool:
        return bool(np.isfinite(self._real) and np.isfinite(self._imaginary))

    def is_infinite(self) -> bool:
        return bool(np.isinf(self._real) or np.isinf(self._imaginary))

    def is_normal(self) -> bool:
        return _is_normal(self._real) and _is_normal(self._imaginary)

    def is_subnormal(self) -> bool:
        return _is_subnormal(self._real) or _is_subnormal(self._imaginary)

    def is_zero(self) -> bool:
        return self._real == 0.0 and self._imaginary == 0.0

    def is_nan(self) -> bool:
        return bool(np.isnan(self._real) or np.isnan(self._imaginary))

    def is_signaling(self) -> bool:
        return _is_signaling(self._real) or _is_signaling(self._imaginary)

    def is_sign_minus(self) -> bool:
        return bool(np.signbit(self._real) or np.signbit(self._imaginary))

    # ---------- arithmetic ----------
    def __add__(self, other):
        if isinstance(other, Complex):
            return Complex(self._real + other._real, self._imaginary + other._imaginary)
        if isinstance(other, numbers.Real):
            return Complex(self._real + float(other), self._imaginary)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Complex):
            return Complex(self._real - other._real, self._imaginary - other._imaginary)
        if isinstance(other, numbers.Real):
            return Complex(self._real - float(other), self._imaginary)
        return NotImplemented

    def __rsub__(self, other):
        # s - z keeps the real part of s and negates the imaginary part of z
        if isinstance(other, numbers.Real):
            return Complex(float(other) - self._real, -self._imaginary)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Complex):
            a, b, c, d = self._real, self._imaginary, other._real, other._imaginary
            return Complex(a * c - b * d, b * c + a * d)
        if isinstance(other, numbers.Real):
            s = float(other)
            return Complex(self._real * s, self._imaginary * s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Complex):
            # (a+bi)/(c+di) = (a+bi)(c-di) / (c²+d²), no guard for a zero divisor
            a, b, c, d = self._real, self._imaginary, other._real, other._imaginary
            denom = c * c + d * d
            return Complex(_divide(a * c + b * d, denom), _divide(b * c - a * d, denom))
        if isinstance(other, numbers.Real):
            s = float(other)
            return Complex(_divide(self._real, s), _divide(self._imaginary, s))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return Complex(other) / self
        return NotImplemented

    def __pow__(self, power):
        if isinstance(power, (Complex, numbers.Real)):
            return complex_math.pow(self, power)
        return NotImplemented

    def __rpow__(self, base):
        if isinstance(base, numbers.Real):
            return complex_math.pow(Complex(base), self)
        return NotImplemented

    def __neg__(self) -> "Complex":
        return Complex(-self._real, -self._imaginary)

    def __pos__(self) -> "Complex":
        return Complex(self._real, self._imaginary)

    def __abs__(self) -> float:
        return self.radius

    # ---------- comparison / hashing ----------
    def __eq__(self, other):
        # plain IEEE equality per component, so anything holding a NaN is unequal to itself
        if isinstance(other, Complex):
            return self._real == other._real and self._imaginary == other._imaginary
        if isinstance(other, numbers.Real):
            return self._real == other and self._imaginary == 0.0
        return NotImplemented

    def __hash__(self):
        if self._imaginary == 0.0:
            return hash(self._real)            # agrees with hash(x) when Complex(x) == x
        return hash((self._real, self._imaginary))

    # ---------- conversions ----------
    def __complex__(self) -> complex:
        return complex(self._real, self._imaginary)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ---------- rendering ----------
    def __str__(self):
        if np.signbit(self._imaginary):        # catches -0.0 and negative NaNs too
            return f"{self._real} - i{math.fabs(self._imaginary)}"
        return f"{self._real} + i{self._imaginary}"

    def __repr__(self):
        return f"Complex(real={self._real!r}, imaginary={self._imaginary!r})"


Complex.I = Complex(0.0, 1.0)
Complex.infinity = Complex(math.inf, math.inf)
Complex.nan = Complex(math.nan, math.nan)
Complex.quiet_nan = Complex(float(np.nan), float(np.nan))

# complex_math imports Complex from here, so it can only be loaded once the class exists
import complex_math  # noqa: E402


if __name__ == "__main__":
    z1 = Complex(3, 4)                     # 3 + 4i
    z2 = Complex.from_polar(2, math.pi/4)  # 2·e^{iπ/4}
    print(abs(z1))                         # 5.0
    print(z1 + z2)                         # vector addition
    print(z1 * z2)                         # operator sugar for multiply
    print(1 / z1)                          # multiplicative inverse
    print(Complex.I * Complex.I)           # -1.0 + i0.0
    print(Complex(1, -0.0))                # 1.0 - i0.0
    print(z1 / Complex(0, 0))              # no exception, IEEE special values
