"""
Complex numbers over a generic real scalar type.

:class:`Complex_F` keeps the real and imaginary parts as they are and
computes everything from them with the scalar backend ``F``
(see :mod:`tf_complex.backend`). The arithmetic only needs ``+ - * /`` of
the scalars, so it also works for exact types such as ``int`` and
:class:`~fractions.Fraction`. The transcendental functions need the real
primitives of the backend.

Division by zero is never checked here, the scalar division decides:
Python numbers raise :class:`ZeroDivisionError`, numpy and tensorflow give
``inf`` or ``nan``.

>>> a = Complex_F(-1.0, 1.0)
>>> str(a / Complex_F(0.0, 1.0))
'1+1i'

"""
import numbers

import numpy as np

from .backend import (
    default_backend,
    get_backend,
    is_scalar,
    join_backend,
    split_complex,
)


class Complex_F(object):
    """
    A complex number in Cartesian form ``re + i im``.

    :param re: Real part.
    :param im: Imaginary part.
    :param F: Scalar backend. When it is None, the backend is resolved from ``re`` and ``im``
        and both parts are cast to its scalar type.
    """

    # numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, re, im, F=None):
        if F is None:
            F = get_backend(re, im)
            re, im = F.cast(re), F.cast(im)
        self.F = F
        self.re = re
        self.im = im

    @classmethod
    def new(cls, re, im, F=None):
        return cls(re, im, F)

    @classmethod
    def zero(cls, F=None):
        if F is None:
            F = default_backend()
        return cls(F.zero(), F.zero(), F)

    @classmethod
    def one(cls, F=None):
        if F is None:
            F = default_backend()
        return cls(F.one(), F.zero(), F)

    @classmethod
    def i(cls, F=None):
        """the imaginary unit"""
        if F is None:
            F = default_backend()
        return cls(F.zero(), F.one(), F)

    @classmethod
    def from_polar(cls, r, theta, F=None):
        """Convert a polar representation ``r e^(i theta)`` into a complex number."""
        if F is None:
            F = get_backend(r, theta)
        return cls(r * F.cos(theta), r * F.sin(theta), F)

    @classmethod
    def from_complex(cls, c, F=None):
        if F is None:
            return cls(c.real, c.imag)
        return cls(F.cast(c.real), F.cast(c.imag), F)

    @property
    def real(self):
        return self.re

    @property
    def imag(self):
        return self.im

    def _join(self, other):
        if isinstance(other, Complex_F):
            return join_backend(self.F, other.F)
        if self.F.accepts(other):
            return self.F
        return join_backend(self.F, get_backend(other))

    def _lift(self, other):
        """``other`` as a Complex_F, None if it is not a number"""
        if isinstance(other, Complex_F):
            return other
        if isinstance(other, complex):
            F = self.F
            return Complex_F(F.cast(other.real), F.cast(other.imag), F)
        parts = split_complex(other)
        if parts is not None:
            return Complex_F(*parts)
        if is_scalar(other):
            F = self._join(other)
            return Complex_F(other, F.zero(), F)
        return None

    # ring operations

    def norm_sqr(self):
        """``re^2 + im^2``, it does not need ``sqrt`` from the scalar type"""
        return self.re * self.re + self.im * self.im

    def scale(self, t):
        """Multiplies ``self`` by the scalar ``t``."""
        return Complex_F(self.re * t, self.im * t, self._join(t))

    def unscale(self, t):
        """Divides ``self`` by the scalar ``t``."""
        return Complex_F(self.re / t, self.im / t, self._join(t))

    def conj(self):
        return Complex_F(self.re, -self.im, self.F)

    def inv(self):
        """``1/self``, the scalar division decides what happens at zero"""
        norm_sqr = self.norm_sqr()
        return Complex_F(self.re / norm_sqr, -self.im / norm_sqr, self.F)

    def powi(self, n):
        """``self ** n`` for an integer ``n`` by repeated squaring"""
        if n < 0:
            return self.powi(-n).inv()
        ret = Complex_F.one(self.F)
        base = self
        while n:
            if n & 1:
                ret = ret * base
            n >>= 1
            if n:
                base = base * base
        return ret

    def __add__(self, other):
        # (a + i b) + (c + i d) == (a + c) + i (b + d)
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return Complex_F(
            self.re + other.re, self.im + other.im, self._join(other)
        )

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        # (a + i b) - (c + i d) == (a - c) + i (b - d)
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return Complex_F(
            self.re - other.re, self.im - other.im, self._join(other)
        )

    def __rsub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        # (a + i b) * (c + i d) == (a*c - b*d) + i (a*d + b*c)
        if is_scalar(other):
            return self.scale(other)
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return Complex_F(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
            self._join(other),
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        # (a + i b) / (c + i d) == [(a + i b) * (c - i d)] / (c*c + d*d)
        #   == [(a*c + b*d) / (c*c + d*d)] + i [(b*c - a*d) / (c*c + d*d)]
        if is_scalar(other):
            return self.unscale(other)
        other = self._lift(other)
        if other is None:
            return NotImplemented
        norm_sqr = other.norm_sqr()
        return Complex_F(
            (self.re * other.re + self.im * other.im) / norm_sqr,
            (self.im * other.re - self.re * other.im) / norm_sqr,
            self._join(other),
        )

    def __rtruediv__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pow__(self, other):
        if isinstance(other, numbers.Integral):
            return self.powi(int(other))
        other = self._lift(other)
        if other is None:
            return NotImplemented
        F = self._join(other)
        if other.is_zero():
            return Complex_F.one(F)
        if self.is_zero():
            return Complex_F.zero(F)
        return (other * self.ln()).exp()

    def __rpow__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other**self

    def __neg__(self):
        return Complex_F(-self.re, -self.im, self.F)

    def __pos__(self):
        return Complex_F(self.re, self.im, self.F)

    def __abs__(self):
        return self.norm()

    def __eq__(self, other):
        if isinstance(other, Complex_F):
            return bool(self.re == other.re) and bool(self.im == other.im)
        return NotImplemented

    def __hash__(self):
        F = self.F
        return hash((F.hash_key(self.re), F.hash_key(self.im)))

    def is_zero(self):
        zero = self.F.zero()
        return bool(self.re == zero) and bool(self.im == zero)

    def __bool__(self):
        return not self.is_zero()

    def is_nan(self):
        return self.F.is_nan(self.re) or self.F.is_nan(self.im)

    # polar form and transcendental functions

    def norm(self):
        """``|self|``"""
        return self.F.hypot(self.re, self.im)

    def arg(self):
        """the principal Arg of ``self``, in ``(-pi, pi]``"""
        return self.F.atan2(self.im, self.re)

    def to_polar(self):
        """Convert to polar form ``(r, theta)``, such that ``self = r * exp(i * theta)``"""
        return self.norm(), self.arg()

    def exp(self):
        # e^(a + bi) = e^a (cos(b) + i*sin(b))
        F = self.F
        return Complex_F(F.cos(self.im), F.sin(self.im), F).scale(
            F.exp(self.re)
        )

    def ln(self):
        """
        The principal value of natural logarithm of ``self``.

        It has one branch cut ``(-inf, 0]``, continuous from above,
        and ``-pi <= arg(ln(z)) <= pi``.
        """
        # ln(z) = ln|z| + i*arg(z)
        return Complex_F(self.F.ln(self.norm()), self.arg(), self.F)

    def sqrt(self):
        """
        The principal value of the square root of ``self``.

        It has one branch cut ``(-inf, 0)``, continuous from above,
        and ``-pi/2 <= arg(sqrt(z)) <= pi/2``.
        """
        # sqrt(r e^(it)) = sqrt(r) e^(it/2)
        F = self.F
        two = F.one() + F.one()
        r, theta = self.to_polar()
        return Complex_F.from_polar(F.sqrt(r), theta / two, F)

    def sin(self):
        # sin(a + bi) = sin(a)cosh(b) + i*cos(a)sinh(b)
        F = self.F
        return Complex_F(
            F.sin(self.re) * F.cosh(self.im),
            F.cos(self.re) * F.sinh(self.im),
            F,
        )

    def cos(self):
        # cos(a + bi) = cos(a)cosh(b) - i*sin(a)sinh(b)
        F = self.F
        return Complex_F(
            F.cos(self.re) * F.cosh(self.im),
            -F.sin(self.re) * F.sinh(self.im),
            F,
        )

    def tan(self):
        # tan(a + bi) = (sin(2a) + i*sinh(2b))/(cos(2a) + cosh(2b))
        F = self.F
        two_re, two_im = self.re + self.re, self.im + self.im
        return Complex_F(F.sin(two_re), F.sinh(two_im), F).unscale(
            F.cos(two_re) + F.cosh(two_im)
        )

    def sinh(self):
        # sinh(a + bi) = sinh(a)cos(b) + i*cosh(a)sin(b)
        F = self.F
        return Complex_F(
            F.sinh(self.re) * F.cos(self.im),
            F.cosh(self.re) * F.sin(self.im),
            F,
        )

    def cosh(self):
        # cosh(a + bi) = cosh(a)cos(b) + i*sinh(a)sin(b)
        F = self.F
        return Complex_F(
            F.cosh(self.re) * F.cos(self.im),
            F.sinh(self.re) * F.sin(self.im),
            F,
        )

    def tanh(self):
        # tanh(a + bi) = (sinh(2a) + i*sin(2b))/(cosh(2a) + cos(2b))
        F = self.F
        two_re, two_im = self.re + self.re, self.im + self.im
        return Complex_F(F.sinh(two_re), F.sin(two_im), F).unscale(
            F.cosh(two_re) + F.cos(two_im)
        )

    def asin(self):
        """
        The principal value of the inverse sine of ``self``.

        Branch cuts: ``(-inf, -1)`` continuous from above, ``(1, inf)`` continuous from below.
        ``-pi/2 <= asin(z).re <= pi/2``.
        """
        # arcsin(z) = -i ln(sqrt(1-z^2) + iz)
        i = Complex_F.i(self.F)
        one = Complex_F.one(self.F)
        return -i * ((one - self * self).sqrt() + i * self).ln()

    def acos(self):
        """
        The principal value of the inverse cosine of ``self``.

        Branch cuts: ``(-inf, -1)`` continuous from above, ``(1, inf)`` continuous from below.
        ``0 <= acos(z).re <= pi``.
        """
        # arccos(z) = -i ln(i sqrt(1-z^2) + z)
        i = Complex_F.i(self.F)
        one = Complex_F.one(self.F)
        return -i * (i * (one - self * self).sqrt() + self).ln()

    def atan(self):
        """
        The principal value of the inverse tangent of ``self``.

        Branch cuts: ``(-inf i, -i]`` continuous from the left, ``[i, inf i)`` continuous from the right.
        ``-pi/2 <= atan(z).re <= pi/2``. ``atan(i)`` and ``atan(-i)`` are ``(0, inf)`` and ``(0, -inf)``.
        """
        # arctan(z) = (ln(1+iz) - ln(1-iz))/(2i)
        F = self.F
        i = Complex_F.i(F)
        one = Complex_F.one(F)
        two = one + one
        if self == i:
            return Complex_F(F.zero(), F.infinity(), F)
        elif self == -i:
            return Complex_F(F.zero(), -F.infinity(), F)
        return ((one + i * self).ln() - (one - i * self).ln()) / (two * i)

    def asinh(self):
        """
        The principal value of inverse hyperbolic sine of ``self``.

        Branch cuts: ``(-inf i, -i)`` continuous from the left, ``(i, inf i)`` continuous from the right.
        ``-pi/2 <= asinh(z).im <= pi/2``.
        """
        # arcsinh(z) = ln(z + sqrt(1+z^2))
        one = Complex_F.one(self.F)
        return (self + (one + self * self).sqrt()).ln()

    def acosh(self):
        """
        The principal value of inverse hyperbolic cosine of ``self``.

        Branch cut: ``(-inf, 1)`` continuous from above.
        ``-pi <= acosh(z).im <= pi`` and ``0 <= acosh(z).re``.
        """
        # arccosh(z) = 2 ln(sqrt((z+1)/2) + sqrt((z-1)/2))
        one = Complex_F.one(self.F)
        two = one + one
        return two * (
            ((self + one) / two).sqrt() + ((self - one) / two).sqrt()
        ).ln()

    def atanh(self):
        """
        The principal value of inverse hyperbolic tangent of ``self``.

        Branch cuts: ``(-inf, -1]`` continuous from above, ``[1, inf)`` continuous from below.
        ``-pi/2 <= atanh(z).im <= pi/2``. ``atanh(1)`` and ``atanh(-1)`` are ``(inf, 0)`` and ``(-inf, 0)``.
        """
        # arctanh(z) = (ln(1+z) - ln(1-z))/2
        F = self.F
        one = Complex_F.one(F)
        two = one + one
        if self == one:
            return Complex_F(F.infinity(), F.zero(), F)
        elif self == -one:
            return Complex_F(-F.infinity(), F.zero(), F)
        return ((one + self).ln() - (one - self).ln()) / two

    # conversions

    def __complex__(self):
        return complex(float(self.re), float(self.im))

    def to_numpy(self):
        """numpy complex scalar, ``complex64`` for ``float32`` parts"""
        dtype = getattr(self.F.dtype, "as_numpy_dtype", self.F.dtype)
        if dtype in (np.float16, np.float32):
            return np.complex64(complex(self))
        return np.complex128(complex(self))

    def __str__(self):
        F = self.F
        zero = F.zero()
        if F.is_negative(self.im):
            return "{}-{}i".format(
                F.to_string(self.re), F.to_string(zero - self.im)
            )
        return "{}+{}i".format(F.to_string(self.re), F.to_string(self.im))

    def __repr__(self):
        return "Complex_F({!r}, {!r})".format(self.re, self.im)


Complex = Complex_F
