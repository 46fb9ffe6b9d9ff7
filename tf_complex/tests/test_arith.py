import math
from fractions import Fraction

import numpy as np
import pytest

from tf_complex.complex_F import Complex_F

from .common import close

_0_0i = Complex_F(0.0, 0.0)
_1_0i = Complex_F(1.0, 0.0)
_1_1i = Complex_F(1.0, 1.0)
_0_1i = Complex_F(0.0, 1.0)
_neg1_1i = Complex_F(-1.0, 1.0)
_05_05i = Complex_F(0.5, 0.5)
all_consts = [_0_0i, _1_0i, _1_1i, _neg1_1i, _05_05i]


def test_add():
    assert _05_05i + _05_05i == _1_1i
    assert _0_1i + _1_0i == _1_1i
    assert _1_0i + _neg1_1i == _0_1i
    assert _0_0i + _1_0i == _1_0i
    for c in all_consts:
        assert _0_0i + c == c
        assert c + _0_0i == c


def test_sub():
    assert _05_05i - _05_05i == _0_0i
    assert _0_1i - _1_0i == _neg1_1i
    assert _0_1i - _neg1_1i == _1_0i
    for c in all_consts:
        assert c - _0_0i == c
        assert c - c == _0_0i


def test_mul():
    assert _05_05i * _05_05i == _0_1i.unscale(2.0)
    assert _1_1i * _0_1i == _neg1_1i
    # i^2 & i^4
    assert _0_1i * _0_1i == -_1_0i
    assert _0_1i * _0_1i * _0_1i * _0_1i == _1_0i
    for c in all_consts:
        assert c * _1_0i == c
        assert _1_0i * c == c


def test_div():
    assert _neg1_1i / _0_1i == _1_1i
    for c in all_consts:
        if c != Complex_F.zero():
            assert c / c == _1_0i


def test_neg():
    assert -_1_0i + _0_1i == _neg1_1i
    assert (-_0_1i) * _0_1i == _1_0i
    for c in all_consts:
        assert -(-c) == c
        assert +c == c


def test_divide_by_zero_natural():
    n = Complex_F(2, 3)
    d = Complex_F(0, 0)
    with pytest.raises(ZeroDivisionError):
        n / d
    with pytest.raises(ZeroDivisionError):
        d.inv()
    with pytest.raises(ZeroDivisionError):
        n.unscale(0)


def test_divide_by_zero_float():
    n = Complex_F(np.float64(2.0), np.float64(3.0))
    d = Complex_F(np.float64(0.0), np.float64(0.0))
    with np.errstate(all="ignore"):
        assert (n / d).is_nan() or np.isinf((n / d).re)
        assert d.inv().is_nan()
        a = n.unscale(np.float64(0.0))
    assert np.isinf(a.re) and np.isinf(a.im)


def test_integer():
    a = Complex_F(1, 2)
    b = Complex_F(3, -1)
    c = a * b
    assert (c.re, c.im) == (5, 5)
    assert isinstance(c.re, int)
    assert a + b == Complex_F(4, 1)
    assert a.conj() == Complex_F(1, -2)
    assert a.norm_sqr() == 5
    assert a.scale(3) == Complex_F(3, 6)


def test_fraction():
    a = Complex_F(Fraction(1, 2), Fraction(1, 3))
    b = Complex_F(Fraction(3), Fraction(-1))
    assert isinstance(a.im, Fraction)
    c = a * b
    assert c == Complex_F(Fraction(11, 6), Fraction(1, 2))
    assert (a / b) * b == a
    assert a * a.inv() == Complex_F.one(a.F)
    assert isinstance(a.inv().re, Fraction)
    with pytest.raises(ZeroDivisionError):
        a / Complex_F(Fraction(0), Fraction(0))


def test_pow():
    assert Complex_F(0, 1) ** 4 == Complex_F(1, 0)
    assert _0_1i**2 == -_1_0i
    assert _1_1i**0 == _1_0i
    assert _0_1i ** (-1) == Complex_F(0.0, -1.0)
    assert close(_1_1i**3, _1_1i * _1_1i * _1_1i)
    assert close(Complex_F(-4.0, 0.0) ** 0.5, Complex_F(0.0, 2.0))
    assert close(_0_1i**_0_1i, Complex_F(math.exp(-math.pi / 2), 0.0))
    assert close(2 ** Complex_F(1.0, 0.0), Complex_F(2.0, 0.0))
    assert _0_0i**0.5 == _0_0i
    assert _0_0i**_0_0i == _1_0i


def test_scalar_operand():
    a = Complex_F(1.0, 2.0)
    assert a * 2 == Complex_F(2.0, 4.0)
    assert 2 * a == Complex_F(2.0, 4.0)
    assert a / 2 == Complex_F(0.5, 1.0)
    assert a + 1 == Complex_F(2.0, 2.0)
    assert 1 + a == Complex_F(2.0, 2.0)
    assert a - 1 == Complex_F(0.0, 2.0)
    assert 1 - a == Complex_F(0.0, -2.0)
    assert 1 / _0_1i == Complex_F(0.0, -1.0)


def test_complex_operand():
    a = Complex_F(1.0, 2.0)
    assert a + 1j == Complex_F(1.0, 3.0)
    assert 1j * a == Complex_F(-2.0, 1.0)
    assert (1 + 1j) - a == Complex_F(0.0, -1.0)
    assert complex(a) == 1 + 2j
    assert Complex_F.from_complex(3 - 4j) == Complex_F(3.0, -4.0)
    assert a.real == 1.0 and a.imag == 2.0


def test_numpy_operand():
    a = Complex_F(1.0, 2.0)
    b = np.float64(2.0) * a
    assert isinstance(b, Complex_F)
    assert b == Complex_F(2.0, 4.0)
    assert b.F.name == "numpy"
    c = a + np.complex128(1 + 1j)
    assert c == Complex_F(2.0, 3.0)
    assert a.to_numpy() == np.complex128(1 + 2j)


def test_unsupported_operand():
    a = Complex_F(1.0, 2.0)
    with pytest.raises(TypeError):
        a + "a"
    with pytest.raises(TypeError):
        "a" * a
    assert (a == "a") is False
    assert a != (1.0, 2.0)


def test_properties():
    t = 3.0
    for c in all_consts:
        # scale and unscale are inverse
        assert c.scale(t).unscale(t) == c
        r, theta = c.to_polar()
        assert close(Complex_F.from_polar(r, theta), c)
        if not c.is_zero():
            assert close(c * c.inv(), _1_0i)
            assert close(c.ln().exp(), c)
        assert close(c.sqrt() * c.sqrt(), c)
        assert close(c.sin() ** 2 + c.cos() ** 2, _1_0i)
        assert close(c.cosh() ** 2 - c.sinh() ** 2, _1_0i)
    assert bool(_1_0i) and not bool(_0_0i)
