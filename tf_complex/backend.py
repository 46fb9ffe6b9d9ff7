"""
Scalar backends.

A backend is the set of real-valued primitives :class:`~tf_complex.complex_F.Complex_F`
is written against: ``sqrt``, ``sin``, ``cos``, ``tan``, ``sinh``, ``cosh``,
``tanh``, ``exp``, ``ln``, ``atan2``, ``hypot``, a NaN query and the
production of infinity, together with literal construction (``cast``,
``zero``, ``one``) and display of a scalar.

Backends are registered with :func:`register_backend` and picked from the
scalar values by :func:`get_backend`.

"""
import logging
import math
import numbers
import warnings
from fractions import Fraction

import numpy as np
import sympy

from .config import get_config, regist_config
from .tensorflow_wrapper import as_dtype, is_tf_value, tf

logger = logging.getLogger(__name__)

SCALAR_BACKEND = "scalar_backend"
regist_config(SCALAR_BACKEND, {})


class BackendError(TypeError):
    pass


def register_backend(name=None, priority=0, f=None):
    """register a scalar backend

    :params name: backend name used in configuration
    :params priority: backends with higher priority win when values of different kinds are mixed
    :params f: Backend class
    """

    def regist(g):
        if name is None:
            my_name = g.__name__
        else:
            my_name = name
        config = get_config(SCALAR_BACKEND)
        if my_name in config:
            warnings.warn("Override backend {}".format(my_name))
        config[my_name] = g
        g.name = my_name
        g.priority = priority
        return g

    if f is None:
        return regist
    return regist(f)


def format_scalar(x):
    """
    String of a real scalar, integral floats are printed without the fractional part.

    >>> format_scalar(1.0), format_scalar(0.5), format_scalar(-2), format_scalar(-0.0)
    ('1', '0.5', '-2', '-0')

    """
    if isinstance(x, (float, np.floating)):
        v = float(x)
        if math.isfinite(v) and v.is_integer():
            if v == 0 and math.copysign(1.0, v) < 0:
                return "-0"
            return "{:d}".format(int(v))
    return str(x)


class Backend(object):
    """
    Base class of scalar backends.

    Subclasses supply the transcendental primitives and ``is_nan``.
    ``is_negative`` decides the sign printed before the imaginary part and
    ``hash_key`` turns a scalar into something hashable.
    """

    name = None
    priority = 0

    def __init__(self, dtype=None):
        self.dtype = dtype

    @staticmethod
    def accepts(x):
        return False

    @classmethod
    def from_values(cls, values=(), dtype=None):
        return cls(dtype)

    def cast(self, x):
        return x

    def zero(self):
        return self.cast(0)

    def one(self):
        return self.cast(1)

    def infinity(self):
        return self.cast(float("inf"))

    def is_negative(self, x):
        return bool(x < self.zero())

    def hash_key(self, x):
        return x

    def to_string(self, x):
        return format_scalar(x)

    def __eq__(self, other):
        return type(self) is type(other) and self.dtype == other.dtype

    def __hash__(self):
        return hash((type(self), self.dtype))

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.dtype)


_MATH_TYPES = {"int": int, "fraction": Fraction, "float": float}


def _nan_on_domain_error(f, x):
    # math.sin and friends raise at +-inf
    try:
        return f(x)
    except ValueError:
        return math.nan


@register_backend("math", priority=0)
class MathBackend(Backend):
    """
    Python numbers through the :mod:`math` module.

    ``dtype`` is the Python type used for literals: :class:`float` when any
    input is a float, else :class:`~fractions.Fraction`, else :class:`int`.
    Division keeps Python's contract, dividing by zero raises
    :class:`ZeroDivisionError`. The transcendental functions follow IEEE 754
    instead of raising: overflow gives a signed ``inf`` and ``sin(inf)`` gives
    ``nan``.
    """

    def __init__(self, dtype=None):
        if dtype is None:
            dtype = float
        elif isinstance(dtype, str):
            dtype = _MATH_TYPES.get(dtype.lower(), float)
        super().__init__(dtype)

    @staticmethod
    def accepts(x):
        return isinstance(x, numbers.Real) and not isinstance(
            x, np.generic
        )

    @classmethod
    def from_values(cls, values=(), dtype=None):
        if dtype is None:
            values = [i for i in values if cls.accepts(i)]
            if not values or any(isinstance(i, float) for i in values):
                dtype = float
            elif any(isinstance(i, Fraction) for i in values):
                dtype = Fraction
            elif all(isinstance(i, int) for i in values):
                dtype = int
            else:
                dtype = float
        return cls(dtype)

    def cast(self, x):
        return self.dtype(x)

    def infinity(self):
        return math.inf

    def sqrt(self, x):
        return math.sqrt(x)

    def sin(self, x):
        return _nan_on_domain_error(math.sin, x)

    def cos(self, x):
        return _nan_on_domain_error(math.cos, x)

    def tan(self, x):
        return _nan_on_domain_error(math.tan, x)

    def sinh(self, x):
        try:
            return math.sinh(x)
        except OverflowError:
            return math.copysign(math.inf, x)

    def cosh(self, x):
        try:
            return math.cosh(x)
        except OverflowError:
            return math.inf

    def tanh(self, x):
        return math.tanh(x)

    def exp(self, x):
        try:
            return math.exp(x)
        except OverflowError:
            return math.inf

    def ln(self, x):
        # math.log raises at 0
        if x == 0:
            return -math.inf
        return math.log(x)

    def atan2(self, y, x):
        return math.atan2(y, x)

    def hypot(self, x, y):
        return math.hypot(x, y)

    def is_nan(self, x):
        return math.isnan(x)


@register_backend("numpy", priority=10)
class NumpyBackend(Backend):
    """numpy scalars of any float width, IEEE 754 semantics"""

    def __init__(self, dtype=None):
        if dtype is None:
            dtype = get_config("dtype")
        super().__init__(np.dtype(dtype))

    @staticmethod
    def accepts(x):
        if isinstance(x, np.ndarray):
            return x.ndim == 0
        return isinstance(x, (np.floating, np.integer))

    @classmethod
    def from_values(cls, values=(), dtype=None):
        if dtype is None:
            values = [i for i in values if cls.accepts(i)]
            if values:
                dtype = np.result_type(*values)
            if dtype is None or not np.issubdtype(dtype, np.floating):
                dtype = get_config("dtype")
        return cls(dtype)

    def cast(self, x):
        return self.dtype.type(x)

    def sqrt(self, x):
        return np.sqrt(x)

    def sin(self, x):
        return np.sin(x)

    def cos(self, x):
        return np.cos(x)

    def tan(self, x):
        return np.tan(x)

    def sinh(self, x):
        return np.sinh(x)

    def cosh(self, x):
        return np.cosh(x)

    def tanh(self, x):
        return np.tanh(x)

    def exp(self, x):
        return np.exp(x)

    def ln(self, x):
        return np.log(x)

    def atan2(self, y, x):
        return np.arctan2(y, x)

    def hypot(self, x, y):
        return np.hypot(x, y)

    def is_nan(self, x):
        return bool(np.isnan(x))


@register_backend("tensorflow", priority=30)
class TFBackend(Backend):
    """scalar tensors and variables through ``tf.math``"""

    def __init__(self, dtype=None):
        if dtype is None:
            dtype = get_config("dtype")
        super().__init__(as_dtype(dtype))

    @staticmethod
    def accepts(x):
        return is_tf_value(x)

    @classmethod
    def from_values(cls, values=(), dtype=None):
        if dtype is None:
            for i in values:
                if cls.accepts(i) and i.dtype.is_floating:
                    dtype = i.dtype
                    break
        return cls(dtype)

    def cast(self, x):
        if is_tf_value(x):
            return tf.cast(x, self.dtype)
        return tf.constant(x, dtype=self.dtype)

    def sqrt(self, x):
        return tf.sqrt(x)

    def sin(self, x):
        return tf.sin(x)

    def cos(self, x):
        return tf.cos(x)

    def tan(self, x):
        return tf.tan(x)

    def sinh(self, x):
        return tf.sinh(x)

    def cosh(self, x):
        return tf.cosh(x)

    def tanh(self, x):
        return tf.tanh(x)

    def exp(self, x):
        return tf.exp(x)

    def ln(self, x):
        return tf.math.log(x)

    def atan2(self, y, x):
        return tf.math.atan2(y, x)

    def hypot(self, x, y):
        x, y = tf.abs(x), tf.abs(y)
        a = tf.maximum(x, y)
        b = tf.minimum(x, y)
        r = tf.math.divide_no_nan(b, a)
        ret = a * tf.sqrt(1 + r * r)
        return tf.where(tf.math.is_inf(a), a, ret)

    def is_nan(self, x):
        return bool(tf.math.is_nan(x))

    def hash_key(self, x):
        # tensors are not hashable
        return x.numpy()

    def to_string(self, x):
        return format_scalar(x.numpy())


@register_backend("sympy", priority=20)
class SympyBackend(Backend):
    """exact symbolic scalars, ``oo`` for infinity and ``nan`` for NaN

    Only expressions that may be real are scalars. Symbols of unknown sign
    print with a ``+`` before the imaginary part.
    """

    @staticmethod
    def accepts(x):
        # non-real values such as I are not scalars, see split_complex
        return (
            isinstance(x, sympy.Basic)
            and getattr(x, "is_extended_real", None) is not False
        )

    def cast(self, x):
        return sympy.sympify(x)

    def zero(self):
        return sympy.S.Zero

    def one(self):
        return sympy.S.One

    def infinity(self):
        return sympy.oo

    def sqrt(self, x):
        return sympy.sqrt(x)

    def sin(self, x):
        return sympy.sin(x)

    def cos(self, x):
        return sympy.cos(x)

    def tan(self, x):
        return sympy.tan(x)

    def sinh(self, x):
        return sympy.sinh(x)

    def cosh(self, x):
        return sympy.cosh(x)

    def tanh(self, x):
        return sympy.tanh(x)

    def exp(self, x):
        return sympy.exp(x)

    def ln(self, x):
        # sympy gives zoo for log(0)
        if x == 0:
            return -sympy.oo
        return sympy.log(x)

    def atan2(self, y, x):
        return sympy.atan2(y, x)

    def hypot(self, x, y):
        return sympy.sqrt(x**2 + y**2)

    def is_nan(self, x):
        return x is sympy.nan

    def is_negative(self, x):
        # None when the sign of a symbolic expression is unknown
        return bool(x.is_negative)

    def to_string(self, x):
        return str(x)


def get_backend_by_name(name, dtype=None, values=()):
    """
    Create the backend registered as ``name``.

    :param name: Backend name, such as ``"math"``, ``"numpy"``, ``"tensorflow"`` or ``"sympy"``.
    :param dtype: Scalar type for literals, inferred from ``values`` when it is None.
    :param values: Scalars the backend will work on.
    """
    config = get_config(SCALAR_BACKEND)
    if name not in config:
        raise BackendError("No backend named {} found.".format(name))
    return config[name].from_values(values, dtype)


def get_backend(*values):
    """
    Backend for computing with ``values``.

    ``get_config("backend")`` forces a backend by name. Otherwise the
    registered backend with the highest priority accepting any of the
    values is used.
    """
    name = get_config("backend")
    if name is not None:
        return get_backend_by_name(name, values=values)
    backends = sorted(
        get_config(SCALAR_BACKEND).values(), key=lambda b: -b.priority
    )
    for b in backends:
        if any(b.accepts(i) for i in values):
            ret = b.from_values(values)
            logger.debug("use backend %r for %r", ret, values)
            return ret
    raise BackendError(
        "No backend found for {}".format(
            ", ".join(type(i).__name__ for i in values)
        )
    )


def default_backend():
    """backend used when there are no scalar values to infer it from"""
    name = get_config("backend")
    if name is None:
        name = get_config("default_backend")
    return get_backend_by_name(name, dtype=get_config("dtype"))


def join_backend(a, b):
    """backend for the result of a binary operation between values using ``a`` and ``b``"""
    if a == b or a.priority >= b.priority:
        return a
    return b


def is_scalar(x):
    """whether any registered backend accepts ``x`` as a real scalar"""
    return any(b.accepts(x) for b in get_config(SCALAR_BACKEND).values())


def split_complex(x):
    """
    ``(re, im)`` of a complex number that is not a real scalar, None for anything else.

    >>> split_complex(1 + 2j)
    (1.0, 2.0)
    >>> split_complex(sympy.I)
    (0, 1)

    """
    if isinstance(x, complex):
        return x.real, x.imag
    if isinstance(x, sympy.Expr) and x.is_extended_real is False:
        return sympy.re(x), sympy.im(x)
    return None
