"""
Complex numbers over generic real scalars: Python numbers, numpy, tensorflow and sympy.

"""
from .backend import (
    Backend,
    BackendError,
    get_backend,
    get_backend_by_name,
    register_backend,
)
from .complex_F import Complex, Complex_F
from .config import (
    get_config,
    load_config,
    regist_config,
    set_config,
    temp_config,
    using_backend,
)
from .version import __version__
