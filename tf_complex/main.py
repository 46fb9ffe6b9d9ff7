import argparse
import inspect
import warnings
from contextlib import ExitStack

from .complex_F import Complex_F
from .config import temp_config
from .utils import load_config_file

__all__ = ["regist_subcommand", "main"]


def _protect_dict(override_message=None):
    d = {}

    def get_dict():
        return d.copy()

    def set_var(name, var):
        if name in d:
            if override_message is not None:
                warnings.warn(
                    "override {}: {}".format(override_message, name)
                )
        d[name] = var

    return get_dict, set_var


get_sub_cmd, set_sub_cmd = _protect_dict("sub commands")


def regist_subcommand(name=None):
    def wrap(f):
        name_t = name
        if name_t is None:
            name_t = f.__name__
        set_sub_cmd(name_t, _build_arguments(f))
        return f

    return wrap


def _build_arguments(f):
    argspec = inspect.getfullargspec(f)

    def wrap_f(arg):
        args = []
        kwargs = {}
        for i in argspec.args:
            if hasattr(arg, i):
                var = getattr(arg, i)
                args.append(var)
        if argspec.kwonlyargs:
            for i in argspec.kwonlyargs:
                if hasattr(arg, i):
                    var = getattr(arg, i)
                    kwargs[i] = var
        return f(*args, **kwargs)

    wrap_f.__name__ = f.__name__

    ret = {"fun": wrap_f, "args": []}

    arg_defaults = {}
    if argspec.defaults:
        for i, j in zip(argspec.defaults[::-1], argspec.args[::-1]):
            arg_defaults[j] = i
    if argspec.kwonlydefaults:
        for i in argspec.kwonlydefaults:
            arg_defaults[i] = argspec.kwonlydefaults[i]

    arg_type = argspec.annotations

    for i in argspec.args:
        args = (i,)
        kwargs = {}
        if i in arg_defaults:
            kwargs["nargs"] = "?"
            kwargs["default"] = arg_defaults[i]
        if i in arg_type:
            kwargs["type"] = arg_type[i]
        ret["args"].append((args, kwargs))

    for i in argspec.kwonlyargs:
        name = "--" + i
        args = (name,)
        kwargs = {}
        if i in arg_defaults:
            kwargs["default"] = arg_defaults[i]
        if i in arg_type:
            kwargs["type"] = arg_type[i]
        ret["args"].append((args, kwargs))

    return ret


FUNCTIONS = [
    "exp",
    "ln",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "asin",
    "acos",
    "atan",
    "asinh",
    "acosh",
    "atanh",
    "conj",
    "inv",
    "norm",
    "arg",
    "to_polar",
]


@regist_subcommand(name="eval")
def eval_function(
    function,
    re: float,
    im: float = 0.0,
    *,
    backend=None,
    dtype=None,
    config=None,
):
    """evaluate one function of ``re + i im`` and print the result"""
    if function not in FUNCTIONS:
        raise ValueError(
            "Unknown function {}, use one of {}".format(
                function, ", ".join(FUNCTIONS)
            )
        )
    with ExitStack() as stack:
        if config is not None:
            for k, v in (load_config_file(config) or {}).items():
                stack.enter_context(temp_config(k, v))
        if backend is not None:
            stack.enter_context(temp_config("backend", backend))
        if dtype is not None:
            stack.enter_context(temp_config("dtype", dtype))
        z = Complex_F(re, im)
        ret = getattr(z, function)()
    print(ret)
    return ret


@regist_subcommand(name="help")
def help_function():
    print(
        """
    using ```python -m tf_complex eval [function] [re] [im]```

    functions: {}
    """.format(
            ", ".join(FUNCTIONS)
        )
    )


def main(argv=None):
    parser = argparse.ArgumentParser("tf_complex")
    subparsers = parser.add_subparsers()
    _sub_commands = get_sub_cmd()
    for i in _sub_commands:
        cmds = _sub_commands[i]
        pi = subparsers.add_parser(i)
        pi.set_defaults(func=cmds["fun"])
        for args, kwargs in cmds["args"]:
            pi.add_argument(*args, **kwargs)
    rargs = parser.parse_args(argv)
    if hasattr(rargs, "func"):
        return rargs.func(rargs)
    else:
        help_function()
