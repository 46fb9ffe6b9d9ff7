import numpy as np
import pytest

from tf_complex.complex_F import Complex_F
from tf_complex.config import get_config
from tf_complex.main import main, regist_subcommand

from .common import close, write_temp_file


@regist_subcommand()
def sss(i: int, *args, j="ss"):
    print(i, type(i))
    return i


def test_main_f():
    ret = main(["sss", "2", "--j=dd"])
    assert ret == 2


def test_eval(capsys):
    ret = main(["eval", "exp", "0", "0"])
    assert ret == Complex_F(1.0, 0.0)
    assert capsys.readouterr().out == "1+0i\n"
    ret = main(["eval", "sqrt", "-1"])
    assert close(ret, Complex_F(0.0, 1.0))
    ret = main(["eval", "atan", "0", "1"])
    assert ret == Complex_F(0.0, float("inf"))
    assert capsys.readouterr().out.endswith("0+infi\n")


def test_eval_backend():
    ret = main(["eval", "ln", "1", "--backend", "numpy", "--dtype", "float32"])
    assert isinstance(ret.re, np.float32)
    assert get_config("backend") is None
    assert get_config("dtype") == "float64"
    r, theta = main(["eval", "to_polar", "0", "2"])
    assert r == 2.0
    assert theta == pytest.approx(np.pi / 2)


def test_eval_config():
    with write_temp_file("backend: numpy\n") as fname:
        ret = main(["eval", "conj", "1", "2", "--config", fname])
    assert isinstance(ret.re, np.float64)
    assert ret == Complex_F(1.0, -2.0)
    assert get_config("backend") is None


def test_eval_unknown():
    with pytest.raises(ValueError):
        main(["eval", "not_a_function", "1"])


def test_help(capsys):
    assert main([]) is None
    assert "functions" in capsys.readouterr().out
