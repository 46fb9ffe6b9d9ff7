import contextlib
import os
import tempfile


@contextlib.contextmanager
def write_temp_file(s, filename=None, suffix=".yml"):
    if filename is None:
        fd, a = tempfile.mkstemp(suffix=suffix)
        os.close(fd)
    else:
        a = filename
    with open(a, "w") as f:
        f.write(s)
    try:
        yield a
    finally:
        os.remove(a)


def close(a, b, tol=1e-10):
    # returns true if a and b are reasonably close
    return a == b or bool((a - b).norm() < tol)
