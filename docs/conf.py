"""Configuration file for the Sphinx documentation builder.

This file only contains a selection of the most common options. For a full
list see the documentation:
https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import shutil
import subprocess

from tf_complex.backend import SCALAR_BACKEND
from tf_complex.config import get_config

# -- Project information -----------------------------------------------------
project = "TFComplex"
copyright = "2020, Yi Jiang"  # pylint: disable=redefined-builtin
author = "Yi Jiang"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]
exclude_patterns = [
    ".DS_Store",
    "Thumbs.db",
    "_build",
]
source_suffix = [
    ".rst",
]

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_title = "TFComplex"
viewcode_follow_imported_members = True

# -- Options for API ---------------------------------------------------------
add_module_names = False

# Cross-referencing configuration
default_role = "py:obj"
primary_domain = "py"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
    "sympy": ("https://docs.sympy.org/latest", None),
}

# -- Generate API skeleton ----------------------------------------------------
shutil.rmtree("api", ignore_errors=True)
subprocess.call(
    " ".join(
        [
            "sphinx-apidoc",
            "-o api/",
            "--force",
            "--no-toc",
            "--separate",
            "../tf_complex/",
            # exclude patterns
            "../tf_complex/tests",
        ]
    ),
    shell=True,
)


# -- Generate available scalar backends ---------------------------------------
def add_indent(s, number=2):
    ret = ""
    for i in s.split("\n"):
        ret += " " * number + i + "\n"
    return ret


def gen_backend_list():
    backend_doc = """
-------------------------
Available Scalar Backends
-------------------------

"""
    backends = sorted(
        get_config(SCALAR_BACKEND).items(), key=lambda x: x[1].priority
    )
    for idx, (k, v) in enumerate(backends, 1):
        if v.__doc__ is None:
            continue
        backend_doc += (
            f'\n{idx}. :code:`"{k}"`'
            f" (`~{v.__module__}.{v.__qualname__}`, priority {v.priority})\n\n"
        )
        backend_doc += add_indent(v.__doc__.strip()) + "\n\n"

    with open(
        os.path.dirname(os.path.abspath(__file__)) + "/backend_list.rst", "w"
    ) as f:
        f.write(backend_doc)


gen_backend_list()
