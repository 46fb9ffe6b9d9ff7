from setuptools import setup, find_packages

version = {}
with open("tf_complex/version.py") as fp:
    exec(fp.read(), version)
# later on we use: version['__version__']

with open("README.md", "r") as fh:
    long_description = fh.read()

name = "TFComplex"

setup(
    name=name,
    version=version["__version__"],
    author="Yi Jiang",
    author_email="jiangyi15@mails.ucas.ac.cn",
    description="Complex numbers over pluggable real scalar backends (math, numpy, sympy, Tensorflow)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(include=["tf_complex", "tf_complex.*"]),
    package_data={
        # If any package contains files, include them:
        "": ["*.yml", "*.json"],
    },
    data_files=[
        "config.yml.sample",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6",
    entry_points={
        "console_scripts": [
            "tf_complex = tf_complex.__main__:main"
        ],
    },
    install_requires=[
        "tensorflow>=2.0",
        "numpy",
        "sympy",
        "PyYAML",
    ],
    extras_require = {
        "test": ["pytest"],
        "doc": ["sphinx", "sphinx_rtd_theme"],
    },
    command_options={
        'build_sphinx': {
            'project': ('setup.py', name),
            'version': ('setup.py', version["__version__"]),
            'release': ('setup.py', version["__version__"]),
            'source_dir': ('setup.py', 'docs')
        }
    }
)
