"""Cmscale scales colormaps to diverging datasets.

Cmscale provides:

- trimming of a colormap so that a centering value maps onto its midpoint
- automatic color limits spanning one or many matplotlib axes
- relocation of color limits that do not enclose the centering value
- import and export of colormap tables as ASCII files
"""

import logging
import subprocess

from setuptools import setup, find_packages
from codecs import open
from os.path import dirname, join

DOCLINES = (__doc__ or "").split("\n")

version = open(join(dirname(__file__), "cmscale", "VERSION")).read().strip()

if "dev" in version:
    try:
        cp = subprocess.run(
            ["git", "describe", "--tags"], stdout=subprocess.PIPE, check=True
        )
    except (subprocess.CalledProcessError, OSError):
        logging.warning(
            "Warning: could not determine version from git, "
            "using version from source"
        )
    else:
        so = cp.stdout
        version = (
            so.strip()
            .decode("ascii")
            .lstrip("v")
            .replace("-", "+dev", 1)
            .replace("-", ".")
        )

__version__ = version

setup(
    name="cmscale",
    author="The Cmscale developers",
    version=__version__,
    packages=find_packages(include=["cmscale", "cmscale.*"]),
    license="MIT",
    description=DOCLINES[0],
    long_description="\n".join(DOCLINES[2:]),
    classifiers=[
        # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    package_data={"cmscale": ["VERSION"]},
    install_requires=[
        "matplotlib>=3.5",
        "numpy>=1.20",
    ],
    extras_require={
        "tests": ["pytest"],
    },
)
