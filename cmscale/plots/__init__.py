"""This module provides functions to scale colormaps to diverging data. """

from cmscale.plots import axes  # noqa
from cmscale.plots.colors import *  # noqa
from cmscale.plots.errors import *  # noqa
from cmscale.plots.scaling import *  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
