# -*- coding: utf-8 -*-

"""Exceptions raised while scaling a colormap.

Every failure is detected before an axis is modified, so catching one of
these leaves the involved axes in their previous state.
"""

__all__ = [
    'ColormapScalingError',
    'InvalidColormap',
    'InvalidCenter',
    'InvalidAxes',
    'InvalidLimits',
    'NonFiniteAxisLimits',
    'InvalidFlag',
    'InvalidUsage',
]


class ColormapScalingError(ValueError):
    """Base class for all errors of :func:`cmscale.plots.scale_colormap`."""


class InvalidColormap(ColormapScalingError):
    """The colormap is not an (N, 3) table of RGB values in [0, 1]."""


class InvalidCenter(ColormapScalingError):
    """The centering value is not a finite real scalar."""


class InvalidAxes(ColormapScalingError):
    """An axes handle is neither an Axes with mapped data nor a mappable."""


class InvalidLimits(ColormapScalingError):
    """The color limits are malformed, infinite or not increasing."""


class NonFiniteAxisLimits(ColormapScalingError):
    """An axis consulted for automatic limits reports a non-finite limit."""


class InvalidFlag(ColormapScalingError):
    """``set_values`` is not a boolean scalar."""


class InvalidUsage(ColormapScalingError):
    """The requested output does not fit the single-result contract."""
