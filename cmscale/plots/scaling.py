# -*- coding: utf-8 -*-

"""Scale colormaps to diverging datasets.

A diverging colormap puts its neutral color at the middle of the palette.
If the data range is not symmetric around the value of interest, the
neutral color ends up somewhere else. :func:`scale_colormap` trims the
palette asymmetrically so that the centering value maps onto the neutral
color again while both halves keep their share of the data range.
"""
import collections
import logging
import numbers

import numpy as np

from cmscale.config import get_config_bool
from cmscale.plots import axes as _axes
from cmscale.plots.colors import as_rgb_table, rgb2cmap
from cmscale.plots.errors import (InvalidCenter, InvalidFlag, InvalidLimits,
                                  InvalidUsage, NonFiniteAxisLimits)

__all__ = [
    'scale_colormap',
    'center_limits',
    'relative_deviation',
    'trim_counts',
    'trim_colormap',
]

logger = logging.getLogger(__name__)

OUTPUTS = ('rgb', 'cmap', None)

CenteredLimits = collections.namedtuple('CenteredLimits', ['clim', 'dev'])


def center_limits(x0, clim):
    """Make sure that the centering value lies within the color limits.

    If both limits are on the same side of ``x0``, the limit closest to
    ``x0`` is moved onto ``x0``. Limits with equal distance are all moved.

    Parameters:
        x0 (float): Centering value.
        clim (tuple): Lower and upper color limit.

    Returns:
        CenteredLimits: Adjusted color limits and the deviation of each
        limit from ``x0``.

    Examples:
        >>> center_limits(20, (5, 10))
        CenteredLimits(clim=array([ 5., 20.]), dev=array([-15.,   0.]))
    """
    clim = np.array(clim, dtype=float)
    dev = clim - x0

    if np.all(dev > 0) or np.all(dev < 0):
        closest = np.flatnonzero(np.abs(dev) == np.min(np.abs(dev)))
        logger.info(
            f"Centering value {x0} is outside of the color limits "
            f"{clim.tolist()}, moving limit(s) {closest.tolist()} to it.")
        clim[closest] = x0
        dev[closest] = 0

    return CenteredLimits(clim, dev)


def relative_deviation(dev):
    """Return each deviation as fraction of the maximum absolute deviation.

    Parameters:
        dev (ndarray): Deviation of the color limits from the center.

    Returns:
        ndarray: Fractions in [0, 1]. All zero if there is no deviation.
    """
    dev = np.abs(np.asarray(dev, dtype=float))
    max_dev = np.max(dev)

    if max_dev == 0:
        return np.zeros_like(dev)

    return dev / max_dev


def _round(x):
    # Round half away from zero, input is non-negative.
    return int(np.floor(x + 0.5))


def trim_counts(n, perc_dev):
    """Return the number of colors to remove at each end of a colormap.

    Each half of the colormap keeps the fraction of its colors given by
    ``perc_dev``.

    Parameters:
        n (int): Number of colors in the colormap.
        perc_dev (tuple): Relative deviation of the lower and upper limit.

    Returns:
        tuple: Number of colors to remove at the low and the high end.

    Examples:
        >>> trim_counts(256, (0.5, 1))
        (64, 0)
    """
    half_step = n // 2
    n_low = half_step - _round(perc_dev[0] * half_step)
    n_high = half_step - _round(perc_dev[1] * half_step)

    return n_low, n_high


def trim_colormap(rgb, perc_dev):
    """Trim a colormap table according to the relative limit deviations.

    Parameters:
        rgb (ndarray): Colormap table of shape (N, 3).
        perc_dev (tuple): Relative deviation of the lower and upper limit.

    Returns:
        ndarray: The remaining middle part of the colormap.
    """
    n_low, n_high = trim_counts(len(rgb), perc_dev)

    rgb = rgb[:len(rgb) - n_high]
    rgb = rgb[n_low:]

    logger.debug(f"Removed {n_low} low and {n_high} high colors, "
                 f"{len(rgb)} colors left.")

    return rgb


def _check_center(x0):
    # Single element arrays are scalars as well.
    if isinstance(x0, np.ndarray) and x0.size == 1:
        x0 = x0.item()

    if (not isinstance(x0, (bool, np.bool_))
            and isinstance(x0, numbers.Real)):
        try:
            value = float(x0)
        except OverflowError:
            value = np.inf

        if np.isfinite(value):
            return value

    raise InvalidCenter(
        f"Centering value has to be a finite real number, got {x0!r}.")


def _check_limits(clim):
    """Return color limits with ``nan`` marking automatic bounds."""
    if clim is None:
        return np.array([np.nan, np.nan])

    if isinstance(clim, (str, bytes)):
        raise InvalidLimits(f"Invalid color limits {clim!r}.")

    try:
        raw = np.asarray(clim)
    except ValueError as e:
        raise InvalidLimits(f"Invalid color limits {clim!r}.") from e

    if raw.size == 0:
        return np.array([np.nan, np.nan])

    if raw.dtype.kind not in 'iuf' or raw.size != 2 or raw.ndim > 2:
        raise InvalidLimits(
            f"Color limits have to be two real numbers, got {clim!r}.")

    lims = raw.astype(float).ravel()

    if np.isinf(lims).any():
        raise InvalidLimits(f"Color limits have to be finite, got {clim!r}.")

    if not np.isnan(lims).any() and lims[0] >= lims[1]:
        raise InvalidLimits(
            f"Lower color limit has to be smaller than the upper one, "
            f"got {clim!r}.")

    return lims


def _check_flag(set_values):
    if set_values is None:
        return get_config_bool('set_values', fallback=True)

    if not isinstance(set_values, (bool, np.bool_)):
        raise InvalidFlag(
            f"set_values has to be True or False, got {set_values!r}.")

    return bool(set_values)


def _auto_limits(handles, labels):
    """Return the limits spanned by all given axes."""
    lows, highs = [], []
    for handle, label in zip(handles, labels):
        lo, hi = _axes.get_clim(handle)
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise NonFiniteAxisLimits(
                f"Color limits of {label} are not finite: ({lo}, {hi}).")
        lows.append(lo)
        highs.append(hi)

    return min(lows), max(highs)


def scale_colormap(cmap, x0, ax=None, clim=None, set_values=None,
                   output='rgb'):
    """Scale a colormap to a diverging dataset.

    The colormap is scaled about the centering value ``x0``. If ``x0`` is
    not within the color limits, the closest limit is moved to ``x0``. Each
    half of the colormap is then trimmed so that its length matches its
    share of the color range.

    All inputs are validated (and axis limits are read) before any axis is
    modified. A failing call leaves all axes untouched.

    Parameters:
        cmap: Colormap as RGB table of shape (N, 3) with values in [0, 1].
            A :class:`~matplotlib.colors.Colormap` or the name of a
            registered colormap are sampled first.
        x0 (float): Centering value, the divergence point of the data.
        ax: Axes handle or iterable of handles. Either
            :class:`~matplotlib.axes.Axes` or mappables like images.
            If ``None`` or empty, the current axis is used.
        clim (tuple): Color limits ``(lo, hi)``. A limit given as ``nan`` is
            determined from the axes: the minimum lower limit and the maximum
            upper limit of all axes. If ``None``, both limits are determined.
        set_values (bool): Apply color limits and scaled colormap to the
            axes. If ``None``, the ``set_values`` configuration option is
            used (default: ``True``).
        output (str): Kind of return value. ``'rgb'`` returns the scaled RGB
            table, ``'cmap'`` a :class:`~matplotlib.colors.ListedColormap`
            and ``None`` returns nothing.

    Returns:
        ndarray or ListedColormap or None: Scaled colormap.

    Raises:
        InvalidColormap, InvalidCenter, InvalidAxes, InvalidLimits,
        NonFiniteAxisLimits, InvalidFlag, InvalidUsage: Invalid input, see
        :mod:`cmscale.plots.errors`.

    Examples:

    .. plot::
        :include-source:

        import numpy as np
        import matplotlib.pyplot as plt
        from cmscale.plots import scale_colormap


        fig, ax = plt.subplots()
        ax.pcolormesh(np.random.randn(10, 10) + 1.5, cmap='RdBu_r')
        scale_colormap('RdBu_r', 0, ax)
        fig.colorbar(ax.collections[0])

        plt.show()
    """
    rgb = as_rgb_table(cmap)
    x0 = _check_center(x0)

    handles = _axes.axis_list(ax)
    labels = [_axes.describe(i) for i in range(len(handles))]

    lims = _check_limits(clim)
    set_values = _check_flag(set_values)

    if output not in OUTPUTS:
        raise InvalidUsage(
            f"output has to be one of {OUTPUTS}, got {output!r}.")

    auto = np.isnan(lims)
    if not handles and (auto.any() or set_values):
        handles = [_axes.current_axis()]
        labels = [_axes.describe()]

    if auto.any():
        lims = np.where(auto, _auto_limits(handles, labels), lims)
        logger.debug(f"Color limits determined from axes: {lims.tolist()}.")

        if lims[0] >= lims[1]:
            raise InvalidLimits(
                f"Combined color limits {lims.tolist()} are not increasing.")

    clim, dev = center_limits(x0, lims)
    perc_dev = relative_deviation(dev)
    rgb = trim_colormap(rgb, perc_dev)

    if set_values:
        scaled = rgb2cmap(rgb, name=_scaled_name(cmap))
        for handle, label in zip(handles, labels):
            logger.debug(f"Apply color limits {clim.tolist()} to {label}.")
            _axes.set_clim(handle, clim)
            _axes.set_cmap(handle, scaled)

    if output == 'rgb':
        return rgb
    elif output == 'cmap':
        return rgb2cmap(rgb, name=_scaled_name(cmap))


def _scaled_name(cmap):
    name = cmap if isinstance(cmap, str) else getattr(cmap, 'name', None)
    return f'{name}_scaled' if name else 'scaled'
