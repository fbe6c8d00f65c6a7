# -*- coding: utf-8 -*-

"""Access to the color scale of matplotlib axes.

Two kinds of handles are understood:

    * :class:`matplotlib.axes.Axes`: The color limits of an axes are spanned
      by all its color-mapped artists (images and collections carrying
      data). Setting limits or a colormap applies to each of these artists.
    * Mappables: Any object providing ``get_clim``, ``set_clim`` and
      ``set_cmap``, e.g. the return value of
      :meth:`~matplotlib.axes.Axes.imshow` or
      :meth:`~matplotlib.axes.Axes.pcolormesh`.
"""
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
import numpy as np

from cmscale.plots.errors import InvalidAxes

__all__ = [
    'current_axis',
    'axis_list',
    'describe',
    'get_clim',
    'set_clim',
    'set_cmap',
]


def _is_mappable(obj):
    return all(callable(getattr(obj, attr, None))
               for attr in ('get_clim', 'set_clim', 'set_cmap'))


def _mapped_artists(ax):
    """Return all artists of an axes that map data onto a colormap."""
    return [a for a in (*ax.images, *ax.collections)
            if _is_mappable(a) and a.get_array() is not None]


def _targets(handle):
    if isinstance(handle, Axes):
        return _mapped_artists(handle)
    return [handle]


def describe(index=None):
    """Return a human readable label for an axis handle.

    Parameters:
        index (int): Position of the handle in the list given by the caller.
            ``None`` denotes the current axis.

    Returns:
        str: Label used in log and error messages.
    """
    if index is None:
        return 'the current axis'
    return f'axis at index {index}'


def _check_handle(handle, label):
    if isinstance(handle, Axes):
        if not _mapped_artists(handle):
            raise InvalidAxes(
                f'{label.capitalize()} has no color-mapped artists.')
    elif not _is_mappable(handle):
        raise InvalidAxes(
            f'{label.capitalize()} is no axes handle, '
            f'got "{type(handle).__name__}".')


def current_axis():
    """Return the current axes of the current figure.

    Raises:
        InvalidAxes: The current axes has no color-mapped artists.
    """
    ax = plt.gca()
    _check_handle(ax, describe())
    return ax


def axis_list(ax):
    """Return a flat list of validated axis handles.

    Parameters:
        ax: ``None``, a single handle or an iterable (list, tuple,
            numpy array) of handles.

    Returns:
        list: Handles in the given order. An empty list means that the
        current axis should be used.

    Raises:
        InvalidAxes: Any element is not a valid handle.
    """
    if ax is None:
        return []

    if isinstance(ax, Axes) or _is_mappable(ax):
        handles = [ax]
    elif isinstance(ax, (str, bytes)) or not np.iterable(ax):
        raise InvalidAxes(
            f'Axes have to be given as handle or iterable of handles, '
            f'got "{type(ax).__name__}".')
    else:
        handles = list(np.ravel(np.array(list(ax), dtype=object)))

    for index, handle in enumerate(handles):
        _check_handle(handle, describe(index))

    return handles


def get_clim(handle):
    """Return the color limits of an axis handle.

    For an :class:`~matplotlib.axes.Axes` the limits span the limits of all
    its color-mapped artists. Unset limits are reported as ``nan``.

    Returns:
        tuple: Lower and upper color limit as floats.
    """
    lims = np.array([
        [np.nan if v is None else v for v in artist.get_clim()]
        for artist in _targets(handle)
    ], dtype=float)

    return float(np.min(lims[:, 0])), float(np.max(lims[:, 1]))


def set_clim(handle, clim):
    """Set the color limits of an axis handle."""
    for artist in _targets(handle):
        artist.set_clim(*clim)


def set_cmap(handle, cmap):
    """Assign a colormap to an axis handle."""
    for artist in _targets(handle):
        artist.set_cmap(cmap)
