# -*- coding: utf-8 -*-

"""Utility functions related to colormap tables.

A colormap table is a plain ``(N, 3)`` array of RGB values in [0, 1], ordered
from the low to the high end of the color scale.
"""
import os

import matplotlib.pyplot as plt
from matplotlib import colors
from matplotlib.colors import ListedColormap
import numpy as np

from cmscale.config import get_config_int
from cmscale.plots.errors import InvalidColormap

__all__ = ['cmap2rgba',
           'as_rgb_table',
           'rgb2cmap',
           'cmap2txt',
           'cmap_from_txt',
           ]


def cmap2rgba(cmap=None, N=None):
    """Return a list of RGBA values sampled from a colormap.

    Parameters:
        cmap (str or Colormap): Name of a registered colormap or a
            :class:`~matplotlib.colors.Colormap` instance.
        N (int): Number of colors to return.
            If ``None`` use the ``lut`` configuration option and fall back
            to the number of colors defined in the colormap.

    Returns:
        np.array: Array with RGB and alpha values.

    Examples:
        >>> cmap2rgba('viridis', 5)
        array([[ 0.267004,  0.004874,  0.329415,  1.      ],
            [ 0.229739,  0.322361,  0.545706,  1.      ],
            [ 0.127568,  0.566949,  0.550556,  1.      ],
            [ 0.369214,  0.788888,  0.382914,  1.      ],
            [ 0.993248,  0.906157,  0.143936,  1.      ]])
    """
    if cmap is None:
        cmap = plt.rcParams['image.cmap']

    cmap = plt.get_cmap(cmap)

    if N is None:
        N = get_config_int('lut', fallback=cmap.N)

    return cmap(np.linspace(0, 1, N))


def as_rgb_table(cmap, N=None):
    """Return a colormap as validated table of RGB values.

    Parameters:
        cmap: Either an array-like with three columns (red, green, blue)
            and values in [0, 1], a :class:`~matplotlib.colors.Colormap`
            or the name of a registered colormap.
        N (int): Number of colors sampled from a colormap object or name.
            Ignored for tables.

    Returns:
        ndarray: Float array of shape (N, 3).

    Raises:
        InvalidColormap: The input is no valid RGB table.
    """
    if isinstance(cmap, (str, colors.Colormap)):
        try:
            return cmap2rgba(cmap, N)[:, :3]
        except ValueError as e:
            raise InvalidColormap(f'"{cmap}" is not a valid colormap.') from e

    try:
        rgb = np.asarray(cmap)
    except ValueError as e:
        raise InvalidColormap('Colormap has to be a rectangular table.') from e

    if rgb.dtype.kind not in 'iuf':
        raise InvalidColormap(
            f'Colormap entries have to be real numbers, not "{rgb.dtype}".')

    if rgb.ndim != 2 or rgb.shape[1] != 3 or rgb.shape[0] < 1:
        raise InvalidColormap(
            f'Colormap has to be of shape (N, 3), got {rgb.shape}.')

    rgb = rgb.astype(float)

    if np.isnan(rgb).any():
        raise InvalidColormap('Colormap contains missing values.')

    if np.min(rgb) < 0 or np.max(rgb) > 1:
        raise InvalidColormap('RGB value out of range: [0, 1].')

    return rgb


def rgb2cmap(rgb, name=None):
    """Create a colormap from a table of RGB values.

    Parameters:
        rgb (ndarray): RGB table of shape (N, 3).
        name (str): Colormap name. Default: ``'scaled'``.

    Returns:
        ListedColormap.
    """
    return ListedColormap(as_rgb_table(rgb), name=name or 'scaled')


def _cmap_name(cmap):
    if isinstance(cmap, str):
        return cmap
    return getattr(cmap, 'name', 'scaled')


def cmap2txt(cmap, filename=None, N=None, comments='%'):
    """Export colormap to txt file.

    Parameters:
        cmap: Colormap name, Colormap or RGB table.
        filename (str): Optional filename.
            Default: name of the colormap + '.txt'
        N (int): Number of colors.
        comments (str): Character to start comments with.

    """
    rgb = as_rgb_table(cmap, N)
    name = _cmap_name(cmap)
    header = 'Colormap "{}"'.format(name)

    if filename is None:
        filename = name + '.txt'

    np.savetxt(filename, rgb, header=header, comments=comments)


def cmap_from_txt(file, name=None, comments='%'):
    """Import colormap from txt file.

    Reads colormap data (RGB/RGBA) from an ASCII file.
    Values have to be given in [0, 1] range, an alpha column is dropped.

    Parameters:
        file (str): Path to txt file.
        name (str): Colormap name. Defaults to filename without extension.
        comments (str): Character to start comments with.

    Returns:
        ListedColormap.
    """
    # Extract colormap name from filename.
    if name is None:
        name = os.path.splitext(os.path.basename(file))[0]

    rgb = np.atleast_2d(np.genfromtxt(file, comments=comments))
    if rgb.shape[1] == 4:
        rgb = rgb[:, :3]

    return rgb2cmap(rgb, name=name)
