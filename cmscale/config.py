#!/usr/bin/env python3

"""Handle package-wide configuration settings.

Configuration is handled with a configuration file with a
:mod:`configparser` syntax.

The location of the configuration file is determined by the environment
variable CMSCALERC.  If this is not set, it will use ~/.cmscalerc.

Recognised options of the ``scaling`` section::

    [scaling]
    # Number of samples taken from colormaps without a fixed size.
    lut: 256
    # Default for ``set_values`` in :func:`~cmscale.plots.scale_colormap`.
    set_values: yes
"""

import pathlib
import os
from configparser import (ConfigParser, ExtendedInterpolation)


__all__ = [
    'conf',
    'get_config',
    'get_config_int',
    'get_config_bool',
]


conf = ConfigParser(interpolation=ExtendedInterpolation())
conf.optionxform = str
p = pathlib.Path(os.getenv("CMSCALERC", "~/.cmscalerc")).expanduser()
conf.read(str(p))


def get_config(option, section='scaling'):
    """Return a raw configuration value.

    Parameters:
        option (str): Option name.
        section (str): Section name.

    Returns:
        str: The option value, ``None`` if it is not set.
    """
    return conf.get(section, option, fallback=None)


def get_config_int(option, section='scaling', fallback=None):
    """Return a configuration value converted to :class:`int`."""
    return conf.getint(section, option, fallback=fallback)


def get_config_bool(option, section='scaling', fallback=None):
    """Return a configuration value converted to :class:`bool`."""
    return conf.getboolean(section, option, fallback=fallback)
