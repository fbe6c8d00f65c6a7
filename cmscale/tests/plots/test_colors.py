# -*- coding: utf-8 -*-
"""Testing the functions in cmscale.plots.colors.
"""
import os
from tempfile import mkstemp

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
import numpy as np
import pytest

from cmscale.plots import colors
from cmscale.plots.errors import InvalidColormap


class TestColors:
    """Testing the colormap table functions."""
    def setup_method(self):
        """Create a temporary file."""
        fd, self.f = mkstemp(suffix='.txt')
        os.close(fd)

    def teardown_method(self):
        """Delete temporary file."""
        os.remove(self.f)

    def test_cmap2rgba(self):
        """Check colormap to RGBA conversion."""
        rgba = colors.cmap2rgba('viridis', 5)

        assert rgba.shape == (5, 4)
        assert np.allclose(rgba, plt.get_cmap('viridis')(np.linspace(0, 1, 5)))

    def test_cmap2rgba_default_size(self):
        """The number of colors of the colormap is used by default."""
        assert len(colors.cmap2rgba(ListedColormap(['red', 'blue']))) == 2

    def test_as_rgb_table(self):
        """Tables are converted to float arrays."""
        rgb = colors.as_rgb_table([[0, 0, 1], [1, 0, 0]])

        assert rgb.dtype == float
        assert np.array_equal(rgb, [[0, 0, 1], [1, 0, 0]])

    def test_as_rgb_table_colormap(self):
        """Colormaps are sampled and the alpha channel is dropped."""
        rgb = colors.as_rgb_table(plt.get_cmap('RdBu'), 7)

        assert rgb.shape == (7, 3)

    def test_as_rgb_table_copy(self):
        """The input table is not modified by later trimming."""
        table = np.zeros((4, 3))
        rgb = colors.as_rgb_table(table)
        rgb[0] = 1

        assert np.all(table == 0)

    def test_as_rgb_table_range(self):
        """Values out of range are rejected."""
        with pytest.raises(InvalidColormap, match='out of range'):
            colors.as_rgb_table([[0, 0, -0.1]])

    def test_rgb2cmap(self):
        """RGB tables are wrapped into a ListedColormap."""
        cmap = colors.rgb2cmap([[0, 0, 1], [1, 0, 0]], name='test')

        assert isinstance(cmap, ListedColormap)
        assert cmap.name == 'test'
        assert cmap.N == 2

    def test_cmap2txt(self):
        """Export colormap table to txt file."""
        rgb = colors.as_rgb_table('viridis', 16)
        colors.cmap2txt(rgb, filename=self.f)

        with open(self.f) as testfile:
            assert testfile.readline() == '%Colormap "scaled"\n'

        assert np.allclose(np.loadtxt(self.f, comments='%'), rgb)

    def test_cmap_from_txt(self):
        """Import colormap from txt file."""
        colors.cmap2txt('viridis', filename=self.f)
        cmap = colors.cmap_from_txt(self.f)

        viridis = plt.get_cmap('viridis')
        idx = np.linspace(0, 1, 256)

        assert cmap.name == os.path.splitext(os.path.basename(self.f))[0]
        assert np.allclose(viridis(idx), cmap(idx))

    def test_cmap_from_txt_rgba(self):
        """An alpha column is ignored on import."""
        np.savetxt(self.f, np.ones((3, 4)))

        assert colors.cmap_from_txt(self.f, name='white').N == 3

    def test_cmap_from_txt_out_of_range(self):
        """Import of RGB values out of range fails."""
        np.savetxt(self.f, np.full((3, 3), 255))

        with pytest.raises(InvalidColormap):
            colors.cmap_from_txt(self.f)
