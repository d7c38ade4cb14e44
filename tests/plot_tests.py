'''
Unit tests for plotting functions
'''
import unittest

import numpy as np
from bokeh.plotting import figure as bk_Figure
from bokeh.models import FixedTicker
import flowscale as fs
# noinspection PyProtectedMember
from flowscale._utils import plot_utils
from flowscale.exceptions import FlowScaleWarning

from tests.test_config import test_data_decades, plot_options_biex_linear


class PlotTestCase(unittest.TestCase):
    '''
    Tests for plot functions

    NOTE: Due to the difficulty of introspecting figures and images at a
          pixel-level, this TestCase only tests that plots are returned
          from plotting functions and checks the axis tick placement.
    '''
    def test_scale_axis_ticks(self):
        scale = fs.create_scale(fs.SCALE_BIEXP, (0, 600))
        locations, labels = plot_utils.scale_axis_ticks(scale)

        self.assertEqual(len(locations), 6)
        self.assertListEqual(locations, sorted(locations))
        self.assertEqual(labels[scale(0.0)], '0e+00')
        self.assertEqual(labels[scale(100000.0)], '1e+05')

    def test_configure_axis(self):
        scale = fs.create_scale(fs.SCALE_ARCSIN, (0, 600))
        p = bk_Figure()

        plot_utils.configure_axis(p.xaxis, scale)

        ticker = p.xaxis[0].ticker
        self.assertIsInstance(ticker, FixedTicker)
        self.assertEqual(len(ticker.ticks), 6)
        self.assertEqual(p.xaxis[0].major_label_overrides[0.0], '0e+00')

    def test_plot_histogram(self):
        scale = fs.create_scale(fs.SCALE_BIEXP, (0, 600))
        p = plot_utils.plot_histogram(test_data_decades, scale, x_label='FL1-H')

        self.assertIsInstance(p, bk_Figure)
        self.assertEqual(p.xaxis[0].axis_label, 'FL1-H')

    def test_plot_histogram_zero_points(self):
        scale = fs.create_scale(fs.SCALE_LINEAR, (0, 600), data_range=(0, 100))

        with self.assertWarns(FlowScaleWarning):
            p = plot_utils.plot_histogram(np.array([], float), scale)

        self.assertIsInstance(p, bk_Figure)

    def test_plot_scatter(self):
        plot_scales = fs.get_scales(plot_options_biex_linear)
        x = np.abs(test_data_decades)
        p = plot_utils.plot_scatter(x, x, plot_scales['x_scale'], plot_scales['y_scale'])

        self.assertIsInstance(p, bk_Figure)
        self.assertEqual(p.y_range.start, 400.0)
        self.assertEqual(p.y_range.end, 0.0)

    def test_plot_scatter_zero_points(self):
        plot_scales = fs.get_scales(plot_options_biex_linear)
        arr = np.array([], float)

        with self.assertWarns(FlowScaleWarning):
            p = plot_utils.plot_scatter(arr, arr, plot_scales['x_scale'], plot_scales['y_scale'])

        self.assertIsInstance(p, bk_Figure)

    def test_plot_scatter_one_point(self):
        plot_scales = fs.get_scales(plot_options_biex_linear)
        arr = np.array([1., ], float)
        p = plot_utils.plot_scatter(arr, arr, plot_scales['x_scale'], plot_scales['y_scale'])

        self.assertIsInstance(p, bk_Figure)

    def test_plot_scatter_length_mismatch(self):
        plot_scales = fs.get_scales(plot_options_biex_linear)

        self.assertRaises(
            ValueError,
            plot_utils.plot_scatter,
            np.arange(5.0),
            np.arange(4.0),
            plot_scales['x_scale'],
            plot_scales['y_scale']
        )
