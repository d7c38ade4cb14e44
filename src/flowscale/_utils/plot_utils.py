"""
Utility functions related to plotting scaled data with Bokeh
"""
import warnings
import numpy as np
from bokeh.plotting import figure
from bokeh.models import FixedTicker
from .. import _conf
from ..exceptions import FlowScaleWarning


LINE_COLOR_DEFAULT = "#1F77B4"
FILL_ALPHA_DEFAULT = 0.4


def scale_axis_ticks(scale, count=_conf.tick_count_default):
    """
    Computes the pixel locations and labels of a scale's ticks.

    :param scale: scale instance (e.g. a TransformScale)
    :param count: approximate number of ticks, not all scales use it
    :return: tuple of the list of tick pixel locations and a dictionary
        mapping each location to its label
    """
    tick_values = scale.ticks(count)
    tick_format = scale.tick_format(count)

    locations = [float(scale(v)) for v in tick_values]
    labels = {loc: tick_format(v) for loc, v in zip(locations, tick_values)}

    return locations, labels


def configure_axis(axis, scale, count=_conf.tick_count_default):
    """
    Places the ticks of a Bokeh axis at the scale's tick locations, labelled
    with the data values they represent.

    :param axis: Bokeh axis (e.g. figure.xaxis)
    :param scale: scale instance used to place the plotted data
    :param count: approximate number of ticks, not all scales use it
    :return: None
    """
    locations, labels = scale_axis_ticks(scale, count)

    axis.ticker = FixedTicker(ticks=locations)
    axis.major_label_overrides = labels


def plot_histogram(x, scale, x_label='x', bins=None, width=600, height=600):
    """
    Creates a Bokeh histogram of the given 1-D data array, binned in the
    scale's pixel space.

    :param x: 1-D array of data values
    :param scale: scale instance mapping data values to pixels
    :param x_label: Label to use for the x-axis
    :param bins: Number of bins to use for the histogram or a string compatible
            with the NumPy histogram function. If None, the number of bins is
            determined by the square root rule.
    :param height: Height of plot in pixels. Default is 600.
    :param width: Width of plot in pixels. Default is 600.
    :return: Bokeh Figure object containing the histogram
    """
    if bins is None:
        bins = 'sqrt'

    x = np.asarray(x, dtype=float)
    if len(x) == 0:
        warnings.warn("No events given for histogram", FlowScaleWarning)

    pixels = scale(x)
    r0, r1 = scale.range()

    hist, edges = np.histogram(pixels, density=False, bins=bins, range=(min(r0, r1), max(r0, r1)))

    tools = "crosshair,hover,pan,zoom_in,zoom_out,box_zoom,undo,redo,reset,save,"

    p = figure(tools=tools, x_range=(r0, r1), width=width, height=height)
    p.title.align = 'center'
    p.quad(
        top=hist,
        bottom=0,
        left=edges[:-1],
        right=edges[1:],
        alpha=0.5
    )

    p.y_range.start = 0
    p.xaxis.axis_label = x_label
    p.yaxis.axis_label = 'Event Count'

    configure_axis(p.xaxis, scale)

    return p


def plot_scatter(
        x,
        y,
        x_scale,
        y_scale,
        x_label=None,
        y_label=None,
        height=600,
        width=600
):
    """
    Creates a Bokeh scatter plot from the two 1-D data arrays, with events
    placed by the given scales. The plot ranges are the scale ranges, so a
    y scale with a descending range (e.g. [height, 0]) is drawn with larger
    values at the top.

    :param x: 1-D array of data values for the x-axis
    :param y: 1-D array of data values for the y-axis
    :param x_scale: scale instance for the x-axis
    :param y_scale: scale instance for the y-axis
    :param x_label: Label for the x-axis
    :param y_label: Label for the y-axis
    :param height: Height of plot in pixels. Default is 600.
    :param width: Width of plot in pixels. Default is 600.
    :return: A Bokeh Figure object containing the interactive scatter plot.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if len(x) != len(y):
        raise ValueError("x & y arrays must have the same length (%d != %d)" % (len(x), len(y)))
    if len(x) == 0:
        warnings.warn("No events given for scatter plot", FlowScaleWarning)

    x_r0, x_r1 = x_scale.range()
    y_r0, y_r1 = y_scale.range()

    x_extent = abs(x_r1 - x_r0)
    y_extent = abs(y_r1 - y_r0)
    if y_extent > x_extent:
        radius_dimension = 'y'
        radius = 0.003 * y_extent
    else:
        radius_dimension = 'x'
        radius = 0.003 * x_extent

    tools = "crosshair,hover,pan,zoom_in,zoom_out,box_zoom,undo,redo,reset,save,"
    p = figure(
        tools=tools,
        x_range=(x_r0, x_r1),
        y_range=(y_r0, y_r1),
        width=width,
        height=height
    )

    p.xaxis.axis_label = x_label
    p.yaxis.axis_label = y_label

    configure_axis(p.xaxis, x_scale)
    configure_axis(p.yaxis, y_scale)

    if len(x) > 0:
        p.circle(
            x_scale(x),
            y_scale(y),
            radius=radius,
            radius_dimension=radius_dimension,
            fill_color=LINE_COLOR_DEFAULT,
            fill_alpha=FILL_ALPHA_DEFAULT,
            line_color=None
        )

    return p
