import numpy as np
import flowscale as fs
from flowscale._utils import plot_utils
from bokeh.plotting import show

# simulated compensated events: a negative population spread around zero
# and a bright population a couple decades up
rng = np.random.default_rng(42)
x = np.concatenate([rng.normal(0, 150, 5000), rng.lognormal(8, 0.6, 5000)])
y = np.concatenate([rng.normal(0, 150, 5000), rng.lognormal(9, 0.4, 5000)])

# create a LogicleTransform instance with the usual parameters for 18-bit data
xform = fs.transforms.LogicleTransform(
    param_t=262144,
    param_w=0.5,
    param_m=4.5,
    param_a=0
)

# scales for a 600 x 600 plot, the y scale maps onto a descending pixel range
plot_scales = fs.get_scales(
    {
        'selected_x_scale': fs.SCALE_BIEXP,
        'selected_y_scale': fs.SCALE_BIEXP,
        'x_transform': xform,
        'y_transform': xform,
        'width': 600,
        'height': 600
    }
)

fig = plot_utils.plot_scatter(
    x,
    y,
    plot_scales['x_scale'],
    plot_scales['y_scale'],
    x_label='FL1-A',
    y_label='FL2-A'
)

show(fig)
