"""
Configuration of test data
"""
import numpy as np
import flowscale as fs

# Transforms
logicle_xform_262000__0_4__4_5__0_7 = fs.transforms.LogicleTransform(262000, 0.4, 4.5, 0.7)
logicle_xform_10000__0_5__4_5__0 = fs.transforms.LogicleTransform(
    param_t=10000, param_w=0.5, param_m=4.5, param_a=0
)
logicle_xform_10000__0__4_5__0 = fs.transforms.LogicleTransform(
    param_t=10000, param_w=0, param_m=4.5, param_a=0
)
arcsinh_xform = fs.transforms.ArcsinhTransform()

# np objects
test_data_range1 = np.linspace(0.0, 10.0, 101)
test_data_full_range = np.linspace(-262000, 262000, 1001)
test_data_decades = np.concatenate(
    [
        -np.logspace(5.4, -3, 43),
        [0.0],
        np.logspace(-3, 5.4, 43)
    ]
)
test_coordinates = np.linspace(0.0, 1.0, 101)

# Plot options
plot_options_biex_linear = {
    'machine_type': 'FLORESCENT',
    'selected_x_parameter_index': 3,
    'selected_x_scale': fs.SCALE_BIEXP,
    'selected_y_parameter_index': 4,
    'selected_y_scale': fs.SCALE_LINEAR,
    'x_range': [-120, 262000],
    'y_range': [0, 262144],
    'width': 600,
    'height': 400
}
plot_options_arcsin_log = {
    'machine_type': 'CYTOF',
    'selected_x_parameter_index': 0,
    'selected_x_scale': fs.SCALE_ARCSIN,
    'selected_y_parameter_index': 1,
    'selected_y_scale': fs.SCALE_LOG,
    'x_range': [-120, 11000],
    'y_range': [1, 11000],
    'width': 500,
    'height': 500
}
