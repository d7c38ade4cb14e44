"""
Configuration & default settings used by FlowScale
"""
import numpy as np

# Scale type tags accepted by the scale factory
SCALE_LINEAR = 'SCALE_LINEAR'
SCALE_LOG = 'SCALE_LOG'
SCALE_BIEXP = 'SCALE_BIEXP'
SCALE_ARCSIN = 'SCALE_ARCSIN'

scale_types = (SCALE_LINEAR, SCALE_LOG, SCALE_BIEXP, SCALE_ARCSIN)

# Default Logicle parameters used for biexponential axes
logicle_defaults = {
    'param_t': 262000,
    'param_w': 0.4,
    'param_m': 4.5,
    'param_a': 0.7
}

# Arcsinh axes cover a fixed data range with a fixed set of ticks
arcsinh_bottom = -120
arcsinh_top = 11000
arcsinh_ticks = (-5.0, 0.0, 10.0, 100.0, 1000.0, 10000.0)

# tick label format used by the transform based scales
exp_tick_format = '.0e'

# the factory builds natural log scales
log_base_default = np.e

tick_count_default = 10
