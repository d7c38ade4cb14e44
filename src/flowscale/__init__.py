"""
Defines the public API for FlowScale
"""
from ._models import transforms
from ._models import scales
from ._utils.scale_utils import create_scale, get_scales, get_plot_image_key
from ._conf import SCALE_LINEAR, SCALE_LOG, SCALE_BIEXP, SCALE_ARCSIN
from . import exceptions

from ._version import __version__

__all__ = [
    'transforms',
    'scales',
    'create_scale',
    'get_scales',
    'get_plot_image_key',
    'SCALE_LINEAR',
    'SCALE_LOG',
    'SCALE_BIEXP',
    'SCALE_ARCSIN',
    'exceptions'
]
