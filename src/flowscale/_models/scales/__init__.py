""" scales module """
from ._scales import \
    LinearScale, \
    LogScale, \
    TransformScale

__all__ = [
    'LinearScale',
    'LogScale',
    'TransformScale'
]
