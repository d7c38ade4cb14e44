""" transforms module """
from ._transforms import \
    LogicleTransform, \
    ArcsinhTransform

__all__ = [
    'LogicleTransform',
    'ArcsinhTransform'
]
