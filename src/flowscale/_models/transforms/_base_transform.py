"""
Abstract base class for Transform classes
"""

from abc import ABC, abstractmethod
from copy import copy
import numpy as np


class Transform(ABC):
    """
    Abstract base class for all transformation classes

    A Transform converts a raw data value into a dimensionless scale
    coordinate and back. All parameters and derived constants are computed
    in ``__init__``. Once a subclass finishes construction it locks the
    instance, any later attribute assignment raises an AttributeError.
    """
    def __init__(self):
        pass

    def __setattr__(self, name, value):
        if self.__dict__.get('_locked', False):
            raise AttributeError(
                "%s instances cannot be modified after construction" % self.__class__.__name__
            )
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(
            "%s instances cannot be modified after construction" % self.__class__.__name__
        )

    @abstractmethod
    def scale(self, value):
        """
        Abstract method for transforming a single data value to a scale coordinate.

        :param value: data value
        :return: scale coordinate
        """
        return

    @abstractmethod
    def inverse(self, coordinate):
        """
        Abstract method for converting a single scale coordinate back to a data value.

        :param coordinate: scale coordinate
        :return: data value
        """
        return

    @abstractmethod
    def ticks(self):
        """
        Abstract method returning the data values to use for axis ticks.

        :return: list of data values
        """
        return

    def inverse_descending(self, coordinate):
        """
        Inverse used when a scale presents the domain endpoints in descending
        order. The coordinate is measured down from the top of the scale.

        :param coordinate: scale coordinate measured from the top of scale
        :return: data value
        """
        return self.inverse(self.scale(self.domain[1]) - coordinate)

    def apply(self, events):
        """
        Apply transform to given events.

        :param events: NumPy array of event data, any shape
        :return: NumPy array of transformed events
        """
        events = np.asarray(events, dtype=float)
        new_events = np.fromiter(
            (self.scale(v) for v in events.ravel()),
            dtype=float,
            count=events.size
        )

        return new_events.reshape(events.shape)

    def apply_inverse(self, events):
        """
        Apply the inverse transform to given events.

        :param events: NumPy array of transformed event data, any shape
        :return: NumPy array of inversely transformed events
        """
        events = np.asarray(events, dtype=float)
        new_events = np.fromiter(
            (self.inverse(v) for v in events.ravel()),
            dtype=float,
            count=events.size
        )

        return new_events.reshape(events.shape)

    @staticmethod
    def nice_floor(x):
        """Round x down to a signed power of ten, zero stays zero."""
        if x > 0:
            return 10.0 ** np.floor(np.log10(x))
        elif x < 0:
            return -(10.0 ** np.ceil(np.log10(-x)))

        return 0.0

    @staticmethod
    def nice_ceil(x):
        """Round x up to a signed power of ten, zero stays zero."""
        if x > 0:
            return 10.0 ** np.ceil(np.log10(x))
        elif x < 0:
            return -(10.0 ** np.floor(np.log10(-x)))

        return 0.0

    def _public_attributes(self):
        # ignore 'private' attributes
        attrs = copy(self.__dict__)
        for k in [k for k in attrs.keys() if k.startswith('_')]:
            del attrs[k]

        return attrs

    def __eq__(self, other):
        """Tests where 2 transforms share the same attributes."""
        if self.__class__ == other.__class__:
            return self._public_attributes() == other._public_attributes()
        else:
            return False

    def __hash__(self):
        return hash((self.__class__.__name__, tuple(sorted(self._public_attributes().items()))))
