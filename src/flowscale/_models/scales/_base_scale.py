"""
Base class & helpers for continuous scales

A continuous scale maps a data domain onto a pixel range. Each subclass
supplies a pair of interpolation functions: one normalizing a data value
to the unit interval for a given pair of domain endpoints, and one mapping
a unit interval value back into the domain.
"""
from abc import ABC, abstractmethod
import numpy as np
from ... import _conf

_E10 = np.sqrt(50)
_E5 = np.sqrt(10)
_E2 = np.sqrt(2)


def tick_increment(start, stop, count):
    """
    Returns the tick step for the given interval & approximate tick count.
    A negative value means the step is the reciprocal of the absolute value,
    (e.g. -10 means a step of 0.1), avoiding floating point error in the step.

    :param start: start of the interval
    :param stop: end of the interval, must be greater than start
    :param count: approximate number of ticks
    :return: tick increment, a power of ten multiplied by 1, 2 or 5
    """
    step = np.float64(stop - start) / max(0, count)
    power = np.floor(np.log10(step))
    error = step / 10.0 ** power

    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power >= 0:
        return factor * 10.0 ** power

    return -(10.0 ** -power) / factor


def tick_step(start, stop, count):
    """
    Returns the absolute tick step for the given interval, signed by the
    direction of the interval.

    :param start: start of the interval
    :param stop: end of the interval
    :param count: approximate number of ticks
    :return: tick step
    """
    step0 = np.float64(abs(stop - start)) / max(0, count)
    step1 = 10.0 ** np.floor(np.log10(step0))
    error = step0 / step1

    if error >= _E10:
        step1 *= 10
    elif error >= _E5:
        step1 *= 5
    elif error >= _E2:
        step1 *= 2

    if stop < start:
        return -step1
    return step1


def ticks(start, stop, count):
    """
    Returns approximately count + 1 uniformly spaced, nicely rounded values
    between start and stop (inclusive).

    :param start: start of the interval
    :param stop: end of the interval
    :param count: approximate number of ticks
    :return: list of tick values, in the same order as start & stop
    """
    if start == stop and count > 0:
        return [start]

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    with np.errstate(divide='ignore', invalid='ignore'):
        step = tick_increment(start, stop, count)

    if step == 0 or not np.isfinite(step):
        return []

    if step > 0:
        first = int(np.ceil(start / step))
        last = int(np.floor(stop / step))
        values = [(first + i) * step for i in range(last - first + 1)]
    else:
        first = int(np.floor(start * step))
        last = int(np.ceil(stop * step))
        values = [(first - i) / step for i in range(first - last + 1)]

    if reverse:
        values.reverse()

    return values


def nice_domain(domain, floor, ceil):
    """
    Extends a domain outward using the given floor & ceil functions. The
    lower endpoint (wherever it is) is floored, the upper one is ceiled.

    :param domain: 2-item sequence of domain endpoints
    :param floor: function rounding a value down
    :param ceil: function rounding a value up
    :return: tuple of the new domain endpoints
    """
    new_domain = list(domain)
    i0, i1 = 0, len(new_domain) - 1
    x0, x1 = new_domain[i0], new_domain[i1]

    if x1 < x0:
        i0, i1 = i1, i0
        x0, x1 = x1, x0

    new_domain[i0] = floor(x0)
    new_domain[i1] = ceil(x1)

    return tuple(new_domain)


def _as_endpoints(values, name):
    values = tuple(float(v) for v in values)
    if len(values) != 2:
        raise ValueError("Scale %s must have exactly 2 endpoints, received %d" % (name, len(values)))

    return values


class ContinuousScale(ABC):
    """
    Abstract base class for continuous scales

    :param domain: 2-item sequence of data endpoints
    :param range: 2-item sequence of pixel endpoints
    :param clamp: if True, values outside the domain map to the range endpoints
    """
    def __init__(self, domain=(0, 1), range=(0, 1), clamp=False):  # noqa
        self._domain = _as_endpoints(domain, 'domain')
        self._range = _as_endpoints(range, 'range')
        self._clamp = bool(clamp)

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'domain: {self._domain}, range: {self._range})'
        )

    @abstractmethod
    def _deinterpolate(self, a, b, value):
        """Normalize a data value to [0, 1] for domain endpoints a & b"""
        return

    @abstractmethod
    def _reinterpolate(self, a, b, t):
        """Map a [0, 1] value back to the data domain for endpoints a & b"""
        return

    def domain(self, values=None):
        """
        Get or set the scale domain.

        :param values: 2-item sequence of domain endpoints. If None, the
            current domain is returned.
        :return: domain tuple when getting, the scale itself when setting
        """
        if values is None:
            return self._domain

        self._domain = _as_endpoints(values, 'domain')

        return self

    def range(self, values=None):
        """
        Get or set the scale range.

        :param values: 2-item sequence of range endpoints. If None, the
            current range is returned.
        :return: range tuple when getting, the scale itself when setting
        """
        if values is None:
            return self._range

        self._range = _as_endpoints(values, 'range')

        return self

    def clamp(self, flag=None):
        """
        Get or set whether the scale clamps values outside its domain & range.

        :param flag: True to enable clamping. If None, the current setting is returned.
        :return: clamp setting when getting, the scale itself when setting
        """
        if flag is None:
            return self._clamp

        self._clamp = bool(flag)

        return self

    def _map_value(self, value):
        d0, d1 = self._domain
        r0, r1 = self._range

        # descending domains are mapped with both endpoint pairs swapped
        if d1 < d0:
            d0, d1 = d1, d0
            r0, r1 = r1, r0

        if self._clamp and value <= d0:
            t = 0.0
        elif self._clamp and value >= d1:
            t = 1.0
        else:
            t = self._deinterpolate(d0, d1, value)

        return r0 + (r1 - r0) * t

    def _invert_value(self, pixel):
        d0, d1 = self._domain
        r0, r1 = self._range

        if r1 < r0:
            d0, d1 = d1, d0
            r0, r1 = r1, r0

        span = r1 - r0
        t = (pixel - r0) / span if span else 0.0

        if self._clamp and t <= 0:
            return d0
        elif self._clamp and t >= 1:
            return d1

        return self._reinterpolate(d0, d1, t)

    def map(self, value):
        """
        Map a data value (or NumPy array of values) to the pixel range.

        :param value: data value or array of data values
        :return: pixel value or array of pixel values
        """
        if np.ndim(value) > 0:
            values = np.asarray(value, dtype=float)
            return np.array([self._map_value(v) for v in values.ravel()], dtype=float).reshape(values.shape)

        return self._map_value(value)

    scale = map
    __call__ = map

    def invert(self, pixel):
        """
        Map a pixel value (or NumPy array of values) back to the data domain.

        :param pixel: pixel value or array of pixel values
        :return: data value or array of data values
        """
        if np.ndim(pixel) > 0:
            values = np.asarray(pixel, dtype=float)
            return np.array([self._invert_value(v) for v in values.ravel()], dtype=float).reshape(values.shape)

        return self._invert_value(pixel)

    @abstractmethod
    def ticks(self, count=_conf.tick_count_default):
        """
        Returns representative data values from the domain for axis ticks.

        :param count: approximate number of ticks, not all scales use it
        :return: list of data values
        """
        return

    @abstractmethod
    def tick_format(self, count=_conf.tick_count_default, specifier=None):
        """
        Returns a function for formatting tick values as strings.

        :param count: approximate number of ticks, should match the ticks call
        :param specifier: optional Python format specifier
        :return: function taking a tick value and returning a string
        """
        return

    @abstractmethod
    def nice(self, count=_conf.tick_count_default):
        """
        Extend the domain so its endpoints are round values.

        :param count: approximate number of ticks, not all scales use it
        :return: the scale itself
        """
        return

    def _copy_state_to(self, other):
        other._domain = self._domain
        other._range = self._range
        other._clamp = self._clamp

        return other

    @abstractmethod
    def copy(self):
        """
        Returns an independent copy of the scale.

        :return: new scale instance
        """
        return
