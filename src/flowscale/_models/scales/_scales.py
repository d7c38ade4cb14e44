"""
Continuous scale sub-classes
"""
import warnings
import numpy as np
from ._base_scale import ContinuousScale, ticks, tick_increment, tick_step, nice_domain
from ... import _conf
from ...exceptions import FlowScaleWarning


class LinearScale(ContinuousScale):
    """
    Linear scale, data values are mapped proportionally onto the range.

    :param domain: 2-item sequence of data endpoints
    :param range: 2-item sequence of pixel endpoints
    :param clamp: if True, values outside the domain map to the range endpoints
    """
    def __init__(self, domain=(0, 1), range=(0, 1), clamp=False):  # noqa
        ContinuousScale.__init__(self, domain, range, clamp)

    def _deinterpolate(self, a, b, value):
        span = b - a
        if span:
            return (value - a) / span
        return 0.0

    def _reinterpolate(self, a, b, t):
        return a + (b - a) * t

    def ticks(self, count=_conf.tick_count_default):
        """
        Returns uniformly spaced, nicely rounded values from the domain.

        :param count: approximate number of ticks
        :return: list of data values
        """
        d0, d1 = self._domain

        return ticks(d0, d1, count)

    def tick_format(self, count=_conf.tick_count_default, specifier=None):
        """
        Returns a function for formatting tick values. By default, values are
        shown in fixed point notation with just enough precision to tell
        neighboring ticks apart.

        :param count: approximate number of ticks, should match the ticks call
        :param specifier: optional Python format specifier, e.g. '.2f'
        :return: function taking a tick value and returning a string
        """
        if specifier is None:
            d0, d1 = self._domain
            with np.errstate(divide='ignore', invalid='ignore'):
                step = tick_step(d0, d1, count)

            if step and np.isfinite(step):
                precision = max(0, -int(np.floor(np.log10(abs(step)))))
            else:
                precision = 0
            specifier = '.%df' % precision

        def formatter(value):
            return format(value, specifier)

        return formatter

    def nice(self, count=_conf.tick_count_default):
        """
        Extend the domain so it starts & ends on round values, the tick step
        for the given count.

        :param count: approximate number of ticks
        :return: the scale itself
        """
        new_domain = list(self._domain)
        i0, i1 = 0, 1
        start, stop = new_domain

        if stop < start:
            start, stop = stop, start
            i0, i1 = i1, i0

        if start == stop:
            return self

        step = tick_increment(start, stop, count)

        if step > 0:
            start = np.floor(start / step) * step
            stop = np.ceil(stop / step) * step
            step = tick_increment(start, stop, count)
        elif step < 0:
            start = np.ceil(start * step) / step
            stop = np.floor(stop * step) / step
            step = tick_increment(start, stop, count)

        if step > 0:
            new_domain[i0] = np.floor(start / step) * step
            new_domain[i1] = np.ceil(stop / step) * step
        elif step < 0:
            new_domain[i0] = np.ceil(start * step) / step
            new_domain[i1] = np.floor(stop * step) / step

        return self.domain(new_domain)

    def copy(self):
        """
        Returns an independent copy of the scale.

        :return: new LinearScale instance
        """
        return self._copy_state_to(LinearScale())


class LogScale(ContinuousScale):
    """
    Logarithmic scale. The domain must be strictly positive or strictly
    negative, negative domains are reflected.

    :param domain: 2-item sequence of data endpoints
    :param range: 2-item sequence of pixel endpoints
    :param base: logarithm base, used for ticks & nice, default is 10
    :param clamp: if True, values outside the domain map to the range endpoints
    """
    def __init__(self, domain=(1, 10), range=(0, 1), base=10, clamp=False):  # noqa
        ContinuousScale.__init__(self, domain, range, clamp)
        self._base = base

        self._check_domain()

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'domain: {self._domain}, range: {self._range}, base: {self._base})'
        )

    def _check_domain(self):
        d0, d1 = self._domain
        if d0 * d1 <= 0:
            warnings.warn(
                "Log scale domain %s includes or spans zero, values will not map" % (self._domain,),
                FlowScaleWarning
            )

    def domain(self, values=None):
        """
        Get or set the scale domain.

        :param values: 2-item sequence of domain endpoints. If None, the
            current domain is returned.
        :return: domain tuple when getting, the scale itself when setting
        """
        result = ContinuousScale.domain(self, values)
        if values is not None:
            self._check_domain()

        return result

    def base(self, value=None):
        """
        Get or set the logarithm base.

        :param value: new base. If None, the current base is returned.
        :return: base when getting, the scale itself when setting
        """
        if value is None:
            return self._base

        self._base = value

        return self

    def _deinterpolate(self, a, b, value):
        with np.errstate(divide='ignore', invalid='ignore'):
            span = np.log(b / a)
            if span:
                return np.log(value / a) / span
        return span

    def _reinterpolate(self, a, b, t):
        with np.errstate(invalid='ignore'):
            if a < 0:
                return -np.power(-b, t) * np.power(-a, 1 - t)
            return np.power(b, t) * np.power(a, 1 - t)

    def _log(self, x):
        if self._base == 10:
            return np.log10(x)
        elif self._base == np.e:
            return np.log(x)
        elif self._base == 2:
            return np.log2(x)
        return np.log(x) / np.log(self._base)

    def _logs(self, x):
        # negative domains are reflected
        if self._domain[0] < 0:
            return -self._log(-x)
        return self._log(x)

    def _pows(self, x):
        if self._domain[0] < 0:
            return -(self._base ** -x)
        return self._base ** x

    def ticks(self, count=_conf.tick_count_default):
        """
        Returns values from the domain for axis ticks. For integer bases
        spanning fewer than count powers, every multiple of each power is
        included (e.g. 1, 2, ... 9, 10, 20, ...), otherwise only powers of
        the base are returned.

        :param count: approximate number of ticks
        :return: list of data values
        """
        u, v = self._domain
        reverse = v < u
        if reverse:
            u, v = v, u

        i = self._logs(u)
        j = self._logs(v)
        values = []

        if float(self._base).is_integer() and j - i < count:
            base = int(self._base)
            i = int(np.round(i)) - 1
            j = int(np.round(j)) + 1
            if u > 0:
                multipliers = range(1, base)
            else:
                multipliers = range(base - 1, 0, -1)

            for power in range(i, j):
                p = self._pows(power)
                for k in multipliers:
                    t = p * k
                    if t < u:
                        continue
                    if t > v:
                        break
                    values.append(t)
        else:
            values = [self._pows(e) for e in ticks(i, j, min(j - i, count))]

        if reverse:
            values.reverse()

        return values

    def tick_format(self, count=_conf.tick_count_default, specifier=None):
        """
        Returns a function for formatting tick values, exponential notation
        for base 10 and plain numbers otherwise.

        :param count: approximate number of ticks, should match the ticks call
        :param specifier: optional Python format specifier
        :return: function taking a tick value and returning a string
        """
        if specifier is None:
            specifier = _conf.exp_tick_format if self._base == 10 else ','

        def formatter(value):
            return format(value, specifier)

        return formatter

    def nice(self, count=_conf.tick_count_default):
        """
        Extend the domain to whole powers of the base.

        :param count: ignored, accepted for compatibility with other scales
        :return: the scale itself
        """
        new_domain = nice_domain(
            self._domain,
            floor=lambda x: self._pows(np.floor(self._logs(x))),
            ceil=lambda x: self._pows(np.ceil(self._logs(x)))
        )

        return self.domain(new_domain)

    def copy(self):
        """
        Returns an independent copy of the scale.

        :return: new LogScale instance
        """
        new_scale = LogScale(base=self._base)

        return self._copy_state_to(new_scale)


class TransformScale(ContinuousScale):
    """
    Continuous scale driven by a Transform instance (e.g. LogicleTransform
    or ArcsinhTransform).

    Data values map to the range through the transform's scale coordinate,
    the domain endpoints only determine direction & rounding. When the
    endpoints are presented in descending order the transform's descending
    inverse is used to invert pixels.

    :param transform: Transform instance, shared by copies of this scale
    :param domain: 2-item sequence of data endpoints. If None, the transform's
        domain is used.
    :param range: 2-item sequence of pixel endpoints
    :param clamp: if True, values outside the domain map to the range endpoints
    """
    def __init__(self, transform, domain=None, range=(0, 1), clamp=False):  # noqa
        if domain is None:
            domain = transform.domain

        ContinuousScale.__init__(self, domain, range, clamp)
        self._transform = transform

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'{self._transform!r}, domain: {self._domain}, range: {self._range})'
        )

    def transform(self):
        """
        Returns the Transform instance driving this scale.

        :return: Transform instance
        """
        return self._transform

    def _deinterpolate(self, a, b, value):
        return self._transform.scale(value)

    def _reinterpolate(self, a, b, t):
        if a > b:
            return self._transform.inverse_descending(t)
        return self._transform.inverse(t)

    def ticks(self, count=_conf.tick_count_default):
        """
        Returns the transform's tick values.

        :param count: ignored, the transform determines the ticks
        :return: list of data values
        """
        return self._transform.ticks()

    def tick_format(self, count=_conf.tick_count_default, specifier=None):
        """
        Returns a function formatting tick values in exponential notation.

        :param count: ignored
        :param specifier: ignored, transform scales always use exponential notation
        :return: function taking a tick value and returning a string
        """
        def formatter(value):
            return format(value, _conf.exp_tick_format)

        return formatter

    def nice(self, count=_conf.tick_count_default):
        """
        Extend the domain outward to signed powers of ten.

        :param count: ignored
        :return: the scale itself
        """
        new_domain = nice_domain(
            self._domain,
            floor=self._transform.nice_floor,
            ceil=self._transform.nice_ceil
        )

        return self.domain(new_domain)

    def copy(self):
        """
        Returns a copy of the scale with its own domain & range, sharing the
        same (immutable) transform.

        :return: new TransformScale instance
        """
        new_scale = TransformScale(self._transform)

        return self._copy_state_to(new_scale)
