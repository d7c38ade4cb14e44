"""
Transform sub-classes for biexponential (Logicle) and arcsinh display scales
"""
import numpy as np
from ._base_transform import Transform
from ... import _conf
from ...exceptions import InvalidParameterError, SolverDidNotConvergeError, ScaleDidNotConvergeError

SOLVER_MAX_ITERATIONS = 20
SCALE_MAX_ITERATIONS = 10

# 16 terms is enough for full precision of typical scales
TAYLOR_TERMS = 16


def _log_root(b, w):
    """
    Solve f(d) = 2 * (ln(d) - ln(b)) + w * (d + b) = 0 for d, given b and w.

    Safeguarded Newton's method (RTSAFE from Numerical Recipes) on the
    bracket [0, b]. A bisection step is taken whenever the Newton step would
    leave the bracket or is not converging quickly enough.

    :param b: positive Logicle 'b' parameter
    :param w: non-negative Logicle 'w' parameter
    :return: the root d
    """
    # w == 0 means it's really arcsinh
    if w == 0:
        return b

    # precision is the same as that of b
    tolerance = 2 * np.spacing(b)

    d_lo = 0.0
    d_hi = b

    # bisection first step
    d = (d_lo + d_hi) / 2
    last_delta = d_hi - d_lo

    f_b = -2 * np.log(b) + w * b
    f = 2 * np.log(d) + w * d + f_b
    last_f = np.nan

    for _ in range(SOLVER_MAX_ITERATIONS):
        df = 2 / d + w

        if ((d - d_hi) * df - f) * ((d - d_lo) * df - f) >= 0 or abs(2 * f) > abs(last_delta * df):
            delta = (d_hi - d_lo) / 2
            d = d_lo + delta
            if d == d_lo:
                return d
        else:
            delta = f / df
            t = d
            d -= delta
            if d == t:
                return d

        if abs(delta) < tolerance:
            return d

        last_delta = delta

        f = 2 * np.log(d) + w * d + f_b
        if f == 0 or f == last_f:
            # found the root or not going to get any closer
            return d
        last_f = f

        if f < 0:
            d_lo = d
        else:
            d_hi = d

    raise SolverDidNotConvergeError(
        "Logicle root solve did not converge in %d iterations (b: %s, w: %s)" % (SOLVER_MAX_ITERATIONS, b, w)
    )


class LogicleTransform(Transform):
    """
    Logicle transformation, the inverse of a modified bi-exponential function:

    logicle(x, T, W, M, A) = root(B(y, T, W, M, A) − x)

    where B is defined as:

    B(y, T, W, M, A) = ae^(by) − ce^(−dy) − f

    The Logicle transformation was originally defined in the publication:

    Moore WA and Parks DR. Update for the logicle data scale including operational
    code implementations. Cytometry A., 2012:81A(4):273–277.

    Data value param_t maps to scale coordinate 1, large values map to
    locations similar to a logarithmic scale, and param_a decades of negative
    data are brought on scale. The result is accurate to double precision.
    Near data zero a Taylor series replaces the exponential formula, where
    the two exponential terms nearly cancel.

    :param param_t: parameter for the top of the linear scale (e.g. 262144)
    :param param_w: parameter for the approximate number of decades in the linear region
        (with param_w = 0 there is no Taylor region, so the exponential terms
        cancel for data values near zero and scale may fail to converge there)
    :param param_m: parameter for the number of decades the true logarithmic scale
        approaches at the high end of the scale
    :param param_a: parameter for the additional number of negative decades
    :param bins: if greater than zero, param_a is adjusted so data zero falls
        exactly on a bin boundary of a lookup table with this many bins
    """
    def __init__(
        self,
        param_t,
        param_w,
        param_m=4.5,
        param_a=0,
        bins=0
    ):
        Transform.__init__(self)

        if param_t <= 0:
            raise InvalidParameterError("T is not positive")
        if param_w < 0:
            raise InvalidParameterError("W is negative")
        if param_m <= 0:
            raise InvalidParameterError("M is not positive")
        if 2 * param_w > param_m:
            raise InvalidParameterError("W is too large")
        if -param_a > param_w or param_a + param_w > param_m - param_w:
            raise InvalidParameterError("A is too large")

        # make sure zero is on a bin boundary by adjusting A
        if bins > 0:
            zero = (param_w + param_a) / (param_m + param_a)
            zero = np.floor(zero * bins + 0.5) / bins
            param_a = (param_m * zero - param_w) / (1 - zero)

        self.param_t = param_t
        self.param_w = param_w
        self.param_m = param_m
        self.param_a = param_a
        self.bins = bins

        # formulas from the biexponential paper
        w = param_w / (param_m + param_a)
        x2 = param_a / (param_m + param_a)
        x1 = x2 + w
        x0 = x2 + 2 * w
        b = (param_m + param_a) * np.log(10.0)
        d = _log_root(b, w)

        c_a = np.exp(x0 * (b + d))
        mf_a = np.exp(b * x1) - c_a / np.exp(d * x1)
        a = param_t / ((np.exp(b) - mf_a) - c_a / np.exp(d))

        self.a = float(a)
        self.b = float(b)
        self.c = float(c_a * a)
        self.d = float(d)
        self.f = float(-mf_a * a)
        self.w = float(w)
        self.x0 = float(x0)
        self.x1 = float(x1)
        self.x2 = float(x2)

        # scale value below which the Taylor series is used
        self.x_taylor = self.x1 + self.w / 4

        pos_coef = self.a * np.exp(self.b * self.x1)
        neg_coef = -self.c / np.exp(self.d * self.x1)
        taylor = []
        for i in range(TAYLOR_TERMS):
            pos_coef *= self.b / (i + 1)
            neg_coef *= -self.d / (i + 1)
            taylor.append(float(pos_coef + neg_coef))

        # exact result of the Logicle condition
        taylor[1] = 0.0
        self.taylor = tuple(taylor)

        self.domain = (float(self.inverse(0.0)), param_t)
        self._top_coordinate = self.scale(param_t)

        self._locked = True

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f't: {self.param_t}, w: {self.param_w}, '
            f'm: {self.param_m}, a: {self.param_a})'
        )

    def series_biexponential(self, coordinate):
        """
        Computes the Taylor series approximation of the biexponential
        function around x1 (data zero).

        :param coordinate: scale coordinate
        :return: data value
        """
        x = coordinate - self.x1

        # Horner's method, taylor[i] is the coefficient of x^(i + 1)
        total = self.taylor[-1]
        for coef in self.taylor[-2::-1]:
            total = total * x + coef

        return total * x

    def scale(self, value):
        """
        Computes the Logicle scale coordinate of the given data value.

        :param value: data value
        :return: scale coordinate
        :raises ScaleDidNotConvergeError: if Halley's method does not converge,
            e.g. for values very close to zero when param_w is 0
        """
        # handle true zero separately
        if value == 0:
            return self.x1

        # reflect negative values
        negative = value < 0
        if negative:
            value = -value

        # initial guess at solution
        if value < self.f:
            # use linear approximation in the quasi linear region
            x = self.x1 + value / self.taylor[0]
        else:
            # otherwise use ordinary logarithm
            x = np.log(value / self.a) / self.b

        # try for double precision unless in extended range
        tolerance = 3 * np.spacing(1.0)
        if x > 1:
            tolerance = 3 * np.spacing(x)

        for _ in range(SCALE_MAX_ITERATIONS):
            ae2bx = self.a * np.exp(self.b * x)
            ce2mdx = self.c / np.exp(self.d * x)
            if x < self.x_taylor:
                y = self.series_biexponential(x) - value
            else:
                # better roundoff behavior than the formal definition
                y = (ae2bx + self.f) - (ce2mdx + value)
            abe2bx = self.b * ae2bx
            cde2mdx = self.d * ce2mdx
            dy = abe2bx + cde2mdx
            ddy = self.b * abe2bx - self.d * cde2mdx

            # Halley's method
            delta = y / (dy * (1 - y * ddy / (2 * dy * dy)))
            x -= delta

            if abs(delta) < tolerance:
                if negative:
                    return 2 * self.x1 - x
                return x

        raise ScaleDidNotConvergeError(
            "Logicle scale did not converge in %d iterations for value %s" % (SCALE_MAX_ITERATIONS, value)
        )

    def inverse(self, coordinate):
        """
        Computes the data value of the given Logicle scale coordinate.

        :param coordinate: scale coordinate
        :return: data value
        """
        # reflect negative scale regions
        negative = coordinate < self.x1
        if negative:
            coordinate = 2 * self.x1 - coordinate

        if coordinate < self.x_taylor:
            # near data zero use the series expansion
            value = self.series_biexponential(coordinate)
        else:
            value = (self.a * np.exp(self.b * coordinate) + self.f) - self.c / np.exp(self.d * coordinate)

        if negative:
            return -value
        return value

    def inverse_descending(self, coordinate):
        """
        Inverse for a coordinate measured down from the top of the scale.

        :param coordinate: scale coordinate measured from the top of scale
        :return: data value
        """
        return self.inverse(self._top_coordinate - coordinate)

    def slope(self, coordinate):
        """
        Computes the slope of the biexponential function at a scale coordinate.

        :param coordinate: scale coordinate
        :return: slope of the biexponential at the coordinate
        """
        # reflect negative scale regions
        if coordinate < self.x1:
            coordinate = 2 * self.x1 - coordinate

        return self.a * self.b * np.exp(self.b * coordinate) + self.c * self.d / np.exp(self.d * coordinate)

    def dynamic_range(self):
        """
        Ratio of the slope at the top of the scale to the slope at data zero.

        :return: dynamic range
        """
        return self.slope(1.0) / self.slope(self.x1)

    def axis_labels(self):
        """
        Chooses a set of data values for labelling a Logicle axis: zero and
        powers of ten in both directions, up to the top of scale.

        :return: list of data values in ascending order
        """
        # number of decades in the positive logarithmic region
        p = self.param_m - 2 * self.param_w
        # smallest power of 10 in the region
        log10x = int(np.ceil(np.log10(self.param_t) - p))
        x = 10.0 ** log10x

        if x > self.param_t:
            x = float(self.param_t)
            n_pos = 1
        else:
            n_pos = int(np.floor(np.log10(self.param_t) - log10x)) + 1

        # bottom of scale
        bottom = self.inverse(0.0)

        if x > -bottom:
            n_neg = 0
        elif x == self.param_t:
            n_neg = 1
        else:
            n_neg = int(np.floor(np.log10(-bottom) - log10x)) + 1

        labels = [0.0] * (n_neg + max(n_neg, n_pos) + 1)
        for i in range(1, n_neg + 1):
            labels[n_neg - i] = -x
            labels[n_neg + i] = x
            x *= 10
        for i in range(n_neg + 1, n_pos + 1):
            labels[n_neg + i] = x
            x *= 10

        return labels

    def ticks(self):
        """
        Data values for axis ticks, see axis_labels.

        :return: list of data values
        """
        return self.axis_labels()


class ArcsinhTransform(Transform):
    """
    Inverse hyperbolic sine transformation over a fixed data domain of
    [-120, 11000]. Scale coordinates are normalized by the arcsinh of the
    top of the domain.

    The axis ticks are a fixed set of values and are not derived from the domain.
    """
    def __init__(self):
        Transform.__init__(self)

        self.bottom = _conf.arcsinh_bottom
        self.top = _conf.arcsinh_top
        self.domain = (self.bottom, self.top)

        self._asinh_top = np.arcsinh(max(self.bottom, self.top))

        self._locked = True

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'bottom: {self.bottom}, top: {self.top})'
        )

    def scale(self, value):
        """
        Computes the arcsinh scale coordinate of the given data value.

        :param value: data value
        :return: scale coordinate
        """
        return np.arcsinh(value) / self._asinh_top

    def inverse(self, coordinate):
        """
        Inverse used for ascending domains.

        :param coordinate: scale coordinate
        :return: data value
        """
        with np.errstate(over='ignore'):
            return np.sinh(coordinate)

    def inverse_descending(self, coordinate):
        """
        Inverse used for descending domains, mirrored around the top of the domain.

        :param coordinate: scale coordinate
        :return: data value
        """
        with np.errstate(over='ignore'):
            return np.sinh(self.top - coordinate)

    def ticks(self):
        """
        Fixed data values for axis ticks.

        :return: list of data values
        """
        return list(_conf.arcsinh_ticks)
