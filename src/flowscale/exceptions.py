"""
flowscale.exceptions
~~~~~~~~~~~~~~~~~~~~
This module contains the set of FlowScale exceptions.
"""


class FlowScaleWarning(Warning):
    """A generic FlowScale warning"""
    pass


class FlowScaleException(Exception):
    """A generic FlowScale exception"""
    pass


class InvalidParameterError(FlowScaleException, ValueError):
    """A transform was given parameters outside their allowed range."""
    pass


class SolverDidNotConvergeError(FlowScaleException):
    """The root solve for the Logicle 'd' parameter exceeded its iteration limit."""
    pass


class ScaleDidNotConvergeError(FlowScaleException):
    """The Logicle scale of a single data value exceeded its iteration limit."""
    pass
