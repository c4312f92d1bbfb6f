"""Errors raised by wrapping numbers"""


class WrapNumError(Exception):
    """Base error class for everything raised by wrapnum"""


class RangeError(WrapNumError, ValueError):
    """Value given to a constructor lies outside of its window"""


class DegenerateWindowError(WrapNumError, ZeroDivisionError):
    """Window has no width, so nothing can be wrapped into it"""


class RepresentationError(WrapNumError, OverflowError):
    """Value does not fit the integer type it is meant to be stored in"""


class IndexConversionError(RepresentationError):
    """Value cannot be used as a sequence index"""
