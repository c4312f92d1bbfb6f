"""Numbers that wrap around an arbitrary minimum and maximum"""
from wrapnum.core import WrapNum, wrap, wrap_inclusive, wrap_result
from wrapnum.errors import (
    DegenerateWindowError,
    IndexConversionError,
    RangeError,
    RepresentationError,
    WrapNumError,
)
from wrapnum.inttypes import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntType,
)

__version__ = '0.2.0'
