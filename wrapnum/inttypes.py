"""Bounded integer representations a WrapNum can be stored as"""
from numbers import Integral
from typing import Dict

from wrapnum.errors import RepresentationError


class IntType:
    """Fixed width integer, signed or unsigned.

    Only describes the bounds of the type, values themselves stay plain ``int``.
    """

    def __init__(self, name: str, bits: int, signed: bool):
        self.name = name
        self.bits = bits
        self.signed = signed
        if signed:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = (1 << bits) - 1

    zero = 0
    one = 1

    def __contains__(self, value) -> bool:
        return isinstance(value, Integral) and self.min_value <= value <= self.max_value

    def convert(self, value) -> int:
        """Returns value as a plain int, raises RepresentationError if it does not fit"""
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise RepresentationError(f'{value!r} is not an integer')
        if value not in self:
            raise RepresentationError(f'{value} does not fit in {self.name}')
        return int(value)

    def __repr__(self):
        return '{}({!r}, {}, {})'.format(self.__class__.__name__, self.name, self.bits, self.signed)

    def __str__(self):
        return self.name


U8 = IntType('u8', 8, False)
U16 = IntType('u16', 16, False)
U32 = IntType('u32', 32, False)
U64 = IntType('u64', 64, False)
U128 = IntType('u128', 128, False)
USIZE = IntType('usize', 64, False)
I8 = IntType('i8', 8, True)
I16 = IntType('i16', 16, True)
I32 = IntType('i32', 32, True)
I64 = IntType('i64', 64, True)
I128 = IntType('i128', 128, True)
ISIZE = IntType('isize', 64, True)

INT_TYPES: Dict[str, IntType] = {
    t.name: t for t in (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)
}


def by_name(name: str) -> IntType:
    """Looks up an IntType by its name, e.g. ``'u8'``"""
    return INT_TYPES[name.lower()]
