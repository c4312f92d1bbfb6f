"""Integers that wrap around an arbitrary minimum and maximum.

Make a number, give it a window, and forget about it: every addition or
subtraction that would leave the window lands back inside it by modular
arithmetic instead of saturating or raising.

The window of a number is ``[min, max)``. Construction also accepts
``value == max``, but the first arithmetic operation normalises the value back
into ``[min, max)``.
"""
from numbers import Integral
from typing import Optional, Union

from wrapnum.errors import DegenerateWindowError, IndexConversionError, RangeError, RepresentationError
from wrapnum.inttypes import IntType, USIZE

Operand = Union['WrapNum', int]


def wrap_result(value: int, min_: int, max_: int) -> int:
    """Wraps value into ``[min_, max_)``.

    Python's ``%`` takes the sign of the divisor, so for a positive window the
    remainder is never negative and values below ``min_`` wrap backwards.
    """
    range_ = max_ - min_
    if range_ == 0:
        raise DegenerateWindowError(f'Window [{min_}, {max_}) has no width')
    return (value - min_) % range_ + min_


def _operand_value(other) -> Optional[int]:
    if isinstance(other, WrapNum):
        return other.value
    if isinstance(other, Integral) and not isinstance(other, bool):
        return int(other)
    return None


class WrapNum:
    """Number with arbitrary wrapping.

    ``min`` and ``max`` are never touched by arithmetic, only ``value`` is. The
    left operand's bounds always win, ``b``'s bounds in ``a + b`` are ignored.
    """

    __slots__ = ('value', 'min', 'max', 'int_type')

    def __init__(self, value: int, min_: int, max_: int, int_type: IntType = USIZE):
        self.int_type = int_type
        self.value, self.min, self.max = self._checked(value, min_, max_)

    def _checked(self, value, min_, max_):
        value = self.int_type.convert(value)
        min_ = self.int_type.convert(min_)
        max_ = self.int_type.convert(max_)
        if value > max_:
            raise RangeError('`value` is greater than `max`.')
        if value < min_:
            raise RangeError('`value` is less than `min`.')
        return value, min_, max_

    @classmethod
    def new(cls, max_: int, int_type: IntType = USIZE) -> 'WrapNum':
        """Zeroed number wrapping at max_"""
        return cls(int_type.zero, int_type.zero, max_, int_type)

    @classmethod
    def new_with_max(cls, value: int, max_: int, int_type: IntType = USIZE) -> 'WrapNum':
        return cls(value, int_type.zero, max_, int_type)

    @classmethod
    def new_with_min_max(cls, value: int, min_: int, max_: int, int_type: IntType = USIZE) -> 'WrapNum':
        return cls(value, min_, max_, int_type)

    @classmethod
    def from_int(cls, value: int, int_type: IntType = USIZE) -> 'WrapNum':
        """Promotes a bare integer, wrapping at the type's own maximum.

        Any value of int_type is accepted, negative ones included, since the
        window is the type's own. Those wrap into ``[0, max)`` on the first
        arithmetic operation.
        """
        new = cls.__new__(cls)
        new.int_type = int_type
        new.value, new.min, new.max = int_type.convert(value), int_type.zero, int_type.max_value
        return new

    @classmethod
    def default(cls, int_type: IntType = USIZE) -> 'WrapNum':
        return cls.from_int(int_type.zero, int_type)

    def set(self, value: int, min_: Optional[int] = None, max_: Optional[int] = None) -> 'WrapNum':
        """Replaces the number wholesale. Bounds not given are kept."""
        self.value, self.min, self.max = self._checked(
            value,
            self.min if min_ is None else min_,
            self.max if max_ is None else max_,
        )
        return self

    def copy(self) -> 'WrapNum':
        new = WrapNum.__new__(self.__class__)
        new.value, new.min, new.max, new.int_type = self.value, self.min, self.max, self.int_type
        return new

    def _with_value(self, value: int) -> 'WrapNum':
        new = self.copy()
        new.value = value
        return new

    def _added(self, rhs: int) -> int:
        return wrap_result(self.value + rhs, self.min, self.max)

    def _subtracted(self, rhs: int) -> int:
        # One window is added back when rhs exceeds value, the modulo handles deeper underflow
        if self.value < rhs:
            result = self.max - self.min + (self.value - rhs)
        else:
            result = self.value - rhs
        return wrap_result(result, self.min, self.max)

    def add_wrapped(self, other: 'WrapNum') -> 'WrapNum':
        return self._with_value(self._added(other.value))

    def add_scalar(self, other: int) -> 'WrapNum':
        return self._with_value(self._added(other))

    def sub_wrapped(self, other: 'WrapNum') -> 'WrapNum':
        return self._with_value(self._subtracted(other.value))

    def sub_scalar(self, other: int) -> 'WrapNum':
        return self._with_value(self._subtracted(other))

    def __add__(self, other: Operand) -> 'WrapNum':
        rhs = _operand_value(other)
        if rhs is None:
            return NotImplemented
        return self._with_value(self._added(rhs))

    def __radd__(self, other: int) -> 'WrapNum':
        return self.__add__(other)

    def __sub__(self, other: Operand) -> 'WrapNum':
        rhs = _operand_value(other)
        if rhs is None:
            return NotImplemented
        return self._with_value(self._subtracted(rhs))

    def __iadd__(self, other: Operand) -> 'WrapNum':
        rhs = _operand_value(other)
        if rhs is None:
            return NotImplemented
        self.value = self._added(rhs)
        return self

    def __isub__(self, other: Operand) -> 'WrapNum':
        rhs = _operand_value(other)
        if rhs is None:
            return NotImplemented
        self.value = self._subtracted(rhs)
        return self

    def __eq__(self, other):
        """Compares values only, see total_eq for comparing windows too"""
        rhs = _operand_value(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs

    # Mutable, so not hashable
    __hash__ = None

    def total_eq(self, other: 'WrapNum') -> bool:
        if not isinstance(other, WrapNum):
            return False
        return (self.value, self.min, self.max) == (other.value, other.min, other.max)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        try:
            return USIZE.convert(self.value)
        except RepresentationError as e:
            raise IndexConversionError('Failed to convert index to usize') from e

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self):
        return str(self.value)

    def __format__(self, format_spec):
        return format(self.value, format_spec)

    def __repr__(self):
        return '{}(value={}, min={}, max={}, int_type={})'.format(
            self.__class__.__name__, self.value, self.min, self.max, self.int_type
        )


def wrap(*args: Union[int, range], int_type: IntType = USIZE) -> WrapNum:
    """Shorthand constructor.

    1. ``wrap(max_)``: zero value and minimum.
    2. ``wrap(value, max_)``: zero minimum.
    3. ``wrap(value, min_, max_)``
    4. ``wrap(range(min_, max_))``: starts at min_, wraps before max_.
    """
    if len(args) == 1:
        (arg,) = args
        if isinstance(arg, range):
            if arg.step != 1:
                raise ValueError(f'Cannot wrap over a range with step {arg.step}')
            return WrapNum.new_with_min_max(arg.start, arg.start, arg.stop, int_type)
        return WrapNum.new(arg, int_type)
    if len(args) == 2:
        return WrapNum.new_with_max(args[0], args[1], int_type)
    if len(args) == 3:
        return WrapNum.new_with_min_max(args[0], args[1], args[2], int_type)
    raise TypeError(f'wrap() takes 1 to 3 positional arguments but {len(args)} were given')


def wrap_inclusive(*args: int, int_type: IntType = USIZE) -> WrapNum:
    """Shorthand constructor where max_ itself is part of the window.

    1. ``wrap_inclusive(max_)``: like ``wrap(max_ + 1)``.
    2. ``wrap_inclusive(min_, max_)``: like ``wrap(range(min_, max_ + 1))``.

    ``max_ + 1`` has to fit int_type.
    """
    if len(args) == 1:
        return WrapNum.new(args[0] + 1, int_type)
    if len(args) == 2:
        min_, max_ = args
        return WrapNum.new_with_min_max(min_, min_, max_ + 1, int_type)
    raise TypeError(f'wrap_inclusive() takes 1 or 2 positional arguments but {len(args)} were given')
