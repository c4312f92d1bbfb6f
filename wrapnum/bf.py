"""Brainfuck interpreter running on wrapping numbers"""
import logging
import time
from typing import Dict, Iterator, List, Optional

from wrapnum.core import WrapNum, wrap
from wrapnum.inttypes import U32

logger = logging.getLogger(__name__)

COMMANDS = '<>+-,.[]'
TAPE_SIZE = 30000


class BFError(Exception):
    """Base error class, message can be shown to the user as is"""


class BFSyntaxError(BFError):
    pass


class BFTimeoutError(BFError):
    pass


class BFCells:

    CELL_MIN = 0
    CELL_MAX = 255

    def __init__(self, tape_size: int = TAPE_SIZE):
        self.pointer = wrap(range(0, tape_size))
        # One instance per cell, in-place arithmetic mutates it
        self._cells: List[WrapNum] = [self.new_cell() for _ in range(tape_size)]

    @classmethod
    def new_cell(cls, value: int = CELL_MIN) -> WrapNum:
        return WrapNum(value, cls.CELL_MIN, cls.CELL_MAX + 1, U32)

    def increment(self):
        self.cell += 1

    def decrement(self):
        self.cell -= 1

    def increment_pointer(self):
        self.pointer += 1

    def decrement_pointer(self):
        self.pointer -= 1

    @property
    def cell(self) -> WrapNum:
        return self._cells[self.pointer]

    @cell.setter
    def cell(self, value):
        if isinstance(value, WrapNum):
            self._cells[self.pointer] = value
        else:
            self._cells[self.pointer] = self.new_cell(value % (self.CELL_MAX + 1))


class BFInstance(BFCells):

    # Clock is only checked every so many instructions
    TIMEOUT_CHECK_INTERVAL = 1024

    def __init__(self, program: str, input_: str = '', tape_size: int = TAPE_SIZE):
        super().__init__(tape_size)
        self.program = [c for c in program if c in COMMANDS]
        self.len = len(self.program)
        self.input: Iterator[str] = iter(input_)
        self.output: List[str] = []
        self.jumps: Dict[int, int] = self.match_loops(self.program)
        self.program_pointer = 0  # Tracks location in program

    @staticmethod
    def match_loops(program: List[str]) -> Dict[int, int]:
        """Maps every `[` to its `]` and back. Program is invalid if not all loops are closed"""
        jumps = {}
        starts = []
        for i, c in enumerate(program):
            if c == '[':
                starts.append(i)
            elif c == ']':
                if not starts:
                    raise BFSyntaxError(f'Unmatched `]` at instruction {i}')
                start = starts.pop()
                jumps[start] = i
                jumps[i] = start
        if starts:
            raise BFSyntaxError(f'Unmatched `[` at instruction {starts[-1]}')
        return jumps

    @property
    def instruction(self) -> str:
        return self.program[self.program_pointer]

    def start_loop(self):
        """Executed on '['. Skips the loop if the current cell is zero"""
        if not self.cell:
            self.program_pointer = self.jumps[self.program_pointer]

    def end_loop(self):
        """Executed on ']'. Jumps back to the start of the loop unless the current cell is zero"""
        if self.cell:
            self.program_pointer = self.jumps[self.program_pointer]

    def get_chr(self):
        self.output.append(chr(self.cell))

    def set_chr(self):
        char = next(self.input, None)
        if char is None:
            logger.debug('Input exhausted, cell %s left as %s', self.pointer, self.cell)
            return
        self.cell = self.new_cell(ord(char) % (self.CELL_MAX + 1))

    def run(self, timeout: Optional[float] = None) -> 'BFInstance':
        commands = {
            '>': self.increment_pointer,
            '<': self.decrement_pointer,
            '+': self.increment,
            '-': self.decrement,
            '.': self.get_chr,
            ',': self.set_chr,
            '[': self.start_loop,
            ']': self.end_loop,
        }
        deadline = None if timeout is None else time.monotonic() + timeout

        steps = 0
        while self.program_pointer < self.len:
            commands[self.instruction]()
            self.program_pointer += 1
            steps += 1
            if deadline is not None and steps % self.TIMEOUT_CHECK_INTERVAL == 0 and time.monotonic() > deadline:
                raise BFTimeoutError(f'Program did not finish within {timeout:g} seconds')

        logger.debug('Program finished after %d steps', steps)
        return self


def run_program(program: str, input_: str = '', timeout: Optional[float] = None, tape_size: int = TAPE_SIZE) -> str:
    """Runs program and returns everything it printed"""
    return ''.join(BFInstance(program, input_, tape_size).run(timeout).output)
