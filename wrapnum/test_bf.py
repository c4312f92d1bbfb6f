import pytest

from wrapnum import U32, WrapNum
from wrapnum import bf

HELLO_WORLD = (
    '++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.'
)


class TestBFCells:
    def test_cells_are_independent(self):
        cells = bf.BFCells(3)
        cells.increment()
        cells.increment_pointer()
        assert cells.cell == 0
        cells.decrement_pointer()
        assert cells.cell == 1

    def test_cell_wraps(self):
        cells = bf.BFCells(3)
        cells.decrement()
        assert cells.cell == 255
        cells.increment()
        assert cells.cell == 0

    def test_pointer_wraps(self):
        cells = bf.BFCells(3)
        cells.decrement_pointer()
        assert cells.pointer == 2
        cells.increment_pointer()
        assert cells.pointer == 0

    def test_cell_setter(self):
        cells = bf.BFCells(3)
        cells.cell = 300
        assert cells.cell.total_eq(WrapNum(44, 0, 256, U32))
        cells.cell = WrapNum(5, 0, 10, U32)
        assert cells.cell.total_eq(WrapNum(5, 0, 10, U32))


class TestBFInstance:
    def test_output(self):
        assert bf.run_program('+' * 72 + '.') == 'H'

    def test_hello_world(self):
        assert bf.run_program(HELLO_WORLD) == 'Hello World!\n'

    def test_cell_wrapping(self):
        assert bf.run_program('-.') == chr(255)
        assert bf.run_program('+' * 256 + '.') == chr(0)

    def test_pointer_wrapping(self):
        instance = bf.BFInstance('<+.', tape_size=3).run()
        assert instance.output == [chr(1)]
        assert instance.pointer == 2

    def test_loop(self):
        assert bf.run_program('++++++++[>++++++++<-]>+.') == 'A'

    def test_skip_loop(self):
        assert bf.run_program('[.]+.') == chr(1)

    def test_input(self):
        assert bf.run_program(',.', 'A') == 'A'
        assert bf.run_program(',>,<.>.', 'xy') == 'xy'

    def test_exhausted_input_leaves_cell(self):
        assert bf.run_program(',,.', 'A') == 'A'
        assert bf.run_program('+,.') == chr(1)

    def test_ignores_comments(self):
        assert bf.run_program('a+b.c') == chr(1)

    def test_unmatched(self):
        with pytest.raises(bf.BFSyntaxError, match='Unmatched `\\[` at instruction 0'):
            bf.BFInstance('[')
        with pytest.raises(bf.BFSyntaxError, match='Unmatched `]` at instruction 1'):
            bf.BFInstance('+]')

    def test_timeout(self):
        with pytest.raises(bf.BFTimeoutError):
            bf.run_program('+[]', timeout=0.01)
