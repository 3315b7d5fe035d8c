import pytest

from bfi.errors import ConfigError, OutOfBoundsError
from bfi.tape import Tape


class TestTapeCells:
    def test_fresh_cells_are_zero(self):
        tape = Tape(8)
        assert tape.snapshot() == [0] * 8
        assert tape.read() == 0
        assert tape.pointer == 0

    def test_increment_wraps(self):
        tape = Tape(1)
        tape.write(255)
        tape.increment()
        assert tape.read() == 0

    def test_decrement_wraps(self):
        tape = Tape(1)
        tape.decrement()
        assert tape.read() == 255

    def test_increment_decrement_inverse_for_every_value(self):
        tape = Tape(1)
        for value in range(256):
            tape.write(value)
            tape.increment()
            tape.decrement()
            assert tape.read() == value
            tape.decrement()
            tape.increment()
            assert tape.read() == value

    def test_write_reduces_modulo_256(self):
        tape = Tape(1)
        tape.write(300)
        assert tape.read() == 44


class TestTapeMovement:
    def test_move_left_at_zero_fails(self):
        tape = Tape()
        with pytest.raises(OutOfBoundsError):
            tape.move_left()
        assert tape.pointer == 0

    def test_out_of_bounds_is_an_index_error(self):
        with pytest.raises(IndexError):
            Tape().move_left()

    def test_move_left_after_move_right(self):
        tape = Tape()
        tape.move_right()
        tape.move_left()
        assert tape.pointer == 0

    def test_cells_are_independent(self):
        tape = Tape(4)
        tape.increment()
        tape.move_right()
        tape.increment()
        tape.increment()
        assert tape.snapshot(0, 2) == [1, 2]

    def test_grows_past_initial_size(self):
        tape = Tape(2)
        for _ in range(10):
            tape.move_right()
        assert tape.pointer == 10
        assert len(tape) > 10
        assert tape.read() == 0

    def test_growth_doubles_and_keeps_contents(self):
        tape = Tape(2)
        tape.write(7)
        tape.move_right()
        tape.write(9)
        tape.move_right()
        assert len(tape) == 4
        assert tape.snapshot(0, 3) == [7, 9, 0]

    def test_minimum_size_is_one_cell(self):
        assert len(Tape(0)) == 1


def test_failed_allocation_is_config_error(monkeypatch):
    def no_memory(*args, **kwargs):
        raise MemoryError
    monkeypatch.setattr("bfi.tape.np.zeros", no_memory)
    with pytest.raises(ConfigError, match="Cannot allocate a tape of 64 cells"):
        Tape(64)
