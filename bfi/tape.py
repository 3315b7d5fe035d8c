import numpy as np

from .config import DEFAULT_TAPE_SIZE
from .errors import ConfigError, OutOfBoundsError


class Tape:
    """Memory tape of unsigned 8-bit cells, unbounded to the right.

    Cells live in a numpy uint8 buffer that doubles whenever the pointer
    walks past its end. Every cell reads 0 until written.
    """

    def __init__(self, size=DEFAULT_TAPE_SIZE):
        try:
            self.memory = np.zeros(max(1, size), dtype=np.uint8)
        except (MemoryError, ValueError) as e:
            raise ConfigError(f"Cannot allocate a tape of {size} cells: {e}") from None
        self.pointer = 0

    def __len__(self):
        return len(self.memory)

    def _grow(self):
        grown = np.zeros(len(self.memory) * 2, dtype=np.uint8)
        grown[:len(self.memory)] = self.memory
        self.memory = grown

    def move_right(self):
        self.pointer += 1
        if self.pointer >= len(self.memory):
            self._grow()

    def move_left(self):
        if self.pointer == 0:
            raise OutOfBoundsError(self.pointer)
        self.pointer -= 1

    def increment(self):
        self.memory[self.pointer] = (int(self.memory[self.pointer]) + 1) % 256

    def decrement(self):
        self.memory[self.pointer] = (int(self.memory[self.pointer]) - 1) % 256

    def read(self) -> int:
        return int(self.memory[self.pointer])

    def write(self, value: int):
        self.memory[self.pointer] = value % 256

    def snapshot(self, start=0, end=None):
        """Copy of cells [start, end) as a list of ints."""
        return self.memory[start:end].tolist()
