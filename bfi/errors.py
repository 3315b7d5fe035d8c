"""Exceptions raised while loading or running a Brainfuck program."""


class BrainfuckError(Exception):
    """Base class for every interpreter error."""


class UnmatchedBracketError(BrainfuckError):
    """A '[' or ']' without a partner. Raised before anything executes."""

    def __init__(self, bracket, index, line=None, column=None):
        self.bracket = bracket
        self.index = index
        self.line = line
        self.column = column
        super().__init__(self._message())

    def _message(self):
        if self.line is None:
            return f"Unmatched '{self.bracket}' at position {self.index}"
        return f"Unmatched '{self.bracket}' at line {self.line}, column {self.column}"


class OutOfBoundsError(BrainfuckError, IndexError):
    """Data pointer moved left of cell 0."""

    def __init__(self, pointer=0, instruction_pointer=None):
        self.pointer = pointer
        self.instruction_pointer = instruction_pointer
        msg = f"Data pointer moved left of cell {pointer}"
        if instruction_pointer is not None:
            msg += f" (instruction {instruction_pointer})"
        super().__init__(msg)


class ConfigError(BrainfuckError, ValueError):
    """Invalid interpreter configuration value."""
