"""
Loading Brainfuck source into an executable program.

Only eight characters mean anything:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and dropped; they do not take
up a position in the loaded program.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union

from .errors import UnmatchedBracketError

logger = logging.getLogger(__name__)


class Instruction(str, Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"
    OUTPUT = "."
    INPUT = ","


COMMANDS = "".join(op.value for op in Instruction)
_BY_CHAR = {op.value: op for op in Instruction}


@dataclass(frozen=True)
class Program:
    """A loaded program: instructions, their source positions and jump table.

    The jump table is built from the instructions on construction and is
    read-only, so a Program with unbalanced brackets cannot exist.
    """

    instructions: Tuple[Instruction, ...]
    positions: Tuple[Tuple[int, int], ...] = field(default=(), compare=False)
    jump_table: Mapping[int, int] = field(init=False, compare=False)

    def __post_init__(self):
        positions = self.positions if len(self.positions) == len(self.instructions) else None
        table = build_jump_table(self.instructions, positions)
        object.__setattr__(self, "jump_table", MappingProxyType(table))

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __str__(self):
        return "".join(op.value for op in self.instructions)

    def position(self, index: int) -> Tuple[int, int]:
        """(line, column) of the instruction at index, 1-based."""
        if index < len(self.positions):
            return self.positions[index]
        return (1, index + 1)


def _decode(source: Union[str, bytes]) -> str:
    if isinstance(source, (bytes, bytearray)):
        # latin-1 maps every byte to exactly one character
        return bytes(source).decode("latin-1")
    return source


def scan(source: Union[str, bytes]) -> Tuple[List[Instruction], List[Tuple[int, int]]]:
    """Strip comments, returning the instructions and their (line, column)."""
    instructions = []
    positions = []
    line, column = 1, 1
    for c in _decode(source):
        op = _BY_CHAR.get(c)
        if op is not None:
            instructions.append(op)
            positions.append((line, column))
        if c == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return instructions, positions


def build_jump_table(instructions, positions=None) -> Dict[int, int]:
    """Build a table mapping bracket positions for efficient jumping.

    Every '[' maps to its ']' and back. A ']' with no pending '[' or a '['
    still pending at the end raises UnmatchedBracketError.
    """
    jump_table = {}
    stack = []

    for i, op in enumerate(instructions):
        if op == Instruction.LOOP_OPEN:
            stack.append(i)
        elif op == Instruction.LOOP_CLOSE:
            if not stack:
                raise _unmatched("]", i, positions)
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        # Report the outermost unclosed loop
        raise _unmatched("[", stack[0], positions)

    return jump_table


def _unmatched(bracket, index, positions):
    if positions:
        line, column = positions[index]
        return UnmatchedBracketError(bracket, index, line, column)
    return UnmatchedBracketError(bracket, index)


def load_program(source: Union[str, bytes]) -> Program:
    """Load source text into a Program, validating bracket nesting."""
    instructions, positions = scan(source)
    program = Program(tuple(instructions), tuple(positions))
    logger.debug(f"Loaded {len(instructions)} instructions, {len(program.jump_table) // 2} loops")
    return program


def bracket_depth(source: Union[str, bytes]) -> int:
    """Net count of unclosed '[' in source; negative once a ']' runs ahead."""
    depth = 0
    for op in scan(source)[0]:
        if op == Instruction.LOOP_OPEN:
            depth += 1
        elif op == Instruction.LOOP_CLOSE:
            depth -= 1
            if depth < 0:
                return depth
    return depth
