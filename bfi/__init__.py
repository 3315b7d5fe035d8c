"""Brainfuck interpreter on an unbounded tape of 8-bit cells."""

__version__ = "0.1.0"

from .config import EofPolicy, InterpreterConfig
from .errors import BrainfuckError, ConfigError, OutOfBoundsError, UnmatchedBracketError
from .interpreter import BrainfuckInterpreter
from .program import Instruction, Program, build_jump_table, load_program
from .runner import run_file, run_once, run_source
from .tape import Tape

__all__ = [
    "BrainfuckError",
    "BrainfuckInterpreter",
    "ConfigError",
    "EofPolicy",
    "Instruction",
    "InterpreterConfig",
    "OutOfBoundsError",
    "Program",
    "Tape",
    "UnmatchedBracketError",
    "build_jump_table",
    "load_program",
    "run_file",
    "run_once",
    "run_source",
]
