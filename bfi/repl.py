"""
Interactive Brainfuck session.

Code is read from the input stream one line at a time and executed as soon
as its brackets balance. All lines share one tape, so the data pointer and
cells carry over from line to line. A line with an unclosed '[' is held back
until a later line closes it. ',' reads from the same stream as the code, so
a program can consume the lines typed after it.
"""

import logging
import sys

from .config import InterpreterConfig
from .errors import BrainfuckError
from .interpreter import BrainfuckInterpreter
from .program import Instruction, bracket_depth, load_program
from .tape import Tape

logger = logging.getLogger(__name__)


class Repl:
    PROMPT = "bf> "
    CONTINUATION = "... "
    QUIT = "quit"

    def __init__(self, config=None, stdin=None, stdout=None, stderr=None):
        self.config = config or InterpreterConfig()
        self.stdin = stdin if stdin is not None else getattr(sys.stdin, "buffer", sys.stdin)
        self.stdout = stdout if stdout is not None else getattr(sys.stdout, "buffer", sys.stdout)
        self.stderr = stderr if stderr is not None else sys.stderr
        self.interpreter = BrainfuckInterpreter(self.config)
        self.tape = Tape(self.config.tape_size)
        self.pending = ""
        self.running = False

    def start(self):
        """Read and run lines until 'quit' or end of input."""
        self.running = True
        will_output = False
        while self.running:
            self._display_prompt(will_output)
            line = self.stdin.readline()
            if not line:
                self._write("\n")
                break
            if isinstance(line, bytes):
                line = line.decode("utf-8", errors="replace")
            if line.strip().lower() == self.QUIT:
                break
            will_output = self.feed(line)
        self.running = False
        if self.pending:
            logger.info(f"Discarding unfinished input: {self.pending.strip()!r}")
            self.pending = ""

    def feed(self, text: str) -> bool:
        """Run text once its brackets balance.

        Returns True when the chunk that ran contains a '.', so the next
        prompt starts on a fresh line.
        """
        chunk = self.pending + text
        if bracket_depth(chunk) > 0:
            self.pending = chunk
            return False
        self.pending = ""

        try:
            program = load_program(chunk)
        except BrainfuckError as e:
            print(f"error: {e}", file=self.stderr)
            return False
        will_output = Instruction.OUTPUT in program.instructions
        try:
            self.interpreter.run(program, self.stdin, output=self.stdout, tape=self.tape)
        except BrainfuckError as e:
            print(f"error: {e}", file=self.stderr)
            return will_output
        if self.interpreter.hit_step_limit:
            print(f"error: step limit of {self.config.step_limit} reached", file=self.stderr)
        return will_output

    def _display_prompt(self, newline):
        prompt = self.CONTINUATION if self.pending else self.PROMPT
        self._write(("\n" if newline else "") + prompt)

    def _write(self, text):
        self.stdout.write(text.encode("utf-8"))
        self.stdout.flush()
