"""
Brainfuck execution engine.

Walks a loaded Program one instruction at a time against a Tape. The loop
brackets behave like a while loop:

    while *data != 0:
        <body>

'[' skips the body when the current cell is 0, ']' jumps back to its '['
when the cell is nonzero. Nothing bounds the number of iterations unless a
step limit is configured, so a program such as '+[]' runs forever.
"""

import io
import logging
from typing import Optional, Union

from .config import EofPolicy, InterpreterConfig
from .errors import OutOfBoundsError
from .program import Program, load_program
from .tape import Tape

logger = logging.getLogger(__name__)


def _as_stream(input_data):
    if input_data is None:
        return io.BytesIO()
    if hasattr(input_data, "read"):
        return input_data
    if isinstance(input_data, str):
        input_data = input_data.encode("utf-8")
    return io.BytesIO(bytes(input_data))


class BrainfuckInterpreter:
    def __init__(self, config: Optional[InterpreterConfig] = None):
        self.config = config or InterpreterConfig()
        self.tape = None
        self.instruction_pointer = 0
        self.output = bytearray()
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0
        self.hit_step_limit = False

    def run(self, program: Union[Program, str, bytes], input_data=b"", output=None,
            tape: Optional[Tape] = None) -> bytes:
        """Execute a program and return every byte it printed.

        input_data may be bytes, str or a binary stream with read(). When
        output is a binary stream each byte is also written and flushed to it
        as soon as '.' executes. Passing a tape continues from its cells and
        pointer instead of starting on a fresh one.
        """
        if not isinstance(program, Program):
            program = load_program(program)

        source = _as_stream(input_data)
        step_limit = self.config.step_limit
        eof_policy = self.config.eof_policy

        # Reset state
        self.tape = tape if tape is not None else Tape(self.config.tape_size)
        self.instruction_pointer = 0
        self.output = bytearray()
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0
        self.hit_step_limit = False

        jump_table = program.jump_table
        cells = self.tape
        ip = 0
        end = len(program)
        logger.debug(f"Running {end} instructions (step limit: {step_limit})")

        while ip < end:
            if step_limit is not None and self.step_count >= step_limit:
                self.hit_step_limit = True
                break

            cmd = program[ip]

            if cmd == '>':
                cells.move_right()

            elif cmd == '<':
                try:
                    cells.move_left()
                except OutOfBoundsError:
                    line, column = program.position(ip)
                    logger.debug(f"Pointer underflow at line {line}, column {column}")
                    self.instruction_pointer = ip
                    raise OutOfBoundsError(cells.pointer, ip) from None

            elif cmd == '+':
                cells.increment()

            elif cmd == '-':
                cells.decrement()

            elif cmd == '.':
                value = cells.read()
                self.output.append(value)
                self.output_writes += 1
                if output is not None:
                    output.write(bytes([value]))
                    output.flush()

            elif cmd == ',':
                data = source.read(1)
                if data:
                    cells.write(ord(data))
                    self.input_reads += 1
                elif eof_policy == EofPolicy.ZERO:
                    cells.write(0)
                elif eof_policy == EofPolicy.MAX:
                    cells.write(255)
                # EofPolicy.UNCHANGED leaves the cell alone

            elif cmd == '[':
                if cells.read() == 0:
                    ip = jump_table[ip]

            elif cmd == ']':
                if cells.read() != 0:
                    # Back onto the matching '[', which checks the cell again
                    ip = jump_table[ip] - 1

            ip += 1
            self.step_count += 1

        self.instruction_pointer = ip
        if self.hit_step_limit:
            logger.warning(f"Execution stopped after {self.step_count} steps (possible infinite loop)")
        else:
            logger.debug(f"Halted after {self.step_count} steps, {self.output_writes} bytes written")

        return bytes(self.output)
