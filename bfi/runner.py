from typing import Optional
import os
from pathlib import Path

from .config import ENV_STEP_LIMIT, InterpreterConfig, parse_int
from .interpreter import BrainfuckInterpreter

FALLBACK_STEP_LIMIT = 5000


def default_step_limit() -> int:
    """Step limit for run_once: BF_STEP_LIMIT when set and non-empty, else 5000."""
    raw = os.environ.get(ENV_STEP_LIMIT)
    if not raw:
        return FALLBACK_STEP_LIMIT
    return parse_int(ENV_STEP_LIMIT, raw)


def run_source(source, input_data=b"", config: Optional[InterpreterConfig] = None, output=None) -> bytes:
    """Load and execute source text on a fresh interpreter, returning its output."""
    itp = BrainfuckInterpreter(config)
    return itp.run(source, input_data, output=output)


def run_file(path, input_data=b"", config: Optional[InterpreterConfig] = None, output=None) -> bytes:
    """Execute the program stored at path. The file is read as raw bytes."""
    source = Path(path).read_bytes()
    return run_source(source, input_data, config=config, output=output)


def run_once(code: str, x: int, step_limit: Optional[int] = None) -> Optional[int]:
    """Execute BF code with single byte input, return the first output byte.
    Returns None when the program prints nothing before halting or hitting the step limit.
    """
    if step_limit is None:
        step_limit = default_step_limit()
    itp = BrainfuckInterpreter(InterpreterConfig(step_limit=step_limit))
    s = itp.run(code, bytes([x % 256]))
    return s[0] if s else None
