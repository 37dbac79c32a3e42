"""Line-based prompts for the console frontend."""
from __future__ import annotations

from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_string(label: str, input_fn: InputFn = input, out: OutputFn = print) -> str:
    out(f"{label}:")
    return input_fn("")


def read_int(label: str, input_fn: InputFn = input, out: OutputFn = print) -> int:
    """Ask until the answer parses as an integer."""
    while True:
        raw = read_string(label, input_fn, out)
        try:
            return int(raw.strip())
        except ValueError:
            out(f"'{raw}' is not a whole number. Try again.")
