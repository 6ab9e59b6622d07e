"""Interpreter for a tiny numeric language of opcodes and register numbers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .cstdlib import div

MEMORY_SIZE = 1024
PROGRAM_SIZE = 1024

END = 0
WHILE = 1
SET = 2
COPY = 3
SHOW = 4
NOT = 12

# Number of arguments following each opcode, indexed by opcode.
ARG_COUNTS = (0, 1, 2, 2, 1, 3, 3, 3, 3, 3, 3, 3, 1, 3)


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


_BINARY: dict[int, Callable[[int, int], int]] = {
    5: lambda a, b: a + b,
    6: lambda a, b: a - b,
    7: lambda a, b: a * b,
    8: lambda a, b: div(a, b).quot,
    9: lambda a, b: int(a == b),
    10: lambda a, b: int(a > b),
    11: lambda a, b: int(bool(a) or bool(b)),
    13: lambda a, b: div(a, b).rem,
}


def tokenize(text: str) -> list[int]:
    """Return every run of decimal digits in ``text`` as an integer."""
    return [int(run) for run in re.findall(r"[0-9]+", text)]


def _address(memory: list[int], index: int) -> int:
    if not 0 <= index < len(memory):
        raise IndexError(f"register {index} outside memory of {len(memory)}")
    return index


def _execute(code: Sequence[int], memory: list[int], out: TextIO, while_id: int) -> None:
    while memory[_address(memory, while_id)]:
        to_pass = 0
        pc = 0
        while pc < len(code):
            op = code[pc]
            if not 0 <= op < len(ARG_COUNTS):
                raise ValueError(f"unknown opcode {op} at position {pc}")
            if op == END:
                to_pass -= 1
                if to_pass < 0:
                    break
            elif to_pass:
                if op == WHILE:
                    to_pass += 1
            elif op == SET:
                memory[_address(memory, code[pc + 1])] = code[pc + 2]
            elif op == COPY:
                memory[_address(memory, code[pc + 1])] = memory[_address(memory, code[pc + 2])]
            elif op == SHOW:
                out.write(f"{memory[_address(memory, code[pc + 1])]}\n")
            elif op == NOT:
                target = _address(memory, code[pc + 1])
                memory[target] = int(not memory[target])
            elif op in _BINARY:
                left = memory[_address(memory, code[pc + 1])]
                right = memory[_address(memory, code[pc + 2])]
                memory[_address(memory, code[pc + 3])] = _wrap32(_BINARY[op](left, right))

            pc += ARG_COUNTS[op]
            if op == WHILE and to_pass == 0:
                _execute(code[pc + 1 :], memory, out, code[pc])
                to_pass += 1
            pc += 1


def run(
    code: Sequence[int],
    memory: list[int] | None = None,
    out: TextIO | None = None,
) -> list[int]:
    """Run ``code`` repeatedly while register 0 is non-zero and return the memory.

    Without ``memory`` a fresh one is made with register 0 set to 1. ``show``
    writes to ``out``, standard output by default.
    """
    if memory is None:
        memory = [0] * MEMORY_SIZE
        memory[0] = 1
    _execute(list(code), memory, out if out is not None else sys.stdout, 0)
    return memory


def main(argv: Sequence[str] | None = None) -> int:
    """Run a program file given on the command line."""
    parser = argparse.ArgumentParser(prog="livra", description="Run a numeric opcode program.")
    parser.add_argument("program", help="path of the program file")
    args = parser.parse_args(argv)
    try:
        with open(args.program, encoding="utf-8") as handle:
            code = tokenize(handle.read())
    except OSError as exc:
        print(f"livra: {exc}", file=sys.stderr)
        return 1
    if len(code) > PROGRAM_SIZE:
        print(f"livra: program longer than {PROGRAM_SIZE} numbers", file=sys.stderr)
        return 1
    try:
        run(code)
    except (ValueError, IndexError, ZeroDivisionError) as exc:
        print(f"livra: {exc}", file=sys.stderr)
        return 1
    return 0