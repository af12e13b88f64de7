"""Command line entry point: compile an expression file to LLVM IR."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from calcc.codegen import compile_ast
from calcc.parser import parse
from calcc.sema import Sema

_PROGRAM = "calcc"
_READ_LIMIT = 256


def compile_source(source: str) -> str | None:
    """Check and compile ``source``, printing the IR; return it, or None on failure."""
    ast = parse(source)
    if Sema().check(ast):
        ir = compile_ast(ast)
        print(ir)
        return ir
    sys.stderr.write("\nCompilation failed\n")
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler on the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(f"Calc, the expression compiler\n\nUsage:\n\t{_PROGRAM} input\n\n")
        return 1

    path = args[0]
    try:
        handle = open(path, "rb")
    except OSError as error:
        sys.stderr.write(f"Could not open file {path}: {error.strerror}\n")
        return 1

    with handle:
        try:
            data = handle.read(_READ_LIMIT)
        except OSError as error:
            sys.stderr.write(f"Could not read file {path}: {error.strerror}\n")
            return 1

    compile_source(data.decode("latin-1"))
    return 0