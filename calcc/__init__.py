"""Compiler for a small arithmetic expression language, producing LLVM IR text."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "sema", "codegen", "runtime", "cli"]