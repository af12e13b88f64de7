"""Generation of textual LLVM IR for a checked syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from calcc.parser import (
    BinaryOperation,
    Identifier,
    Node,
    Number,
    Operator,
    WithDeclaration,
    identifier_at,
    int_value_at,
)

MODULE_NAME = "calc.expr"

_INT32_MIN = -(1 << 31)
_OPCODES = {
    Operator.PLUS: "add",
    Operator.MINUS: "sub",
    Operator.STAR: "mul",
    Operator.SLASH: "sdiv",
}


def _wrap32(value: int) -> int:
    return (value - _INT32_MIN) % (1 << 32) + _INT32_MIN


@dataclass(frozen=True)
class _Constant:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class _Poison:
    def __str__(self) -> str:
        return "poison"


@dataclass(frozen=True)
class _Register:
    number: int

    def __str__(self) -> str:
        return f"%{self.number}"


_POISON = _Poison()
_Value = Union[_Constant, _Poison, _Register]


def _fold(op: Operator, left: _Value, right: _Value) -> _Value | None:
    """Fold an operation on two constants the way the IR builder does."""
    if isinstance(left, _Register) or isinstance(right, _Register):
        return None
    if isinstance(left, _Poison) or isinstance(right, _Poison):
        return _POISON
    a, b = left.value, right.value
    if op is Operator.PLUS:
        return _Constant(_wrap32(a + b))
    if op is Operator.MINUS:
        return _Constant(_wrap32(a - b))
    if op is Operator.STAR:
        return _Constant(_wrap32(a * b))
    if b == 0 or (a == _INT32_MIN and b == -1):
        return _POISON
    quotient = abs(a) // abs(b)
    return _Constant(-quotient if (a < 0) != (b < 0) else quotient)


def _ir_string(text: str) -> str:
    data = text.encode() + b"\0"
    body = "".join(
        chr(byte) if 0x20 <= byte < 0x7F and byte not in (0x22, 0x5C) else f"\\{byte:02X}"
        for byte in data
    )
    return f'[{len(data)} x i8] c"{body}"'


class CodeGenerator:
    """Builds a module whose ``main`` reads the variables, evaluates and writes the result."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._globals: list[str] = []
        self._body: list[str] = []
        self._bindings: list[tuple[str, _Value]] = []
        self._next_register = 2
        self._reads_input = False

    def generate(self, ast: Node) -> str:
        """Return the IR text of a module computing ``ast``."""
        self._reset()
        value = self._emit(ast)
        self._body.append(f"  call void @calc_write(i32 {value})")
        self._body.append("  ret i32 0")
        return self._render()

    def _register(self) -> _Register:
        register = _Register(self._next_register)
        self._next_register += 1
        return register

    def _global_name(self) -> str:
        count = len(self._globals)
        return ".str" if count == 0 else f".str.{count}"

    def _emit(self, ast: Node) -> _Value:
        match ast:
            case WithDeclaration(identifiers=identifiers, expr=expr):
                self._reads_input = True
                for identifier in identifiers:
                    name = identifier_at(identifier)
                    global_name = self._global_name()
                    self._globals.append(f"@{global_name} = private constant {_ir_string(name)}")
                    register = self._register()
                    self._body.append(f"  {register} = call i32 @calc_read(ptr @{global_name})")
                    self._bindings.append((name, register))
                return self._emit(expr)

            case Identifier(source_reference=reference):
                name = identifier_at(reference)
                for bound, value in self._bindings:
                    if bound == name:
                        return value
                raise LookupError(f"unbound variable {name}")

            case Number(source_reference=reference):
                return _Constant(_wrap32(int_value_at(reference)))

            case BinaryOperation(op=op, left=left, right=right):
                left_value = self._emit(left)
                right_value = self._emit(right)
                folded = _fold(op, left_value, right_value)
                if folded is not None:
                    return folded
                register = self._register()
                self._body.append(f"  {register} = {_OPCODES[op]} i32 {left_value}, {right_value}")
                return register

            case _:
                raise ValueError(f"cannot generate code for {type(ast).__name__}")

    def _render(self) -> str:
        lines = [f"; ModuleID = '{MODULE_NAME}'", f'source_filename = "{MODULE_NAME}"', ""]
        if self._globals:
            lines += [*self._globals, ""]
        lines += ["define i32 @main(i32 %0, ptr %1) {", "entry:", *self._body, "}", ""]
        if self._reads_input:
            lines += ["declare i32 @calc_read(ptr)", ""]
        lines.append("declare void @calc_write(i32)")
        return "\n".join(lines) + "\n"


def compile_ast(ast: Node) -> str:
    """Return the IR text of a module computing ``ast``."""
    return CodeGenerator().generate(ast)