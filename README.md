# calcc

`calcc` compiles a tiny arithmetic expression language to textual LLVM IR.

## The language

A program is a single `with` declaration. It lists the variables that are read
when the program runs. After the list comes a colon and one integer expression:

```
with a, b: (a + 3) * b / 2
```

* Variable names are made of ASCII letters only. A program may declare at most
  16 variables.
* Any leading part of the keyword `with` counts as the keyword. This means
  `w`, `wi`, `wit` and `with` cannot be used as variable names.
* Numbers are unsigned integer literals made of digits. A literal that starts
  with `0` is read as octal.
* The operators are `+`, `-`, `*` and `/` (signed 32-bit integer division).
  `*` and `/` bind tighter than `+` and `-`. Parentheses group.
* Every variable that is used must be declared in the `with` list.
* Source text ends at the first NUL character, if there is one.

The generated module defines `main`. When `main` runs, it calls
`calc_read` once for each declared variable, in order. It then evaluates the
expression and passes the result to `calc_write`. Operations on constants
alone are folded at compile time. A constant division by zero becomes `poison`.

## Command line

After installing the package, pass a source file to the command:

```
calcc program.calc
```

Only the first 256 bytes of the file are read. If the program is valid, the
LLVM IR is printed on standard output. If parsing or checking fails, a
diagnostic is written to standard error, followed by `Compilation failed`.
Syntax errors are shown as:

```
Error:
<source text>
^<description>
```

Undeclared variables are reported as `Undeclared variable <name>`.

The exit status is 1 in two cases: no input file is given, in which case usage
help is printed, or the file cannot be opened or read. In every other case the
exit status is 0, including when compilation fails.

## Library use

```python
from calcc.parser import parse
from calcc.sema import Sema
from calcc.codegen import compile_ast

ast = parse("with x: x * 2 + 1")
if Sema().check(ast):
    print(compile_ast(ast))
```

`Sema` writes its diagnostics to standard error. To send them elsewhere, pass a
text stream: `Sema(stream)`.

`calcc.cli.compile_source(source)` does the same steps as the command for a
source string. It prints the IR and returns it. On failure it returns `None`.

The lower-level pieces can also be used on their own:

* `calcc.lexer.Lexer` splits source text into `Token` objects, each tagged with
  a `TokenTag`. Call `next()` and `peek()`, or iterate over the lexer.
* `calcc.parser.Parser` (or the `parse` function) builds a tree of `Number`,
  `Identifier`, `BinaryOperation`, `WithDeclaration` and `ParseError` nodes.
  Syntax errors do not raise exceptions. They are left in the tree as
  `ParseError` nodes.
* `calcc.codegen.CodeGenerator.generate(ast)` returns the IR text for a
  checked tree.

## Runtime

`calcc.runtime` provides `calc_read(name)` and `calc_write(value)`, which
behave the same way as the two functions the generated code calls.

* `calc_read` prompts `Enter a value for <name>: ` and reads one line of up to
  63 characters from standard input. It returns the leading integer, wrapped to
  32 bits. If the line does not start with an integer, it prints
  `Value <line> is invalid` and exits with status 1.
* `calc_write` prints `The result is <value>`.

## What it does not do

`calcc` only produces LLVM IR text. It does not assemble, link or run that IR.
Turning the IR into a program is left to LLVM tools. A native `calc_read` and
`calc_write` must also be linked in. The functions in `calcc.runtime` can be
called from Python, but generated code cannot call them.

## Development

```
pip install -e .[test]
pytest
```