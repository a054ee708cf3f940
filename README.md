# matscript

`matscript` evaluates small scripts of integer matrices. A script defines
matrices by their literal values. It then combines them with addition (`+`),
multiplication (`*`) and transpose (`'`). Parentheses group terms in the usual way.

## Script format

Each non-blank line assigns a matrix to a one-character name:

```
A = 2 3 [1 2 3 ; 4 5 6 ;]
B = 3 2 [1 0 ; 0 1 ; 1 1 ;]
C = A * B + (B' * A')'
```

If the right-hand side starts with a digit, the line is a literal. A literal gives
the number of rows, then the number of columns, then the values in row-major order
after an opening bracket. Separators such as `;` are ignored, and values beyond the
declared count are dropped. Any other right-hand side is an expression over names
that are already defined. Transpose binds tightest, then `*`, then `+`. Whitespace
in expressions is ignored. Lines that do not have the form `name = ...` are skipped.

Values are 32-bit signed integers. Results of addition and multiplication wrap
around on overflow.

## Command line

```
matscript path/to/script.txt
```

This prints the last matrix the script defines. The output is its row count, its
column count and then its values, all separated by spaces. For the script above:

```
2 2 8 10 20 22
```

The command exits with status 1 and writes a message to standard error in three
cases: the file cannot be read, a line is malformed or its shapes do not match,
or the script defines no matrix.

## Library use

```python
from matscript.matrix import Matrix, create_matrix, transpose, format_matrix
from matscript.tree import MatrixTree
from matscript.expression import infix_to_postfix, evaluate_expr
from matscript.script import run_script, execute_script

a = create_matrix("A", "2 2 [1 2 ; 3 4 ;]")
b = create_matrix("B", "2 2 [5 6 ; 7 8 ;]")
print(format_matrix(a + b))            # 2 2 6 8 10 12
print(a @ transpose(b))                # str() gives the same format
print(a.rows())                        # [(1, 2), (3, 4)]

tree = MatrixTree()
tree.insert(a)
tree.insert(b)
print("A" in tree, len(tree))          # True 2
print([m.name for m in tree])          # in name order: ['A', 'B']
print(infix_to_postfix("(A+B)*A'"))    # AB+A'*
result = evaluate_expr("R", "(A + B) * A'", tree)

last = run_script(["A = 1 2 [3 4 ;]", "B = A'"])
last = execute_script("path/to/script.txt")
```

- `matscript.matrix`: `Matrix` is an immutable dataclass with `name`, `num_rows`,
  `num_cols` and a row-major `values` tuple. It also has `renamed()` and `rows()`,
  and supports `+` and ` @ `. The module functions are `add_matrices`,
  `multiply_matrices`, `transpose`, `create_matrix` and `format_matrix`. Operation
  results carry the name `"?"`.
- `matscript.tree`: `MatrixTree` is a binary search tree keyed by name, with
  `insert`, `find` (returns `None` when absent), iteration in name order, `len()`
  and `in`.
- `matscript.expression`: `infix_to_postfix` and `evaluate_expr`.
- `matscript.script`: `run_script` takes an iterable of lines, `execute_script`
  takes a file path, and `main` is the command-line entry point. Each returns or
  prints the last matrix defined. `run_script` and `execute_script` return `None`
  when the script defines no matrix.

Mismatched shapes and malformed literals raise `MatrixError`, a `ValueError`
subclass. Malformed expressions and undefined names raise `ExpressionError`,
a subclass of `MatrixError`.

## What it does not do

There is only addition, multiplication and transpose. There is no subtraction,
no scalar arithmetic and no division. Names are single characters, and
expressions can refer only to ASCII letters. Matrices live only for one run of a
script; nothing is saved between runs. The command prints only the final matrix.

## Running the tests

```
pip install -e ".[test]"
pytest
```