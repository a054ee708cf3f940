"""Infix matrix expressions: conversion to postfix and evaluation."""

from __future__ import annotations

from matscript.matrix import Matrix, MatrixError, add_matrices, multiply_matrices, transpose
from matscript.tree import MatrixTree

_PRECEDENCE = {"'": 3, "*": 2, "+": 1}


class ExpressionError(MatrixError):
    """Raised for malformed expressions or references to unknown matrices."""


def _is_name(char: str) -> bool:
    return char.isascii() and char.isalpha()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression over +, * and postfix ' to postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for char in infix:
        if char.isspace():
            continue
        if _is_name(char):
            output.append(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
        elif char in _PRECEDENCE:
            precedence = _PRECEDENCE[char]
            while (
                operators
                and operators[-1] != "("
                and _PRECEDENCE[operators[-1]] >= precedence
            ):
                output.append(operators.pop())
            operators.append(char)
    output.extend(op for op in reversed(operators) if op != "(")
    return "".join(output)


def evaluate_expr(name: str, expr: str, tree: MatrixTree) -> Matrix:
    """Evaluate an infix expression against the tree and name the result."""
    stack: list[Matrix] = []
    for char in infix_to_postfix(expr):
        if _is_name(char):
            matrix = tree.find(char)
            if matrix is None:
                raise ExpressionError(f"unknown matrix {char!r}")
            stack.append(matrix)
        elif char == "'":
            if not stack:
                raise ExpressionError(f"transpose without an operand in {expr!r}")
            stack.append(transpose(stack.pop()))
        else:
            if len(stack) < 2:
                raise ExpressionError(f"operator {char!r} lacks operands in {expr!r}")
            right = stack.pop()
            left = stack.pop()
            operation = add_matrices if char == "+" else multiply_matrices
            stack.append(operation(left, right))
    if len(stack) != 1:
        raise ExpressionError(f"malformed expression {expr!r}")
    return stack[0].renamed(name)