"""Infix expressions over single-digit operands: conversion to postfix and
prefix notation, and evaluation of both."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Optional

from dsakit.stacks import ArrayStack, StackOverflow, StackUnderflow

MAX_STACK = 100
OPERATORS = "+-*/^"
DIGITS = "0123456789"


class ExpressionError(Exception):
    """Raised for malformed expressions, invalid symbols or division by zero."""


def _is_operator(symbol: object) -> bool:
    return isinstance(symbol, str) and len(symbol) == 1 and symbol in OPERATORS


def _is_digit(symbol: str) -> bool:
    return len(symbol) == 1 and symbol in DIGITS


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    if symbol == "^":
        return 3
    return -1


def apply_operator(a: float, b: float, op: str) -> float:
    """Return ``a op b`` for one of ``+ - * / ^``."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ExpressionError("division by zero")
        return a / b
    if op == "^":
        try:
            return math.pow(a, b)
        except (ValueError, OverflowError) as exc:
            raise ExpressionError(f"cannot raise {a} to {b}: {exc}") from exc
    raise ExpressionError(f"unknown operator: {op!r}")


@contextmanager
def _stack_errors() -> Iterator[None]:
    try:
        yield
    except StackOverflow as exc:
        raise ExpressionError("expression too long") from exc
    except StackUnderflow as exc:
        raise ExpressionError("malformed expression") from exc


def to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; equal precedence pops left to right."""
    output: list[str] = []
    stack = ArrayStack(MAX_STACK)
    with _stack_errors():
        for symbol in infix:
            if symbol == "(":
                stack.push(symbol)
            elif symbol == ")":
                while True:
                    if stack.is_empty():
                        raise ExpressionError("unbalanced parentheses")
                    top = stack.pop()
                    if top == "(":
                        break
                    output.append(top)
            elif _is_operator(symbol):
                while (
                    not stack.is_empty()
                    and _is_operator(stack.peek())
                    and precedence(stack.peek()) >= precedence(symbol)
                ):
                    output.append(stack.pop())
                stack.push(symbol)
            elif _is_digit(symbol):
                output.append(symbol)
            else:
                raise ExpressionError(f"invalid character in expression: {symbol!r}")
        while not stack.is_empty():
            top = stack.pop()
            if top == "(":
                raise ExpressionError("unbalanced parentheses")
            output.append(top)
    return "".join(output)


def to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix; ``^`` groups right to left. Spaces are ignored."""
    output: list[str] = []
    stack = ArrayStack(MAX_STACK)
    with _stack_errors():
        for symbol in reversed(infix):
            if symbol == " ":
                continue
            if symbol == ")":
                stack.push(symbol)
            elif symbol == "(":
                while True:
                    if stack.is_empty():
                        raise ExpressionError("unbalanced parentheses")
                    top = stack.pop()
                    if top == ")":
                        break
                    output.append(top)
            elif _is_operator(symbol):
                while (
                    not stack.is_empty()
                    and _is_operator(stack.peek())
                    and (
                        precedence(stack.peek()) > precedence(symbol)
                        or (
                            precedence(stack.peek()) == precedence(symbol)
                            and symbol == "^"
                        )
                    )
                ):
                    output.append(stack.pop())
                stack.push(symbol)
            elif _is_digit(symbol):
                output.append(symbol)
            else:
                raise ExpressionError(f"invalid character in expression: {symbol!r}")
        while not stack.is_empty():
            top = stack.pop()
            if top == ")":
                raise ExpressionError("unbalanced parentheses")
            output.append(top)
    return "".join(reversed(output))


def _evaluate(symbols: Iterator[str], operands_reversed: bool) -> float:
    stack = ArrayStack(MAX_STACK)
    with _stack_errors():
        for symbol in symbols:
            if symbol == " ":
                continue
            if _is_digit(symbol):
                stack.push(float(DIGITS.index(symbol)))
            elif _is_operator(symbol):
                first = stack.pop()
                second = stack.pop()
                if operands_reversed:
                    stack.push(apply_operator(second, first, symbol))
                else:
                    stack.push(apply_operator(first, second, symbol))
            else:
                raise ExpressionError(f"invalid character in expression: {symbol!r}")
        if len(stack) != 1:
            raise ExpressionError("malformed expression")
        return stack.pop()


def evaluate_postfix(postfix: str) -> float:
    """Evaluate a postfix expression of single-digit operands. Spaces are ignored."""
    return _evaluate(iter(postfix), operands_reversed=True)


def evaluate_prefix(prefix: str) -> float:
    """Evaluate a prefix expression of single-digit operands. Spaces are ignored."""
    return _evaluate(reversed(prefix), operands_reversed=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert an infix expression and print the result of evaluating it."""
    parser = argparse.ArgumentParser(
        description="Convert an infix expression of single-digit operands and evaluate it."
    )
    parser.add_argument("expression", nargs="?", help="infix expression, e.g. 2+3*5")
    parser.add_argument(
        "--prefix", action="store_true", help="use prefix instead of postfix notation"
    )
    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        try:
            expression = input("Enter an infix expression: ")
        except EOFError:
            print("no expression given", file=sys.stderr)
            return 1

    try:
        if args.prefix:
            converted = to_prefix(expression)
            print(f"Prefix Expression: {converted}")
            print(f"Result of Prefix Evaluation: {evaluate_prefix(converted):.4f}")
        else:
            converted = to_postfix(expression)
            print(f"Postfix Expression: {converted}")
            print(f"Result of Postfix Evaluation: {evaluate_postfix(converted):.4f}")
    except ExpressionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0