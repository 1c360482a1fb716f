"""A small Forth interpreter with integer arithmetic and user-defined words."""

from __future__ import annotations

from typing import Callable, Iterator, Union


class ForthError(Exception):
    """Base class for errors raised while evaluating Forth."""


class DivisionByZero(ForthError):
    """Raised when dividing by zero."""


class StackUnderflow(ForthError):
    """Raised when a word needs more values than the stack holds."""


class UnknownWord(ForthError):
    """Raised when a word is neither built in nor defined."""


class InvalidWord(ForthError):
    """Raised for a malformed definition or an attempt to redefine a number."""


# A compiled instruction: a number to push, the name of a built-in word,
# or a reference to the body of a user definition as it was when compiled.
Instruction = Union[int, str, tuple]


def _truncating_divide(dividend: int, divisor: int) -> list[int]:
    if divisor == 0:
        raise DivisionByZero("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return [quotient]


# Each built-in takes its arguments deepest first and returns what it pushes.
_BUILTINS: dict[str, tuple[int, Callable[..., list[int]]]] = {
    "+": (2, lambda a, b: [a + b]),
    "-": (2, lambda a, b: [a - b]),
    "*": (2, lambda a, b: [a * b]),
    "/": (2, _truncating_divide),
    "dup": (1, lambda a: [a, a]),
    "drop": (1, lambda a: []),
    "swap": (2, lambda a, b: [b, a]),
    "over": (2, lambda a, b: [a, b, a]),
}

_END = object()


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


class Forth:
    """Interpreter state: a value stack and the user's word definitions."""

    def __init__(self) -> None:
        self._stack: list[int] = []
        self._words: dict[str, tuple] = {}

    def stack(self) -> list[int]:
        """The stack, bottom first."""
        return list(self._stack)

    def eval(self, text: str) -> None:
        """Evaluate a line of Forth; words are case-insensitive."""
        tokens = iter(text.lower().split())
        for token in tokens:
            if token == ":":
                self._define(tokens)
            else:
                self._execute((self._compile(token),))

    def _define(self, tokens: Iterator[str]) -> None:
        name = next(tokens, None)
        if name is None or _is_number(name):
            raise InvalidWord("a definition needs a name that is not a number")
        body: list[Instruction] = []
        for token in tokens:
            if token == ";":
                self._words[name] = tuple(body)
                return
            body.append(self._compile(token))
        raise InvalidWord(f"definition of {name!r} is not terminated")

    def _compile(self, token: str) -> Instruction:
        if _is_number(token):
            return int(token)
        if token in self._words:
            return self._words[token]
        if token in _BUILTINS:
            return token
        raise UnknownWord(token)

    def _execute(self, program: tuple) -> None:
        pending = [iter(program)]
        while pending:
            instruction = next(pending[-1], _END)
            if instruction is _END:
                pending.pop()
            elif isinstance(instruction, int):
                self._stack.append(instruction)
            elif isinstance(instruction, tuple):
                pending.append(iter(instruction))
            else:
                self._apply(instruction)

    def _apply(self, name: str) -> None:
        arity, operation = _BUILTINS[name]
        if len(self._stack) < arity:
            raise StackUnderflow(name)
        result = operation(*self._stack[-arity:])
        self._stack[-arity:] = result