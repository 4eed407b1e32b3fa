"""A small expression evaluator for the /calc command.

Numbers are floats; results may also be booleans (comparisons, logic) or
strings (quoted literals). Results are formatted the compact way: whole
numbers without a fraction, exponent notation for very large or small values.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import NamedTuple, Union

Value = Union[float, bool, str]

ERROR_PREFIX = "Ошибка вычисления выражения"


class ExpressionError(ValueError):
    """The expression cannot be parsed or evaluated."""


class _Token(NamedTuple):
    kind: str
    text: str


_TOKEN_RE = re.compile(
    r"""
    \s*(?:
        (?P<number>[0-9.]+)
      | (?P<string>"[^"]*"|'[^']*')
      | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
      | (?P<op>\*\*|<<|>>|<=|>=|==|!=|&&|\|\||[-+*/%<>!~&|^()])
    )
    """,
    re.VERBOSE,
)

_LEVELS: tuple[tuple[str, ...], ...] = (
    ("||",),
    ("&&",),
    ("==", "!=", ">", ">=", "<", "<="),
    ("&", "|", "^"),
    ("<<", ">>"),
    ("+", "-"),
    ("*", "/", "%"),
)


def _tokenize(expression: str) -> list[_Token]:
    tokens = []
    position = 0
    end = len(expression.rstrip())
    while position < end:
        match = _TOKEN_RE.match(expression, position)
        if match is None:
            bad = expression[position:].lstrip()[:1]
            raise ExpressionError(f"Invalid token: '{bad}'")
        kind = match.lastgroup
        tokens.append(_Token(kind, match.group(kind)))
        position = match.end()
    return tokens


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ExpressionError(f"Unable to parse numeric value '{text}'") from None


def _number(value: Value, op: str) -> float:
    if not isinstance(value, float):
        raise ExpressionError(
            f"Value '{format_value(value)}' cannot be used with the modifier '{op}', "
            "it is not a number"
        )
    return value


def _boolean(value: Value, op: str) -> bool:
    if not isinstance(value, bool):
        raise ExpressionError(
            f"Value '{format_value(value)}' cannot be used with the modifier '{op}', "
            "it is not a bool"
        )
    return value


def _wrap64(number: int) -> int:
    return ((number + 2**63) % 2**64) - 2**63


def _int64(value: Value, op: str) -> int:
    number = _number(value, op)
    if not math.isfinite(number):
        raise ExpressionError(f"Value '{format_value(value)}' cannot be converted to an integer")
    return _wrap64(int(number))


def _is_odd_integer(number: float) -> bool:
    return math.isfinite(number) and number == int(number) and int(number) % 2 == 1


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    sign = math.copysign(1.0, left) * math.copysign(1.0, right)
    return math.copysign(math.inf, sign)


def _modulo(left: float, right: float) -> float:
    if right == 0:
        return math.nan
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        return math.nan


def _compare(op: str, left: Value, right: Value) -> bool:
    if op == "==":
        return type(left) is type(right) and left == right
    if op == "!=":
        return not (type(left) is type(right) and left == right)
    comparable = (isinstance(left, float) and isinstance(right, float)) or (
        isinstance(left, str) and isinstance(right, str)
    )
    if not comparable:
        raise ExpressionError(
            f"Value '{format_value(left)}' cannot be used with the comparator '{op}'"
        )
    if op == ">":
        return left > right
    if op == ">=":
        return left >= right
    if op == "<":
        return left < right
    return left <= right


def _apply(op: str, left: Value, right: Value) -> Value:
    if op == "+":
        if isinstance(left, str) or isinstance(right, str):
            return format_value(left) + format_value(right)
        return _number(left, op) + _number(right, op)
    if op == "-":
        return _number(left, op) - _number(right, op)
    if op == "*":
        return _number(left, op) * _number(right, op)
    if op == "/":
        return _divide(_number(left, op), _number(right, op))
    if op == "%":
        return _modulo(_number(left, op), _number(right, op))
    if op in ("==", "!=", ">", ">=", "<", "<="):
        return _compare(op, left, right)
    if op == "&&":
        return _boolean(left, op) and _boolean(right, op)
    if op == "||":
        return _boolean(left, op) or _boolean(right, op)
    if op == "&":
        return float(_int64(left, op) & _int64(right, op))
    if op == "|":
        return float(_int64(left, op) | _int64(right, op))
    if op == "^":
        return float(_int64(left, op) ^ _int64(right, op))
    shift = _int64(right, op)
    if shift < 0:
        raise ExpressionError(f"Negative shift amount '{shift}'")
    if op == "<<":
        return float(_wrap64(_int64(left, op) << min(shift, 64)))
    return float(_int64(left, op) >> min(shift, 64))


class _Parser:
    def __init__(self, tokens: list[_Token]) -> None:
        self._tokens = tokens
        self._position = 0

    def parse(self) -> Value:
        if not self._tokens:
            raise ExpressionError("Expression is empty")
        value = self._binary(0)
        leftover = self._peek()
        if leftover is not None:
            if leftover.text == ")":
                raise ExpressionError("Unbalanced parenthesis")
            raise ExpressionError(f"Unexpected token: '{leftover.text}'")
        return value

    def _peek(self) -> _Token | None:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _peek_op(self) -> str | None:
        token = self._peek()
        return token.text if token is not None and token.kind == "op" else None

    def _binary(self, level: int) -> Value:
        if level == len(_LEVELS):
            return self._exponent()
        left = self._binary(level + 1)
        while self._peek_op() in _LEVELS[level]:
            op = self._tokens[self._position].text
            self._position += 1
            right = self._binary(level + 1)
            left = _apply(op, left, right)
        return left

    def _exponent(self) -> Value:
        base = self._unary()
        if self._peek_op() == "**":
            self._position += 1
            exponent = self._exponent()
            return _power(_number(base, "**"), _number(exponent, "**"))
        return base

    def _unary(self) -> Value:
        op = self._peek_op()
        if op in ("-", "!", "~"):
            self._position += 1
            operand = self._unary()
            if op == "-":
                return -_number(operand, op)
            if op == "!":
                return not _boolean(operand, op)
            return float(~_int64(operand, op))
        return self._primary()

    def _primary(self) -> Value:
        token = self._peek()
        if token is None:
            raise ExpressionError("Unexpected end of expression")
        self._position += 1
        if token.kind == "number":
            return _parse_number(token.text)
        if token.kind == "string":
            return token.text[1:-1]
        if token.kind == "ident":
            if token.text == "true":
                return True
            if token.text == "false":
                return False
            raise ExpressionError(f"No parameter '{token.text}' found.")
        if token.text == "(":
            value = self._binary(0)
            if self._peek_op() != ")":
                raise ExpressionError("Unbalanced parenthesis")
            self._position += 1
            return value
        raise ExpressionError(f"Unexpected token: '{token.text}'")


def evaluate(expression: str) -> Value:
    """Evaluate an expression and return a float, bool or str."""
    return _Parser(_tokenize(expression)).parse()


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    sign, digits, exponent = Decimal(repr(number)).normalize().as_tuple()
    mantissa = "".join(str(digit) for digit in digits)
    point = len(mantissa) + exponent
    exp10 = point - 1
    prefix = "-" if sign else ""

    if exp10 < -4 or exp10 >= 6:
        head = mantissa[0] + ("." + mantissa[1:] if len(mantissa) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{head}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{mantissa}"
    if point >= len(mantissa):
        return f"{prefix}{mantissa}{'0' * (point - len(mantissa))}"
    return f"{prefix}{mantissa[:point]}.{mantissa[point:]}"


def format_value(value: Value | int | None) -> str:
    """Render a result compactly: shortest float digits, lower-case booleans."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def calculate(expression: str) -> str:
    """Evaluate an expression and return its result, or an error message, as text."""
    try:
        return format_value(evaluate(expression))
    except ExpressionError as exc:
        return f"{ERROR_PREFIX}: {exc}"