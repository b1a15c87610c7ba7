from __future__ import annotations
import logging
import math

from mathexpr.frontend.builder import build_expression
from mathexpr.frontend.errors import NestingTooDeepError
from mathexpr.frontend.expr import Expr, Number, Add, Subtract, Multiply, Divide, Power

log = logging.getLogger(__name__)

def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1

def divide(x: float, y: float) -> float:
    """IEEE-754 division: a zero divisor gives a signed infinity or NaN."""
    if y != 0.0:
        return x / y
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)

def power(x: float, y: float) -> float:
    """Real-valued `x ** y` following C's pow() for the cases Python rejects."""
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0 and y < 0:
            # pow(+-0, y) for negative y: the sign of zero survives odd exponents
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        # Negative base with a non-integer exponent has no real result
        return math.nan

op_map = {
    Add: lambda x, y: x + y,
    Subtract: lambda x, y: x - y,
    Multiply: lambda x, y: x * y,
    Divide: divide,
    Power: power,
}

def evaluate(expr: Expr) -> float:
    """Reduces `expr` to its value, children before parents.

    Uses an explicit stack, so a long operator chain is no deeper for the
    evaluator than a single operation.
    """
    values = []
    todo = [(expr, False)]
    while todo:
        node, children_done = todo.pop()
        if isinstance(node, Number):
            values.append(float(node.value))
        elif children_done:
            rhs = values.pop()
            lhs = values.pop()
            values.append(op_map[type(node)](lhs, rhs))
        else:
            todo.append((node, True))
            todo.append((node.right, False))
            todo.append((node.left, False))
    return values.pop()

def parse_expression(src: str) -> Expr:
    """Builds the expression tree of `src`.

    Only parentheses nest the parser, so running out of stack here means the
    input is parenthesised too deeply.
    """
    try:
        return build_expression(src)
    except RecursionError:
        raise NestingTooDeepError('parentheses are nested too deeply') from None

def parse_and_evaluate(src: str) -> float:
    """Parses `src` and returns its value.

    Raises an EvalError subclass (ExprSyntaxError, NumberFormatError or
    NestingTooDeepError) when the input cannot be evaluated.
    """
    result = evaluate(parse_expression(src))
    log.debug('%r = %r', src, result)
    return result
