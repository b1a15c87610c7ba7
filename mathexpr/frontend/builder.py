from __future__ import annotations
from typing import List
import logging

from mathexpr.frontend.errors import ExprSyntaxError, GrammarMismatchError, NumberFormatError
from mathexpr.frontend.expr import Expr, Number, Add, Subtract, Multiply, Divide, Power
from mathexpr.frontend.grammar import ParseNode, Rule, parse
from mathexpr.frontend.utils import Token

log = logging.getLogger(__name__)

# Literals are 32-bit signed integers
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# Maps operator text to the node it builds, per precedence level
sum_op_map = {op.symbol: op for op in (Add, Subtract)}
product_op_map = {op.symbol: op for op in (Multiply, Divide)}
power_op_map = {Power.symbol: Power}

def operator_node(tok: Token, op_map: dict) -> type:
    """Returns the node class for operator `tok`.

    Operator text outside `op_map` is reported as a syntax error rather than
    treated as a crash.
    """
    if not isinstance(tok, Token):
        raise GrammarMismatchError(f'expected an operator token, got {tok!r}')
    if tok.value not in op_map:
        raise ExprSyntaxError(f'unexpected operator {tok.value!r}', tok.pos)
    return op_map[tok.value]

def expect_rule(node: ParseNode, rule: Rule) -> List[ParseNode|Token]:
    if not isinstance(node, ParseNode) or node.rule is not rule:
        got = node.rule if isinstance(node, ParseNode) else node
        raise GrammarMismatchError(f'expected a {rule} node, got {got!r}')
    if not node.children:
        raise GrammarMismatchError(f'{rule} node has no children')
    return node.children

def operands(node: ParseNode, rule: Rule) -> List[ParseNode|Token]:
    children = expect_rule(node, rule)
    if len(children) % 2 == 0:
        raise GrammarMismatchError(f'{rule} node has a dangling operator')
    return children

def fold_left(node: ParseNode, rule: Rule, op_map: dict) -> Expr:
    """Builds `a op b op c` as `(a op b) op c`."""
    children = operands(node, rule)
    tree = build(children[0])
    for i in range(1, len(children), 2):
        op = operator_node(children[i], op_map)
        tree = op(tree, build(children[i + 1]))
    return tree

def build_sum(node: ParseNode) -> Expr:
    return fold_left(node, Rule.SUM, sum_op_map)

def build_product(node: ParseNode) -> Expr:
    return fold_left(node, Rule.PRODUCT, product_op_map)

def build_power(node: ParseNode) -> Expr:
    """Builds `a ^ b ^ c` as `a ^ (b ^ c)`."""
    children = operands(node, Rule.POWER)
    tree = build(children[-1])
    for i in range(len(children) - 2, 0, -2):
        op = operator_node(children[i], power_op_map)
        tree = op(build(children[i - 1]), tree)
    return tree

def build_factor(node: ParseNode) -> Expr:
    children = expect_rule(node, Rule.FACTOR)
    if len(children) != 1:
        raise GrammarMismatchError(f'{Rule.FACTOR} node has {len(children)} children')
    return build(children[0])

def build_number(node: ParseNode) -> Expr:
    tok = expect_rule(node, Rule.NUMBER)[0]
    if not isinstance(tok, Token):
        raise GrammarMismatchError(f'{Rule.NUMBER} node holds {tok!r}')
    try:
        value = int(tok.value.strip())
    except ValueError:
        raise NumberFormatError(f'invalid number literal {tok.value!r}', tok.pos)
    if not (INT_MIN <= value <= INT_MAX):
        raise NumberFormatError(f'number {tok.value} does not fit in 32 bits', tok.pos)
    return Number(value)

builders = {
    Rule.SUM: build_sum,
    Rule.PRODUCT: build_product,
    Rule.POWER: build_power,
    Rule.FACTOR: build_factor,
    Rule.NUMBER: build_number,
}

def build(node: ParseNode) -> Expr:
    if not isinstance(node, ParseNode) or node.rule not in builders:
        raise GrammarMismatchError(f'no builder for {node!r}')
    return builders[node.rule](node)

def build_expression(src: str) -> Expr:
    tree = build(parse(src))
    log.debug('expression tree:\n%s', tree)
    return tree
