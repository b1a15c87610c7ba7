from __future__ import annotations
from enum import Enum, auto
from collections import deque
from typing import Deque, List
import logging

from mathexpr.frontend.errors import ExprSyntaxError
from mathexpr.frontend.utils import Token, TokenId, tokenize, look, match, describe

log = logging.getLogger(__name__)

# Grammar, lowest precedence first:
# sum     = product, { ("+" | "-"), product } ;
# product = power, { ("*" | "/"), power } ;
# power   = factor, { "^", factor } ;
# factor  = number | "(", sum, ")" ;
# number  = digit, { digit } ;
# digit   = ? regex [0-9] ? ;
#
# Every level keeps its operands flat: the builder folds `sum` and `product`
# left to right and `power` right to left, so only parentheses nest.

class Rule(Enum):
    SUM = auto()
    PRODUCT = auto()
    POWER = auto()
    FACTOR = auto()
    NUMBER = auto()

class ParseNode:
    def __init__(self, rule: Rule, children: List[ParseNode|Token]) -> None:
        self.rule = rule
        self.children = children

    def __repr__(self) -> str:
        return f'ParseNode({self.rule}, {self.children!r})'

    def __str__(self, level=0) -> str:
        ret = "\t" * level + self.rule.name + "\n"
        for child in self.children:
            if isinstance(child, ParseNode):
                ret += child.__str__(level + 1)
            else:
                ret += "\t" * (level + 1) + str(child) + "\n"
        return ret

sum_ops = [TokenId.OP_PLUS, TokenId.OP_MINUS]
product_ops = [TokenId.OP_MUL, TokenId.OP_DIV]

def sum_rule(tokens: Deque[Token], end: int) -> ParseNode:
    children = [product_rule(tokens, end)]
    while look(tokens) in sum_ops:
        children.append(match(tokens, sum_ops, end))
        children.append(product_rule(tokens, end))
    return ParseNode(Rule.SUM, children)

def product_rule(tokens: Deque[Token], end: int) -> ParseNode:
    children = [power_rule(tokens, end)]
    while look(tokens) in product_ops:
        children.append(match(tokens, product_ops, end))
        children.append(power_rule(tokens, end))
    return ParseNode(Rule.PRODUCT, children)

def power_rule(tokens: Deque[Token], end: int) -> ParseNode:
    children = [factor_rule(tokens, end)]
    while look(tokens) == TokenId.OP_POW:
        children.append(match(tokens, TokenId.OP_POW, end))
        children.append(factor_rule(tokens, end))
    return ParseNode(Rule.POWER, children)

def factor_rule(tokens: Deque[Token], end: int) -> ParseNode:
    if look(tokens) == TokenId.NUMBER:
        return ParseNode(Rule.FACTOR, [number_rule(tokens, end)])
    match(tokens, [TokenId.NUMBER, TokenId.RBRACE_LEFT], end)
    inner = sum_rule(tokens, end)
    match(tokens, TokenId.RBRACE_RIGHT, end)
    return ParseNode(Rule.FACTOR, [inner])

def number_rule(tokens: Deque[Token], end: int) -> ParseNode:
    return ParseNode(Rule.NUMBER, [match(tokens, TokenId.NUMBER, end)])

rules = {
    Rule.SUM: sum_rule,
    Rule.PRODUCT: product_rule,
    Rule.POWER: power_rule,
    Rule.FACTOR: factor_rule,
    Rule.NUMBER: number_rule,
}

def parse(src: str, rule: Rule = Rule.SUM) -> ParseNode:
    """Parses the whole of `src` starting from `rule`.

    Raises ExprSyntaxError if any part of the input does not fit the grammar,
    including leftover tokens after a complete expression.
    """
    tokens = deque(tokenize(src))
    tree = rules[rule](tokens, len(src))
    if tokens:
        raise ExprSyntaxError(f'unexpected {describe(tokens)} after expression', tokens[0].pos)
    log.debug('parse tree:\n%s', tree)
    return tree
