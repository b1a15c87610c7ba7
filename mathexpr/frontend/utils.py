from __future__ import annotations
from enum import Enum, auto
from typing import Deque, List, Sequence
import logging
import re

from mathexpr.frontend.errors import ExprSyntaxError

log = logging.getLogger(__name__)

class TokenId(Enum):
    NUMBER = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    OP_POW = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

class Token:
    def __init__(self, token_id: TokenId, value: str, pos: int = 0) -> None:
        self.token_id = token_id
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value!r}, {self.pos})'

    def __str__(self) -> str:
        return f'({self.token_id}, {self.value})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.token_id, self.value, self.pos) == (other.token_id, other.value, other.pos)

_token_map = {
    re.compile(r'\s+'): None,
    re.compile(r'[0-9]+'): TokenId.NUMBER,
    re.compile(r'\('): TokenId.RBRACE_LEFT,
    re.compile(r'\)'): TokenId.RBRACE_RIGHT,
    re.compile(r'\+'): TokenId.OP_PLUS,
    re.compile(r'-'): TokenId.OP_MINUS,
    re.compile(r'\*'): TokenId.OP_MUL,
    re.compile(r'/'): TokenId.OP_DIV,
    re.compile(r'\^'): TokenId.OP_POW,
}

# Source text of each operator, used in error messages
token_text = {
    TokenId.NUMBER: 'number',
    TokenId.OP_PLUS: "'+'",
    TokenId.OP_MINUS: "'-'",
    TokenId.OP_MUL: "'*'",
    TokenId.OP_DIV: "'/'",
    TokenId.OP_POW: "'^'",
    TokenId.RBRACE_LEFT: "'('",
    TokenId.RBRACE_RIGHT: "')'",
}

def tokenize(src: str, token_map=_token_map) -> List[Token]:
    parts = []
    pos = 0
    while pos < len(src):
        for pattern, token_id in token_map.items():
            if (m := pattern.match(src, pos)):
                if token_id:
                    parts.append(Token(token_id, m[0], pos))
                pos = m.end()
                break
        else:
            raise ExprSyntaxError(f"unexpected character {src[pos]!r}", pos)
    log.debug('tokens: %s', parts)
    return parts

def describe(tokens: Sequence[Token], offset=0) -> str:
    if len(tokens) <= offset:
        return 'end of input'
    tok = tokens[offset]
    if tok.token_id is TokenId.NUMBER:
        return f'number {tok.value}'
    return token_text[tok.token_id]

def look(tokens: Sequence[Token], offset=0) -> TokenId|None:
    return tokens[offset].token_id if len(tokens) > offset else None

def match(tokens: Deque[Token], token_id: TokenId|List[TokenId], end: int = 0) -> Token:
    """Pops the first token if it is one of `token_id`, raises otherwise.

    `end` is the source length, reported as the error position when the
    token stream ran out.
    """
    tok = look(tokens)
    token_id = token_id if isinstance(token_id, list) else [token_id]
    if tok not in token_id:
        expected = ' or '.join(token_text[tid] for tid in token_id)
        pos = tokens[0].pos if tokens else end
        raise ExprSyntaxError(f'expected {expected}, got {describe(tokens)}', pos)
    return tokens.popleft()
