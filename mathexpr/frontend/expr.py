from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

class Expr:
    """An arithmetic expression tree. Children are owned, never shared."""

    def __str__(self, level=0) -> str:
        # Walked with an explicit stack: long operator chains build deep spines
        lines = []
        todo = [(self, level)]
        while todo:
            node, depth = todo.pop()
            lines.append("\t" * depth + node.label())
            if isinstance(node, BinaryOp):
                todo.append((node.right, depth + 1))
                todo.append((node.left, depth + 1))
        return "\n".join(lines) + "\n"

    def label(self) -> str:
        raise NotImplementedError

@dataclass(frozen=True)
class Number(Expr):
    value: int

    def label(self) -> str:
        return f"Number({self.value})"

@dataclass(frozen=True)
class BinaryOp(Expr):
    left: Expr
    right: Expr

    symbol: ClassVar[str] = '?'

    def label(self) -> str:
        return type(self).__name__

@dataclass(frozen=True)
class Add(BinaryOp):
    symbol: ClassVar[str] = '+'

@dataclass(frozen=True)
class Subtract(BinaryOp):
    symbol: ClassVar[str] = '-'

@dataclass(frozen=True)
class Multiply(BinaryOp):
    symbol: ClassVar[str] = '*'

@dataclass(frozen=True)
class Divide(BinaryOp):
    symbol: ClassVar[str] = '/'

@dataclass(frozen=True)
class Power(BinaryOp):
    symbol: ClassVar[str] = '^'
