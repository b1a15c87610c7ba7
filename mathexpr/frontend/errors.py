from __future__ import annotations

class EvalError(Exception):
    """Base class of every failure reported back to the user."""
    def __init__(self, message: str, pos: int|None = None) -> None:
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return self.message
        return f'{self.message} (at position {self.pos})'

class ExprSyntaxError(EvalError):
    pass

class NumberFormatError(EvalError):
    pass

class NestingTooDeepError(EvalError):
    pass

class GrammarMismatchError(RuntimeError):
    """The parse tree holds something the builder has no case for.

    This is a bug in the grammar or the builder, never bad user input.
    """
