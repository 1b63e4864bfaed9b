from typing import Optional, Sequence, Any


class SmartsError(ValueError):
    """Base class for errors raised while reading a SMARTS pattern."""


class ScanError(SmartsError):
    def __init__(self, char: str, position: int, pattern: str):
        self.char = char
        self.position = position
        self.pattern = pattern
        super().__init__(
            f"unrecognized token {char!r} at {position} in \n{pattern}\n{' ' * position}^"
        )


class ParseError(SmartsError):
    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        window: Optional[Sequence[Any]] = None,
    ):
        self.message = message
        self.position = position
        self.window = list(window) if window is not None else []

        if position is None:
            super().__init__(message)
        else:
            context = " ".join(str(t) for t in self.window)
            super().__init__(f"{message} at token {position}: {context}")


class EvaluationError(SmartsError):
    """Internal inconsistency found while resolving bonds, e.g. an unknown ring label."""
