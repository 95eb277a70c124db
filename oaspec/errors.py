"""Errors reported by the compiler, with their location in the document."""

from __future__ import annotations

from typing import Optional, Sequence

from oaspec.context import Context


class CompilerError(Exception):
    """An error tied to a position in the document being compiled."""

    def __init__(self, context: Optional[Context], message: str) -> None:
        super().__init__(message)
        self.context = context
        self.message = message

    def _location_description(self) -> str:
        assert self.context is not None
        node = self.context.node
        if node is not None:
            mark = getattr(node, "start_mark", None)
            line = mark.line + 1 if mark is not None else 0
            column = mark.column + 1 if mark is not None else 0
            return f"[{line},{column}] {self.context.description()}"
        return self.context.description()

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        return f"{self._location_description()} {self.message}"


class ErrorGroup(Exception):
    """Several errors reported together."""

    def __init__(self, errors: Sequence[BaseException]) -> None:
        super().__init__(*errors)
        self.errors = list(errors)

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)


def error_group_or_none(
    errors: Sequence[BaseException],
) -> Optional[BaseException]:
    """Return None for no errors, the error itself for one, else an ErrorGroup."""
    if not errors:
        return None
    if len(errors) == 1:
        return errors[0]
    return ErrorGroup(errors)