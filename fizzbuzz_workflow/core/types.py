"""Tagged results returned by the workflow.

Failures are plain values, never exceptions. Callers are expected to handle
every variant of `WorkflowResult` and `WorkflowError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True, slots=True)
class ParseError:
    """The raw input could not be read as an integer."""

    text: str

    @property
    def kind(self) -> Literal["ParseError"]:
        return "ParseError"

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class ValidationError:
    """The input was an integer, but outside the accepted range."""

    number: int

    @property
    def kind(self) -> Literal["ValidationError"]:
        return "ValidationError"

    @property
    def value(self) -> int:
        return self.number


WorkflowError = Union[ParseError, ValidationError]


@dataclass(frozen=True, slots=True)
class Success:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    error: WorkflowError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> Literal["ParseError", "ValidationError"]:
        return self.error.kind

    @property
    def value(self) -> str | int:
        return self.error.value


WorkflowResult = Union[Success, Failure]
