"""Interactive FizzBuzz: parse -> validate -> generate, with typed failures."""

from __future__ import annotations

from fizzbuzz_workflow.core.types import Failure, ParseError, Success, ValidationError, WorkflowResult
from fizzbuzz_workflow.pipeline.workflow import execute_workflow

__all__ = [
    "Failure",
    "ParseError",
    "Success",
    "ValidationError",
    "WorkflowResult",
    "__version__",
    "execute_workflow",
]

__version__ = "0.1.0"
