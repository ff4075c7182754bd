"""Parse -> validate -> generate, composed into one tagged result.

The stages are passed in as plain callables so tests (or alternative
front-ends) can substitute their own behaviour without touching
`run_workflow`.
"""

from __future__ import annotations

from typing import Callable

from fizzbuzz_workflow.core.types import Failure, ParseError, Success, ValidationError, WorkflowResult
from fizzbuzz_workflow.pipeline.generator import render_fizzbuzz
from fizzbuzz_workflow.pipeline.parser import parse_number
from fizzbuzz_workflow.pipeline.validator import ValidatedNumber, validate_number

ParseNumber = Callable[[str], int | None]
ValidateNumber = Callable[[int], ValidatedNumber | None]
GenerateText = Callable[[ValidatedNumber], str]
Workflow = Callable[[str], WorkflowResult]


def run_workflow(
    raw_input: str,
    *,
    parse: ParseNumber,
    validate: ValidateNumber,
    generate: GenerateText,
) -> WorkflowResult:
    number = parse(raw_input)
    if number is None:
        return Failure(ParseError(raw_input))

    validated = validate(number)
    if validated is None:
        return Failure(ValidationError(number))

    return Success(generate(validated))


def make_workflow(
    *,
    parse: ParseNumber = parse_number,
    validate: ValidateNumber = validate_number,
    generate: GenerateText = render_fizzbuzz,
) -> Workflow:
    """Bind the three stages, returning a `raw_input -> WorkflowResult` function."""

    def workflow(raw_input: str) -> WorkflowResult:
        return run_workflow(raw_input, parse=parse, validate=validate, generate=generate)

    return workflow


execute_workflow: Workflow = make_workflow()
