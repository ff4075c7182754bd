"""The three pure stages and the workflow that composes them."""

from __future__ import annotations

from fizzbuzz_workflow.pipeline.generator import fizzbuzz_label, iter_fizzbuzz, render_fizzbuzz
from fizzbuzz_workflow.pipeline.parser import parse_number
from fizzbuzz_workflow.pipeline.validator import MAX_NUMBER, MIN_NUMBER, ValidatedNumber, validate_number
from fizzbuzz_workflow.pipeline.workflow import execute_workflow, make_workflow, run_workflow

__all__ = [
    "MAX_NUMBER",
    "MIN_NUMBER",
    "ValidatedNumber",
    "execute_workflow",
    "fizzbuzz_label",
    "iter_fizzbuzz",
    "make_workflow",
    "parse_number",
    "render_fizzbuzz",
    "run_workflow",
    "validate_number",
]
