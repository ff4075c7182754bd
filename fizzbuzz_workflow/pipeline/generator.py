from __future__ import annotations

from typing import Iterator

from fizzbuzz_workflow.pipeline.validator import ValidatedNumber


def fizzbuzz_label(n: int) -> str:
    """Label a single integer by its divisibility by 3 and 5."""

    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def iter_fizzbuzz(number: ValidatedNumber) -> Iterator[str]:
    """Yield the labels for 1..number.value in ascending order."""

    for n in range(1, number.value + 1):
        yield fizzbuzz_label(n)


def render_fizzbuzz(number: ValidatedNumber) -> str:
    return "\n".join(iter_fizzbuzz(number))
