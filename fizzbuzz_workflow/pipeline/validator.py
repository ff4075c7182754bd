"""Range validation.

`validate_number` is the only way to obtain a `ValidatedNumber`; anything
holding one can rely on `MIN_NUMBER <= value <= MAX_NUMBER`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

MIN_NUMBER = 1
MAX_NUMBER = 4000

_KEY = object()


@dataclass(frozen=True, slots=True)
class ValidatedNumber:
    value: int
    _key: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        # replace() reuses _key; recheck the range.
        if self._key is not _KEY:
            raise TypeError("ValidatedNumber can only be created by validate_number()")
        if type(self.value) is not int or not MIN_NUMBER <= self.value <= MAX_NUMBER:
            raise TypeError(f"ValidatedNumber out of range: {self.value!r}")


def validate_number(number: int) -> ValidatedNumber | None:
    if type(number) is not int:
        return None
    if MIN_NUMBER <= number <= MAX_NUMBER:
        return ValidatedNumber(number, _KEY)
    return None
