"""Console boundary around the workflow.

The shell owns every side effect: it prompts, reads a line, runs the
workflow, and writes the rendered message. Reading and writing are injected
so the loop can be driven without a terminal.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable

from typing_extensions import assert_never

from fizzbuzz_workflow.core.types import Failure, ParseError, Success, ValidationError, WorkflowResult
from fizzbuzz_workflow.observability import bind_context, get_logger, set_outcome
from fizzbuzz_workflow.observability.ids import new_session_id
from fizzbuzz_workflow.pipeline.validator import MAX_NUMBER, MIN_NUMBER
from fizzbuzz_workflow.pipeline.workflow import Workflow, execute_workflow

ReadLine = Callable[[], str]
WriteLine = Callable[[str], None]

PROMPT = f"Please enter a number between {MIN_NUMBER} and {MAX_NUMBER}:"


def render_result(result: WorkflowResult) -> str:
    if isinstance(result, Success):
        return f"Here is the output:\n{result.text}"
    if isinstance(result, Failure):
        error = result.error
        if isinstance(error, ParseError):
            return f"{error.text} is not an integer"
        if isinstance(error, ValidationError):
            return (
                f"You entered {error.number}. "
                f"Please enter a valid integer between {MIN_NUMBER} and {MAX_NUMBER}."
            )
        assert_never(error)
    assert_never(result)


class Shell:
    """Prompt/read/run/print loop."""

    def __init__(
        self,
        *,
        read_line: ReadLine,
        write_line: WriteLine,
        workflow: Workflow = execute_workflow,
        quit_words: Iterable[str] = (),
    ) -> None:
        self._read_line = read_line
        self._write_line = write_line
        self._workflow = workflow
        self._quit_words = frozenset(w.lower() for w in quit_words)
        self._session_id = new_session_id()
        self._turn_id = 0
        self._log = get_logger("fizzbuzz.shell")

    def run_once(self) -> WorkflowResult:
        """One prompt/answer cycle. EOFError from `read_line` propagates."""

        self._write_line(PROMPT)
        return self.answer(self._read_line())

    def answer(self, raw_input: str) -> WorkflowResult:
        """Run the workflow on already captured input and write the message."""

        self._turn_id += 1
        bind_context(session_id=self._session_id, turn_id=self._turn_id)

        raw_input = raw_input.rstrip("\r\n")
        t0 = time.perf_counter()
        result = self._workflow(raw_input)
        set_outcome("Success" if isinstance(result, Success) else result.kind)
        self._log.info(
            "workflow_done",
            latency_ms=round((time.perf_counter() - t0) * 1000, 2),
            input_len=len(raw_input),
        )

        self._write_line(render_result(result))
        return result

    def run(self, *, repeat: bool = False) -> WorkflowResult | None:
        """Run one cycle, or keep cycling until EOF or a quit word.

        Returns the last workflow result, or None when nothing was answered.
        """

        if not repeat:
            return self.run_once()

        last: WorkflowResult | None = None
        while True:
            self._write_line(PROMPT)
            try:
                line = self._read_line()
            except EOFError:
                self._log.info("input_closed", turns=self._turn_id)
                return last
            if line.strip().lower() in self._quit_words:
                self._log.info("quit_requested", turns=self._turn_id)
                return last
            last = self.answer(line)
