# rangler:header:start
#
#   project      : Rangler
#   file         : pipeline.py
#   file_relpath : src/rangler/pipeline/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""The transformation pipeline: construction, per-line evaluation, memory accounting.

A [`Pipeline`][rangler.pipeline.pipeline.Pipeline] is built once from a flat
list of command tokens and then fed one line at a time:

    pipeline = Pipeline.build(["lower", "dedupe"])
    pipeline.apply("fOo")  # -> "foo"
    pipeline.apply("fOo")  # -> None (dropped as a duplicate)

Evaluation order equals token order and is never rearranged. A filter or
dedupe step may drop the line, which stops evaluation right there; anything
earlier dedupe steps recorded for that line stays recorded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rangler.config.logging import get_logger
from rangler.errors import PipelineBuildError
from rangler.pipeline.steps import (
    AppendStep,
    DedupeStep,
    FilterStep,
    LowerStep,
    PrependStep,
    StepKind,
    TrimStep,
    UpperStep,
    create_step,
    utf8_length,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from rangler.config.logging import RanglerLogger
    from rangler.pipeline.steps import Step

logger: RanglerLogger = get_logger(__name__)


class Pipeline:
    """An ordered, fixed sequence of transformation steps.

    Use [`build`][rangler.pipeline.pipeline.Pipeline.build] to construct one
    from command tokens. A pipeline is owned by a single run loop; it is not
    safe to share between threads.

    Args:
        steps (Sequence[Step]): The steps, in evaluation order.
    """

    def __init__(self, steps: Sequence[Step]) -> None:
        self._steps: tuple[Step, ...] = tuple(steps)

    @classmethod
    def build(cls, tokens: Sequence[str]) -> Pipeline:
        """Parse command tokens into a pipeline.

        Keywords are matched case-insensitively. ``filter``, ``append`` and
        ``prepend`` take the next token verbatim as their argument; the other
        keywords take none.

        Args:
            tokens (Sequence[str]): Command tokens, typically the command-line
                arguments after the options.

        Returns:
            Pipeline: The constructed pipeline, steps in keyword order.

        Raises:
            PipelineBuildError: On an unknown keyword, a missing argument, or an
                empty token list.
            InvalidPatternError: If a ``filter`` argument does not compile.
        """
        steps: list[Step] = []
        position = 0

        while position < len(tokens):
            keyword = tokens[position]
            kind = StepKind.parse(keyword)
            if kind is None:
                raise PipelineBuildError(
                    "invalid command specified", token=keyword, position=position
                )

            argument: str | None = None
            if kind.takes_argument:
                if position + 1 >= len(tokens):
                    raise PipelineBuildError(
                        kind.missing_argument_message, token=keyword, position=position
                    )
                argument = tokens[position + 1]

            try:
                step = create_step(kind, argument)
            except PipelineBuildError as exc:
                exc.token = keyword
                exc.position = position
                raise

            logger.trace("Pipeline step #%d: %s", len(steps), step.describe())
            steps.append(step)
            position += 2 if kind.takes_argument else 1

        if not steps:
            raise PipelineBuildError("no commands specified")

        pipeline = cls(steps)
        logger.debug("Built pipeline: %s", " | ".join(pipeline.describe()))
        return pipeline

    @property
    def steps(self) -> tuple[Step, ...]:
        """The steps in evaluation order."""
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({list(self._steps)!r})"

    def describe(self) -> list[str]:
        """Return one human-readable entry per step, in order."""
        return [step.describe() for step in self._steps]

    def apply(self, line: str) -> str | None:
        """Thread ``line`` through every step.

        Args:
            line (str): One input line, delimiter already stripped.

        Returns:
            str | None: The transformed line, or None if a filter or dedupe step
                dropped it.
        """
        value = line

        for step in self._steps:
            match step:
                case FilterStep(pattern=pattern):
                    if pattern.search(value) is None:
                        return None
                case AppendStep(suffix=suffix):
                    value = value + suffix
                case PrependStep(prefix=prefix):
                    value = prefix + value
                case TrimStep():
                    value = value.strip()
                case LowerStep():
                    value = value.lower()
                case UpperStep():
                    value = value.upper()
                case DedupeStep(seen=seen):
                    if value in seen:
                        return None
                    seen.add(value)
                    step.stored += utf8_length(value)

        return value

    def memory(self) -> int:
        """Return the bytes currently held by dedupe steps (0 if there are none)."""
        return sum(step.stored_bytes for step in self._steps)
