# rangler:header:start
#
#   project      : Rangler
#   file         : steps.py
#   file_relpath : src/rangler/pipeline/steps.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Step variants of the transformation pipeline.

Each command keyword maps to one small dataclass. Steps only carry state; the
per-line behavior lives in [`Pipeline.apply`][rangler.pipeline.pipeline.Pipeline.apply],
which dispatches over this closed set of classes.

Only [`DedupeStep`][rangler.pipeline.steps.DedupeStep] holds mutable state (its
seen-set and the byte count of what it stores). Everything else is immutable
once built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from rangler.constants import STREAM_ENCODING
from rangler.errors import InvalidPatternError, PipelineBuildError


class StepKind(str, Enum):
    """Command keywords understood by the pipeline builder."""

    FILTER = "filter"
    APPEND = "append"
    PREPEND = "prepend"
    TRIM = "trim"
    LOWER = "lower"
    UPPER = "upper"
    DEDUPE = "dedupe"

    @classmethod
    def parse(cls, keyword: str) -> StepKind | None:
        """Return the kind for ``keyword`` (case-insensitive), or None if unknown."""
        try:
            return cls(keyword.lower())
        except ValueError:
            return None

    @property
    def takes_argument(self) -> bool:
        """Whether the keyword consumes the following token as its argument."""
        return self in _ARGUMENT_ERRORS

    @property
    def missing_argument_message(self) -> str:
        """Error message used when the keyword is the last token."""
        return _ARGUMENT_ERRORS[self]


_ARGUMENT_ERRORS: dict[StepKind, str] = {
    StepKind.FILTER: "missing regular expression",
    StepKind.APPEND: "missing suffix",
    StepKind.PREPEND: "missing prefix",
}


def utf8_length(value: str) -> int:
    """Return the number of bytes ``value`` occupies once encoded for output."""
    return len(value.encode(STREAM_ENCODING, errors="surrogateescape"))


class BaseStep:
    """Common shape of all steps.

    Attributes:
        kind (StepKind): The command keyword this step was built from.
    """

    kind: ClassVar[StepKind]

    @property
    def stored_bytes(self) -> int:
        """Bytes retained by this step across lines (0 for stateless steps)."""
        return 0

    def describe(self) -> str:
        """Return a short, human-readable rendition (``"kind"`` or ``"kind <arg>"``)."""
        return self.kind.value


@dataclass
class FilterStep(BaseStep):
    """Drop lines in which ``pattern`` finds no match.

    Attributes:
        expression (str): The regular expression source, as given on the command line.
        pattern (re.Pattern[str]): The compiled expression.
    """

    kind: ClassVar[StepKind] = StepKind.FILTER

    expression: str
    pattern: re.Pattern[str] = field(compare=False, repr=False)

    @classmethod
    def compile(cls, expression: str) -> FilterStep:
        """Compile ``expression`` into a filter step.

        Raises:
            InvalidPatternError: If ``expression`` is not a valid regular expression.
        """
        try:
            pattern = re.compile(expression)
        except re.error as exc:
            raise InvalidPatternError(
                "invalid regular expression", token=StepKind.FILTER.value
            ) from exc
        return cls(expression=expression, pattern=pattern)

    def describe(self) -> str:
        return f"{self.kind.value} {self.expression!r}"


@dataclass(frozen=True)
class AppendStep(BaseStep):
    """Append ``suffix`` to every line."""

    kind: ClassVar[StepKind] = StepKind.APPEND

    suffix: str

    def describe(self) -> str:
        return f"{self.kind.value} {self.suffix!r}"


@dataclass(frozen=True)
class PrependStep(BaseStep):
    """Prepend ``prefix`` to every line."""

    kind: ClassVar[StepKind] = StepKind.PREPEND

    prefix: str

    def describe(self) -> str:
        return f"{self.kind.value} {self.prefix!r}"


@dataclass(frozen=True)
class TrimStep(BaseStep):
    """Strip leading and trailing whitespace."""

    kind: ClassVar[StepKind] = StepKind.TRIM


@dataclass(frozen=True)
class LowerStep(BaseStep):
    """Convert to lower case."""

    kind: ClassVar[StepKind] = StepKind.LOWER


@dataclass(frozen=True)
class UpperStep(BaseStep):
    """Convert to upper case."""

    kind: ClassVar[StepKind] = StepKind.UPPER


@dataclass
class DedupeStep(BaseStep):
    """Drop lines equal to a line that already passed this step.

    The seen-set is never pruned: memory grows with the number of distinct
    values reaching the step.

    Attributes:
        seen (set[str]): Values that already passed this step.
        stored (int): Sum of the UTF-8 byte lengths of ``seen``.
    """

    kind: ClassVar[StepKind] = StepKind.DEDUPE

    seen: set[str] = field(default_factory=lambda: set[str](), compare=False, repr=False)
    stored: int = field(default=0, compare=False)

    @property
    def stored_bytes(self) -> int:
        return self.stored


Step = Union[FilterStep, AppendStep, PrependStep, TrimStep, LowerStep, UpperStep, DedupeStep]


def create_step(kind: StepKind, argument: str | None = None) -> Step:
    """Instantiate the step for ``kind``.

    Args:
        kind (StepKind): The command keyword.
        argument (str | None): The argument token for filter/append/prepend.

    Returns:
        Step: A freshly built step (dedupe steps start empty).

    Raises:
        PipelineBuildError: If ``kind`` requires an argument and none was given.
        InvalidPatternError: If a filter argument does not compile.
    """
    match kind:
        case StepKind.FILTER | StepKind.APPEND | StepKind.PREPEND if argument is None:
            raise PipelineBuildError(kind.missing_argument_message, token=kind.value)
        case StepKind.FILTER if argument is not None:
            return FilterStep.compile(argument)
        case StepKind.APPEND if argument is not None:
            return AppendStep(suffix=argument)
        case StepKind.PREPEND if argument is not None:
            return PrependStep(prefix=argument)
        case StepKind.TRIM:
            return TrimStep()
        case StepKind.LOWER:
            return LowerStep()
        case StepKind.UPPER:
            return UpperStep()
        case StepKind.DEDUPE:
            return DedupeStep()
