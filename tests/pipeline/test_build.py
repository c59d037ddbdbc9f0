# rangler:header:start
#
#   project      : Rangler
#   file         : test_build.py
#   file_relpath : tests/pipeline/test_build.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Unit tests for `Pipeline.build`: token grammar and construction errors."""

from __future__ import annotations

import re

import pytest

from rangler.errors import InvalidPatternError, PipelineBuildError
from rangler.pipeline import Pipeline, StepKind
from rangler.pipeline.steps import (
    AppendStep,
    DedupeStep,
    FilterStep,
    LowerStep,
    PrependStep,
    TrimStep,
    UpperStep,
    create_step,
)
from tests.conftest import mark_pipeline


@mark_pipeline
@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["filter", ".+"], FilterStep.compile(".+")),
        (["append", "foo"], AppendStep(suffix="foo")),
        (["prepend", "foo"], PrependStep(prefix="foo")),
        (["trim"], TrimStep()),
        (["lower"], LowerStep()),
        (["upper"], UpperStep()),
        (["dedupe"], DedupeStep()),
    ],
)
def test_build_parses_single_command(tokens: list[str], expected: object) -> None:
    """Each keyword yields exactly one step of the matching kind."""
    pipeline = Pipeline.build(tokens)

    assert list(pipeline.steps) == [expected]


@mark_pipeline
def test_build_keeps_keyword_order() -> None:
    """Steps appear in the order their keywords were given."""
    pipeline = Pipeline.build(["lower", "upper", "filter", ".+", "prepend", "hello"])

    assert list(pipeline.steps) == [
        LowerStep(),
        UpperStep(),
        FilterStep.compile(".+"),
        PrependStep(prefix="hello"),
    ]
    assert len(pipeline) == 4


@mark_pipeline
def test_build_matches_keywords_case_insensitively() -> None:
    """Keywords are case-insensitive; arguments are taken verbatim."""
    pipeline = Pipeline.build(["LOWER", "Append", "SUFFIX", "FiLtEr", "[A-Z]"])

    assert [step.kind for step in pipeline] == [StepKind.LOWER, StepKind.APPEND, StepKind.FILTER]
    assert pipeline.steps[1] == AppendStep(suffix="SUFFIX")
    assert pipeline.steps[2] == FilterStep.compile("[A-Z]")


@mark_pipeline
def test_build_does_not_interpret_arguments_as_keywords() -> None:
    """A keyword in argument position is just text."""
    pipeline = Pipeline.build(["prepend", "dedupe", "append", "filter"])

    assert list(pipeline.steps) == [PrependStep(prefix="dedupe"), AppendStep(suffix="filter")]


@mark_pipeline
def test_build_starts_dedupe_steps_empty() -> None:
    """A fresh dedupe step has an empty seen-set and stores nothing."""
    pipeline = Pipeline.build(["dedupe", "dedupe"])

    for step in pipeline:
        assert isinstance(step, DedupeStep)
        assert step.seen == set()
        assert step.stored_bytes == 0
    assert pipeline.steps[0].seen is not pipeline.steps[1].seen
    assert pipeline.memory() == 0


@mark_pipeline
@pytest.mark.parametrize(
    "tokens, message, position",
    [
        (["filter"], "missing regular expression", 0),
        (["append"], "missing suffix", 0),
        (["prepend"], "missing prefix", 0),
        (["trim", "append"], "missing suffix", 1),
        (["frobnicate"], "invalid command specified", 0),
        (["lower", "frobnicate", "upper"], "invalid command specified", 1),
    ],
)
def test_build_rejects_malformed_tokens(tokens: list[str], message: str, position: int) -> None:
    """Construction fails with a precise message and the offending position."""
    with pytest.raises(PipelineBuildError, match=f"^{message}$") as excinfo:
        Pipeline.build(tokens)

    assert excinfo.value.message == message
    assert excinfo.value.position == position
    assert excinfo.value.token == tokens[position]


@mark_pipeline
@pytest.mark.parametrize("expression", ["\\", "(", "[a-", "*"])
def test_build_rejects_invalid_regular_expression(expression: str) -> None:
    """An unparsable filter pattern fails with its own error type."""
    with pytest.raises(InvalidPatternError, match="^invalid regular expression$") as excinfo:
        Pipeline.build(["upper", "filter", expression])

    assert excinfo.value.position == 1
    assert excinfo.value.token == "filter"
    assert isinstance(excinfo.value.__cause__, re.error)


@mark_pipeline
def test_build_rejects_zero_commands() -> None:
    """An empty token list is a construction error."""
    with pytest.raises(PipelineBuildError, match="^no commands specified$"):
        Pipeline.build([])


@mark_pipeline
def test_describe_lists_steps_with_arguments() -> None:
    """`describe()` renders one entry per step, in order."""
    pipeline = Pipeline.build(["trim", "filter", "^a", "append", "!", "dedupe"])

    assert pipeline.describe() == ["trim", "filter '^a'", "append '!'", "dedupe"]


@mark_pipeline
@pytest.mark.parametrize(
    "kind, message",
    [
        (StepKind.FILTER, "missing regular expression"),
        (StepKind.APPEND, "missing suffix"),
        (StepKind.PREPEND, "missing prefix"),
    ],
)
def test_create_step_requires_argument(kind: StepKind, message: str) -> None:
    """Argument-taking kinds refuse to build without their argument."""
    with pytest.raises(PipelineBuildError, match=f"^{message}$") as excinfo:
        create_step(kind)

    assert excinfo.value.token == kind.value


@mark_pipeline
def test_create_step_ignores_argument_of_bare_kinds() -> None:
    """Kinds without an argument build the same step either way."""
    assert create_step(StepKind.TRIM, "unused") == TrimStep()
    assert create_step(StepKind.DEDUPE) == DedupeStep()
