# rangler:header:start
#
#   project      : Rangler
#   file         : __init__.py
#   file_relpath : src/rangler/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Rangler transformation pipeline package.

This package contains:

- the step variants and the keyword table ([`rangler.pipeline.steps`][rangler.pipeline.steps]),
- the [`Pipeline`][rangler.pipeline.pipeline.Pipeline] itself: construction from
  command tokens, per-line evaluation and memory accounting.
"""

from __future__ import annotations

from rangler.pipeline.pipeline import Pipeline
from rangler.pipeline.steps import Step, StepKind

__all__ = ["Pipeline", "Step", "StepKind"]
