"""Demonstration run orchestration.

The CLI delegates all selection and transcript collection to these helpers,
which keeps printing of banners/notes out of the core logic and lets tests
drive the same flow with a recording sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from adapters.console_output import RecordingOutput, TeeOutput, default_output
from core.config import AppSettings
from core.domain.errors import CannotPerformActionError
from core.domain.models import DemoTranscript, RunReport
from core.domain.principle import Principle, Variant
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output
from principles import (
    DependencyInversionDemo,
    InterfaceSegregationDemo,
    LiskovSubstitutionDemo,
    OpenClosedDemo,
    SingleResponsibilityDemo,
)


@dataclass
class RunRequest:
    """Parameters that control a run.

    Empty sequences mean "everything", in canonical order.
    """

    principles: Sequence[Principle] = ()
    variants: Sequence[Variant] = ()


@dataclass
class RunHooks:
    """Optional callbacks for UI layers."""

    section_start: Callable[[Demonstration, Variant], None] | None = None
    violation: Callable[[DemoTranscript], None] | None = None


@dataclass
class RunResult:
    """Output of a runner invocation."""

    report: RunReport


_DEMONSTRATIONS: dict[Principle, Demonstration] = {
    demo.principle: demo
    for demo in (
        SingleResponsibilityDemo(),
        OpenClosedDemo(),
        LiskovSubstitutionDemo(),
        InterfaceSegregationDemo(),
        DependencyInversionDemo(),
    )
}


def list_demonstrations() -> list[Demonstration]:
    """All registered demonstrations, in S-O-L-I-D order."""

    return [_DEMONSTRATIONS[p] for p in Principle]


def get_demonstration(principle: Principle) -> Demonstration:
    return _DEMONSTRATIONS[principle]


def _dedupe(values: Sequence, order: Sequence) -> list:
    wanted = set(values)
    return [v for v in order if v in wanted]


def run_variant(
    demo: Demonstration,
    variant: Variant,
    *,
    settings: AppSettings,
    output: Output | None = None,
) -> DemoTranscript:
    """Run one half of a demonstration and record what it printed.

    `CannotPerformActionError` is the violation being demonstrated: it is
    recorded in the transcript instead of propagating. Anything else
    propagates.
    """

    recorder = RecordingOutput()
    sink: Output = TeeOutput(recorder, output) if output is not None else recorder
    transcript = DemoTranscript(principle=demo.principle, variant=variant)
    try:
        if variant is Variant.VIOLATION:
            demo.run_violation(sink, settings)
        else:
            demo.run_compliant(sink, settings)
    except CannotPerformActionError as exc:
        transcript.status = "raised"
        transcript.error = str(exc)
    transcript.lines = list(recorder.lines)
    return transcript


def run_demonstrations(
    *,
    settings: AppSettings,
    request: RunRequest,
    output: Output | None = None,
    hooks: RunHooks | None = None,
) -> RunResult:
    hooks = hooks or RunHooks()
    output = output or default_output()

    principles = _dedupe(request.principles, list(Principle)) or list(Principle)
    variants = _dedupe(request.variants, list(Variant))
    if not variants:
        variants = [settings.default_variant] if settings.default_variant else list(Variant)

    report = RunReport()
    for principle in principles:
        demo = get_demonstration(principle)
        for variant in variants:
            if hooks.section_start:
                hooks.section_start(demo, variant)
            transcript = run_variant(demo, variant, settings=settings, output=output)
            report.transcripts.append(transcript)
            if transcript.status == "raised" and hooks.violation:
                hooks.violation(transcript)

    return RunResult(report=report)
