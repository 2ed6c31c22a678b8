"""Advisory reports for degenerate primitives.

The kernel never raises on a zero-length line, ray or segment. It falls back
to a defined value and hands a :class:`DegenerateInput` to a sink. The default
sink writes a warning through :mod:`logging`; hosts can pass their own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Tuple

from .vector import Vector2

logger = logging.getLogger(__name__)

DegenerateKind = Literal["line", "ray", "segment"]


@dataclass(frozen=True)
class DegenerateInput:
    kind: DegenerateKind
    message: str
    points: Tuple[Vector2, ...] = ()

    def __str__(self) -> str:
        return self.message

    @classmethod
    def for_direction(cls, kind: DegenerateKind, origin: Vector2, direction: Vector2) -> "DegenerateInput":
        message = f"Invalid {kind} definition. origin: {origin} direction: {direction}"
        return cls(kind, message, (origin, direction))

    @classmethod
    def for_segment(cls, a: Vector2, b: Vector2) -> "DegenerateInput":
        return cls("segment", f"Invalid segment definition. a: {a} b: {b}", (a, b))


DiagnosticSink = Callable[[DegenerateInput], None]


def log_degenerate_input(diagnostic: DegenerateInput) -> None:
    logger.warning("%s", diagnostic.message)


def report_degenerate(diagnostic: DegenerateInput, sink: Optional[DiagnosticSink] = None) -> None:
    if sink is None:
        sink = log_degenerate_input
    sink(diagnostic)


@dataclass
class DiagnosticCollector:
    """Sink that keeps every report it receives."""

    reports: List[DegenerateInput] = field(default_factory=list)

    def __call__(self, diagnostic: DegenerateInput) -> None:
        self.reports.append(diagnostic)

    def __len__(self) -> int:
        return len(self.reports)

    def kinds(self) -> List[str]:
        return [report.kind for report in self.reports]


__all__ = [
    "DegenerateInput",
    "DegenerateKind",
    "DiagnosticCollector",
    "DiagnosticSink",
    "log_degenerate_input",
    "report_degenerate",
]
