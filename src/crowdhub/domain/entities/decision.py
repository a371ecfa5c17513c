"""Permission decision and its diagnostic trace."""

from dataclasses import dataclass, field

from crowdhub.domain.value_objects import ResolutionStep, TraceResult


@dataclass(frozen=True)
class TraceStep:
    """One step of a resolution trace."""

    step: ResolutionStep
    result: TraceResult
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"step": self.step.value, "result": self.result.value, "reason": self.reason}


@dataclass
class Decision:
    """Outcome of a permission check."""

    allowed: bool
    trace: list[TraceStep] = field(default_factory=list)

    def to_dict(self, include_trace: bool = False) -> dict:
        data: dict = {"allowed": self.allowed}
        if include_trace:
            data["trace"] = [s.to_dict() for s in self.trace]
        return data
