"""Permission resolution policy shared by the store-backed resolver and the
in-memory permission context.

Lookup order is exact match, resource wildcard, global wildcard. Across roles
deny beats allow. Anything without a matching rule is denied.
"""

from collections.abc import Iterable

from crowdhub.domain.entities import Decision, TraceStep
from crowdhub.domain.value_objects import (
    WILDCARD,
    PermissionEffect,
    ResolutionStep,
    TraceResult,
)

EXACT = "exact"
RESOURCE_WILDCARD = "resource wildcard"
GLOBAL_WILDCARD = "global wildcard"


def lookup_candidates(resource: str, action: str) -> list[tuple[str, str, str]]:
    """(resource, action, match label) tuples in lookup order, duplicates dropped."""
    candidates = [(resource, action, EXACT)]
    if resource != WILDCARD:
        candidates.append((resource, WILDCARD, RESOURCE_WILDCARD))
    candidates.append((WILDCARD, WILDCARD, GLOBAL_WILDCARD))
    seen: set[tuple[str, str]] = set()
    result = []
    for res, act, label in candidates:
        if (res, act) in seen:
            continue
        seen.add((res, act))
        result.append((res, act, label))
    return result


def aggregate_role_effects(effects: Iterable[PermissionEffect]) -> PermissionEffect | None:
    """Combine role rules for one permission: any deny wins, else any allow, else None."""
    has_allow = False
    for effect in effects:
        if effect == PermissionEffect.DENY:
            return PermissionEffect.DENY
        if effect == PermissionEffect.ALLOW:
            has_allow = True
    return PermissionEffect.ALLOW if has_allow else None


class TraceRecorder:
    """Collects trace steps when enabled and builds the final decision."""

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled
        self._steps: list[TraceStep] = []

    def record(self, step: ResolutionStep, result: TraceResult, reason: str) -> None:
        if self._enabled:
            self._steps.append(TraceStep(step=step, result=result, reason=reason))

    def allow(self, step: ResolutionStep, reason: str) -> Decision:
        self.record(step, TraceResult.ALLOW, reason)
        return Decision(allowed=True, trace=list(self._steps))

    def deny(self, step: ResolutionStep, reason: str) -> Decision:
        self.record(step, TraceResult.DENY, reason)
        return Decision(allowed=False, trace=list(self._steps))

    def finish(self, step: ResolutionStep, effect: PermissionEffect, reason: str) -> Decision:
        if effect == PermissionEffect.ALLOW:
            return self.allow(step, reason)
        return self.deny(step, reason)
