"""Plan execution errors. Every kind carries the failing step and its cause."""

from __future__ import annotations


class PlanError(Exception):
    kind = "plan_error"

    def __init__(self, step: int, cause: str) -> None:
        super().__init__(f"Step {step} failed: {cause}")
        self.step = step
        self.cause = cause

    def to_dict(self) -> dict:
        return {"step": self.step, "kind": self.kind, "message": str(self), "fieldPath": []}


class UnknownOperationError(PlanError):
    kind = "unknown_operation"

    def __init__(self, step: int, tool: str) -> None:
        super().__init__(step, f"Unknown tool: {tool}")
        self.tool = tool


class UnresolvedReferenceError(PlanError):
    kind = "unresolved_reference"

    def __init__(self, step: int, token: str, reason: str = "step not yet executed") -> None:
        super().__init__(step, f"Cannot reference {token} - {reason}")
        self.token = token


class SchemaViolationError(PlanError):
    kind = "schema_violation"

    def __init__(self, step: int, problems: list[tuple[str, str]]) -> None:
        detail = "; ".join(f"{path}: {msg}" if path else msg for path, msg in problems)
        super().__init__(step, f"Invalid arguments: {detail}")
        self.problems = problems

    @property
    def field_paths(self) -> list[str]:
        return [path for path, _ in self.problems]

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["fieldPath"] = self.field_paths
        return data


class ActionFailedError(PlanError):
    kind = "action_failed"
