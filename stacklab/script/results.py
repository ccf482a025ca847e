"""
The records produced by the ScriptEngine: one ExecutionStep per processed instruction and an ExecutionResult per
run. Both hold their own copies of the stack so they can be replayed after the engine has moved on.
"""
import json
from dataclasses import dataclass, field
from typing import Optional

from stacklab.script.stack import StackItem, jsonable

__all__ = ["ExecutionStep", "ExecutionResult"]


@dataclass(frozen=True)
class ExecutionStep:
    op_code: str
    stack_before: list[StackItem]
    stack_after: list[StackItem]
    success: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        step_dict = {
            "op_code": self.op_code,
            "stack_before": [jsonable(item) for item in self.stack_before],
            "stack_after": [jsonable(item) for item in self.stack_after],
            "success": self.success,
        }
        if self.error is not None:
            step_dict.update({"error": self.error})
        return step_dict


@dataclass(frozen=True)
class ExecutionResult:
    success: bool
    final_stack: list[StackItem]
    steps: list[ExecutionStep] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed_step(self) -> Optional[ExecutionStep]:
        if self.steps and not self.steps[-1].success:
            return self.steps[-1]
        return None

    def to_dict(self) -> dict:
        result_dict = {
            "success": self.success,
            "final_stack": [jsonable(item) for item in self.final_stack],
            "steps": [step.to_dict() for step in self.steps],
        }
        if self.error is not None:
            result_dict.update({"error": self.error})
        return result_dict

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)
