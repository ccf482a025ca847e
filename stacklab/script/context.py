"""
The BranchContext: tracks nested OP_IF / OP_NOTIF / OP_ELSE / OP_ENDIF blocks while a script runs.

Each open conditional is a BranchFrame. A frame opened inside a skipped branch is skipped as a whole, whatever
its own condition, so OP_ELSE can never switch it on.
"""
from dataclasses import dataclass, field

from stacklab.core import ScriptFlowError

__all__ = ["BranchFrame", "BranchContext"]


@dataclass
class BranchFrame:
    condition: bool  # Whether the arm we are currently in was selected
    enclosing_active: bool = True
    else_seen: bool = False

    @property
    def active(self) -> bool:
        return self.enclosing_active and self.condition


@dataclass
class BranchContext:
    frames: list[BranchFrame] = field(default_factory=list)

    @property
    def executing(self) -> bool:
        return not self.frames or self.frames[-1].active

    @property
    def depth(self) -> int:
        return len(self.frames)

    @property
    def is_balanced(self) -> bool:
        return not self.frames

    def open(self, condition: bool):
        self.frames.append(BranchFrame(condition=condition, enclosing_active=self.executing))

    def flip(self):
        if not self.frames:
            raise ScriptFlowError("OP_ELSE without matching OP_IF")
        frame = self.frames[-1]
        if frame.else_seen:
            raise ScriptFlowError("Duplicate OP_ELSE for the same OP_IF")
        frame.condition = not frame.condition
        frame.else_seen = True

    def close(self):
        if not self.frames:
            raise ScriptFlowError("OP_ENDIF without matching OP_IF")
        self.frames.pop()

    def clear(self):
        self.frames.clear()
