"""
The ScriptEngine class
"""
from typing import Iterable

from stacklab.core import SCRIPT, OpCodeError, ScriptEngineError, StackItemError, get_logger
from stacklab.script.catalog import get_opcode
from stacklab.script.context import BranchContext
from stacklab.script.formatters import format_stack_for_log, format_stack_item
from stacklab.script.opcode_map import ALWAYS_EXECUTE, FLOW_CONTROL, OPCODE_MAP, OpHandler
from stacklab.script.results import ExecutionResult, ExecutionStep
from stacklab.script.stack import LabStack, is_truthy, normalize_item

__all__ = ["ScriptEngine"]

logger = get_logger(__name__)


class ScriptEngine:
    """
    Runs a program (a list of literals and opcode names) against a fresh stack and records every step.

    Script failures never raise: they end the run and are reported in the ExecutionResult. Only values that can't
    be stack items at all raise StackItemError.
    """
    opcode_map = OPCODE_MAP

    def __init__(self):
        self.stack = LabStack()
        self.alt_stack = LabStack()
        self.branches = BranchContext()
        self.steps: list[ExecutionStep] = []

    def reset(self):
        """
        Will remove all elements from main and alt stack, the open branches and the step log.
        """
        self.stack.clear()
        self.alt_stack.clear()
        self.branches.clear()
        self.steps = []

    def get_stack(self) -> list:
        return self.stack.snapshot()

    def get_steps(self) -> list[ExecutionStep]:
        return list(self.steps)

    @staticmethod
    def is_opcode(instruction) -> bool:
        return isinstance(instruction, str) and instruction.upper().startswith(SCRIPT.OP_PREFIX)

    # --- Execution --- #

    def execute(self, program: Iterable) -> ExecutionResult:
        if isinstance(program, (str, bytes)):
            raise StackItemError("Program must be a sequence of instructions")

        self.reset()
        error = None
        for instruction in program:
            step = self._step(instruction)
            self.steps.append(step)
            if not step.success:
                logger.debug(f"Step {len(self.steps) - 1} ({step.op_code}) failed: {step.error}")
                error = step.error
                break

        return self._verdict(error)

    def execute_pair(self, unlocking: Iterable, locking: Iterable) -> ExecutionResult:
        """
        Runs the unlocking script followed by the locking script as a single program
        """
        return self.execute(list(unlocking) + list(locking))

    def validate_script(self, program: Iterable) -> bool:
        return self.execute(program).success

    def _step(self, instruction) -> ExecutionStep:
        stack_before = self.stack.snapshot()

        is_op = self.is_opcode(instruction)
        if is_op:
            op_name = instruction.upper()
        else:
            item = normalize_item(instruction)
            op_name = f"PUSH({format_stack_item(item)})"

        try:
            if is_op:
                self._run_opcode(op_name)
            elif self.branches.executing:
                self.stack.push(item)
        except ScriptEngineError as e:
            return ExecutionStep(op_name, stack_before, self.stack.snapshot(), False, str(e))
        return ExecutionStep(op_name, stack_before, self.stack.snapshot(), True)

    def _run_opcode(self, op_name: str):
        # Unknown and disabled names fail even inside a skipped branch, as does OP_RETURN
        entry = get_opcode(op_name)
        if entry is not None and not entry.enabled:
            raise OpCodeError(f"{op_name} is disabled")
        handler = self.opcode_map.get(op_name)
        if handler is None:
            raise OpCodeError(f"Unknown opcode: {op_name}")

        if op_name in FLOW_CONTROL:
            self._handle_flow_control(op_name, handler)
            return

        if not self.branches.executing and op_name not in ALWAYS_EXECUTE:
            return

        self.stack.check_min_height(handler.min_items, op_name)
        if handler.altstack:
            handler.func(self.stack, self.alt_stack)
        else:
            handler.func(self.stack)

    def _handle_flow_control(self, op_name: str, handler: OpHandler):
        match op_name:
            case "OP_IF" | "OP_NOTIF":
                condition = False
                if self.branches.executing:
                    self.stack.check_min_height(handler.min_items, op_name)
                    condition = is_truthy(self.stack.pop())
                    if op_name == "OP_NOTIF":
                        condition = not condition
                self.branches.open(condition)
            case "OP_ELSE":
                self.branches.flip()
            case "OP_ENDIF":
                self.branches.close()

    def _verdict(self, error: str = None) -> ExecutionResult:
        """
        Called at the end of the run. The script is valid only if no step failed, every OP_IF was closed, the stack
        is not empty and the top item is true.
        """
        if error is None:
            if not self.branches.is_balanced:
                error = "Unbalanced conditional: missing OP_ENDIF"
            elif self.stack.is_empty:
                error = "Script invalid: stack is empty"
            elif not is_truthy(self.stack.top):
                error = "Script invalid: top stack item is false"

        result = ExecutionResult(
            success=error is None,
            final_stack=self.stack.snapshot(),
            steps=list(self.steps),
            error=error
        )
        logger.debug(f"Script {'valid' if result.success else 'invalid'}; "
                     f"final stack {format_stack_for_log(result.final_stack)}")
        return result


# --- TESTING --- #

if __name__ == "__main__":
    engine = ScriptEngine()
    test_result = engine.execute(["OP_1", "OP_IF", 100, "OP_ELSE", 200, "OP_ENDIF"])
    print(f"SCRIPT ENGINE RESULT: {test_result.to_json()}")
