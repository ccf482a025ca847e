"""
The custom exceptions used throughout StackLab
"""
__all__ = ["StackLabError", "StackItemError", "ScriptEngineError", "InsufficientItemsError", "ScriptNumError",
           "ScriptVerifyError", "ScriptReturnError", "ScriptFlowError", "OpCodeError", "ChallengeError"]


class StackLabError(Exception):
    """
    Parent class for StackLab errors
    """
    pass


class StackItemError(StackLabError):
    """
    For values that cannot live on the stack (floats, None, containers, ...)
    """
    pass


class ScriptEngineError(StackLabError):
    """
    For use in the script engine. Every subclass is caught per step and recorded in the trace.
    """
    pass


class InsufficientItemsError(ScriptEngineError):
    """
    Raised when an operation requires more elements than are available on the stack
    """

    def __init__(self, required: int, available: int, op_name: str = None):
        self.required = required
        self.available = available
        self.op_name = op_name
        plural = "item" if required == 1 else "items"
        who = op_name if op_name else "Operation"
        super().__init__(f"Stack underflow: {who} requires {required} {plural}, found {available}")


class ScriptNumError(ScriptEngineError):
    """
    For stack items that cannot be read as a number
    """
    pass


class ScriptVerifyError(ScriptEngineError):
    """
    For OP_VERIFY and the *VERIFY family when the top item is false
    """
    pass


class ScriptReturnError(ScriptEngineError):
    """
    For OP_RETURN
    """
    pass


class ScriptFlowError(ScriptEngineError):
    """
    For unbalanced OP_IF / OP_ELSE / OP_ENDIF
    """
    pass


class OpCodeError(ScriptEngineError):
    """
    For unknown or disabled opcode names
    """
    pass


class ChallengeError(StackLabError):
    """
    For lookups of challenges or templates that don't exist
    """
    pass
