"""
The functions for the constant-pushing opcodes
    0x00: OP_0, OP_FALSE
    0x4f: OP_1NEGATE
    0x51 -- 0x60: OP_1 (OP_TRUE) .. OP_16
"""
from typing import Callable

from stacklab.core import SCRIPT
from stacklab.script.stack import LabStack

__all__ = ["op_false", "op_true", "op_1negate", "op_pushnum"]


def op_false(main_stack: LabStack):
    """
    OP_0, OP_FALSE | 0x00
    Push 0 to the stack
    """
    main_stack.push(SCRIPT.FALSE)


def op_true(main_stack: LabStack):
    """
    OP_1, OP_TRUE | 0x51
    Push 1 to the stack
    """
    main_stack.push(SCRIPT.TRUE)


def op_1negate(main_stack: LabStack):
    """
    OP_1NEGATE | 0x4f
    Push -1 to the stack
    """
    main_stack.push(-1)


def op_pushnum(n: int) -> Callable[[LabStack], None]:
    """
    Returns the handler for OP_n, 1 <= n <= 16
    """
    if not SCRIPT.MIN_PUSHNUM <= n <= SCRIPT.MAX_PUSHNUM:
        raise ValueError(f"OP_n only exists for {SCRIPT.MIN_PUSHNUM} <= n <= {SCRIPT.MAX_PUSHNUM}")

    def _push(main_stack: LabStack):
        main_stack.push(n)

    _push.__name__ = f"op_{n}"
    return _push
