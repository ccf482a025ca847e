"""
Opcodes that can end the script early

    0x69 | OP_VERIFY
    0x6a | OP_RETURN
    0x88 | OP_EQUALVERIFY
    0x9d | OP_NUMEQUALVERIFY
    0xad | OP_CHECKSIGVERIFY

"""
from stacklab.core import ScriptReturnError, ScriptVerifyError
from stacklab.script.opcodes.crypto import op_checksig
from stacklab.script.opcodes.numeric import op_equal, op_numequal
from stacklab.script.stack import LabStack, is_truthy

__all__ = ["op_verify", "op_return", "op_equalverify", "op_numequalverify", "op_checksigverify"]


def _verify(main_stack: LabStack, op_name: str):
    if not is_truthy(main_stack.pop()):
        raise ScriptVerifyError(f"{op_name} failed: top stack item is false")


def op_verify(main_stack: LabStack):
    """
    OP_VERIFY | 0x69
    Pop the stack. Fails the script if the element is false
    """
    _verify(main_stack, "OP_VERIFY")


def op_return(main_stack: LabStack):
    """
    OP_RETURN | 0x6a
    Marks the script as unspendable
    """
    raise ScriptReturnError("OP_RETURN marks script as invalid")


def op_equalverify(main_stack: LabStack):
    """
    OP_EQUALVERIFY | 0x88
    Same as OP_EQUAL, but fails script if not equal
    """
    op_equal(main_stack)
    _verify(main_stack, "OP_EQUALVERIFY")


def op_numequalverify(main_stack: LabStack):
    """
    OP_NUMEQUALVERIFY | 0x9d
    Same as OP_NUMEQUAL, but runs OP_VERIFY afterward.
    """
    op_numequal(main_stack)
    _verify(main_stack, "OP_NUMEQUALVERIFY")


def op_checksigverify(main_stack: LabStack):
    """
    OP_CHECKSIGVERIFY | 0xad
    """
    op_checksig(main_stack)
    _verify(main_stack, "OP_CHECKSIGVERIFY")
