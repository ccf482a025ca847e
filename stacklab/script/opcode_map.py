"""
Opcode mapping - maps opcode names to their handler and the number of main stack items the handler needs.

Flow control (OP_IF, OP_NOTIF, OP_ELSE, OP_ENDIF) is handled by the ScriptEngine and only appears here with a
None handler so that the arity check and the name lookup stay uniform.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Optional

from stacklab.core import SCRIPT
from stacklab.script.opcodes import *

__all__ = ["OpHandler", "OPCODE_MAP", "FLOW_CONTROL", "ALWAYS_EXECUTE"]

FLOW_CONTROL = frozenset({"OP_IF", "OP_NOTIF", "OP_ELSE", "OP_ENDIF"})
ALWAYS_EXECUTE = frozenset({"OP_RETURN"})  # Run even inside a skipped branch


@dataclass(frozen=True)
class OpHandler:
    func: Optional[Callable]
    min_items: int = 0
    altstack: bool = False  # Handler takes (main_stack, alt_stack)


def _nop(main_stack):
    pass


_MAP = {
    # Bools
    "OP_0": OpHandler(op_false),
    "OP_FALSE": OpHandler(op_false),
    "OP_1NEGATE": OpHandler(op_1negate),
    "OP_1": OpHandler(op_true),
    "OP_TRUE": OpHandler(op_true),
    **{f"OP_{n}": OpHandler(op_pushnum(n)) for n in range(SCRIPT.MIN_PUSHNUM + 1, SCRIPT.MAX_PUSHNUM + 1)},

    # Flow control
    "OP_NOP": OpHandler(_nop),
    "OP_IF": OpHandler(None, 1),
    "OP_NOTIF": OpHandler(None, 1),
    "OP_ELSE": OpHandler(None),
    "OP_ENDIF": OpHandler(None),
    "OP_VERIFY": OpHandler(op_verify, 1),
    "OP_RETURN": OpHandler(op_return),

    # StackOps
    "OP_TOALTSTACK": OpHandler(op_toaltstack, 1, altstack=True),
    "OP_FROMALTSTACK": OpHandler(op_fromaltstack, 0, altstack=True),
    "OP_2DROP": OpHandler(op_2drop, 2),
    "OP_2DUP": OpHandler(op_2dup, 2),
    "OP_3DUP": OpHandler(op_3dup, 3),
    "OP_2OVER": OpHandler(op_2over, 4),
    "OP_2SWAP": OpHandler(op_2swap, 4),
    "OP_IFDUP": OpHandler(op_ifdup, 1),
    "OP_DEPTH": OpHandler(op_depth),
    "OP_DROP": OpHandler(op_drop, 1),
    "OP_DUP": OpHandler(op_dup, 1),
    "OP_NIP": OpHandler(op_nip, 2),
    "OP_OVER": OpHandler(op_over, 2),
    "OP_ROT": OpHandler(op_rot, 3),
    "OP_SWAP": OpHandler(op_swap, 2),
    "OP_TUCK": OpHandler(op_tuck, 2),
    "OP_SIZE": OpHandler(op_size, 1),

    # Numeric
    "OP_EQUAL": OpHandler(op_equal, 2),
    "OP_EQUALVERIFY": OpHandler(op_equalverify, 2),
    "OP_1ADD": OpHandler(op_1add, 1),
    "OP_1SUB": OpHandler(op_1sub, 1),
    "OP_NEGATE": OpHandler(op_negate, 1),
    "OP_ABS": OpHandler(op_abs, 1),
    "OP_NOT": OpHandler(op_not, 1),
    "OP_0NOTEQUAL": OpHandler(op_0notequal, 1),
    "OP_ADD": OpHandler(op_add, 2),
    "OP_SUB": OpHandler(op_sub, 2),
    "OP_BOOLAND": OpHandler(op_booland, 2),
    "OP_BOOLOR": OpHandler(op_boolor, 2),
    "OP_NUMEQUAL": OpHandler(op_numequal, 2),
    "OP_NUMEQUALVERIFY": OpHandler(op_numequalverify, 2),
    "OP_NUMNOTEQUAL": OpHandler(op_numnotequal, 2),
    "OP_LESSTHAN": OpHandler(op_lessthan, 2),
    "OP_GREATERTHAN": OpHandler(op_greaterthan, 2),
    "OP_LESSTHANOREQUAL": OpHandler(op_lessthanorequal, 2),
    "OP_GREATERTHANOREQUAL": OpHandler(op_greaterthanorequal, 2),
    "OP_MIN": OpHandler(op_min, 2),
    "OP_MAX": OpHandler(op_max, 2),
    "OP_WITHIN": OpHandler(op_within, 3),

    # Crypto
    "OP_RIPEMD160": OpHandler(op_ripemd160, 1),
    "OP_SHA1": OpHandler(op_sha1, 1),
    "OP_SHA256": OpHandler(op_sha256, 1),
    "OP_HASH160": OpHandler(op_hash160, 1),
    "OP_HASH256": OpHandler(op_hash256, 1),
    "OP_CHECKSIG": OpHandler(op_checksig, 2),
    "OP_CHECKSIGVERIFY": OpHandler(op_checksigverify, 2),
}

OPCODE_MAP = MappingProxyType(_MAP)
