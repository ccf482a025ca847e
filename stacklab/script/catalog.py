"""
The opcode catalog: name, hex code, category, description and enabled flag for every opcode the lab knows about.

The catalog is built once at import and is read-only afterwards. It gates what the authoring UI offers; the
interpreter's dispatch table decides what actually runs.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

__all__ = ["OpCode", "OP_CATEGORIES", "OPCODE_CATALOG", "get_opcode", "is_enabled", "opcodes_by_category"]

OP_CATEGORIES = ("Push", "Stack", "Arithmetic", "Comparison", "Cryptographic", "Control Flow", "Disabled")


@dataclass(frozen=True)
class OpCode:
    name: str
    hex: str
    category: str
    description: str
    enabled: bool = True


def _push_numbers() -> list[OpCode]:
    # OP_1 .. OP_16 | 0x51 .. 0x60
    return [OpCode(f"OP_{n}", f"0x{0x50 + n:02x}", "Push", f"Push {n}") for n in range(1, 17)]


_ENTRIES = [
    # Push
    OpCode("OP_0", "0x00", "Push", "Push empty array (false)"),
    OpCode("OP_FALSE", "0x00", "Push", "Alias of OP_0"),
    OpCode("OP_1NEGATE", "0x4f", "Push", "Push -1"),
    OpCode("OP_TRUE", "0x51", "Push", "Alias of OP_1"),
    *_push_numbers(),

    # Stack
    OpCode("OP_TOALTSTACK", "0x6b", "Stack", "Move top item to the alt stack"),
    OpCode("OP_FROMALTSTACK", "0x6c", "Stack", "Move top alt stack item to the main stack"),
    OpCode("OP_2DROP", "0x6d", "Stack", "Remove top two items"),
    OpCode("OP_2DUP", "0x6e", "Stack", "Duplicate top two items"),
    OpCode("OP_3DUP", "0x6f", "Stack", "Duplicate top three items"),
    OpCode("OP_2OVER", "0x70", "Stack", "Copy the 3rd and 4th items to the top"),
    OpCode("OP_2SWAP", "0x72", "Stack", "Swap the top two pairs of items"),
    OpCode("OP_IFDUP", "0x73", "Stack", "Duplicate top item if it is true"),
    OpCode("OP_DEPTH", "0x74", "Stack", "Push the number of stack items"),
    OpCode("OP_DROP", "0x75", "Stack", "Remove top stack item"),
    OpCode("OP_DUP", "0x76", "Stack", "Duplicate top stack item"),
    OpCode("OP_NIP", "0x77", "Stack", "Remove second-to-top item"),
    OpCode("OP_OVER", "0x78", "Stack", "Copy second-to-top to top"),
    OpCode("OP_ROT", "0x7b", "Stack", "Rotate top three items"),
    OpCode("OP_SWAP", "0x7c", "Stack", "Swap top two items"),
    OpCode("OP_TUCK", "0x7d", "Stack", "Copy top below second"),
    OpCode("OP_SIZE", "0x82", "Stack", "Push the byte length of the top item"),

    # Arithmetic
    OpCode("OP_1ADD", "0x8b", "Arithmetic", "a + 1"),
    OpCode("OP_1SUB", "0x8c", "Arithmetic", "a - 1"),
    OpCode("OP_NEGATE", "0x8f", "Arithmetic", "-a"),
    OpCode("OP_ABS", "0x90", "Arithmetic", "abs(a)"),
    OpCode("OP_NOT", "0x91", "Arithmetic", "!a (logical)"),
    OpCode("OP_0NOTEQUAL", "0x92", "Arithmetic", "a != 0"),
    OpCode("OP_ADD", "0x93", "Arithmetic", "a + b"),
    OpCode("OP_SUB", "0x94", "Arithmetic", "a - b"),
    OpCode("OP_BOOLAND", "0x9a", "Arithmetic", "a and b both non-zero"),
    OpCode("OP_BOOLOR", "0x9b", "Arithmetic", "a or b non-zero"),

    # Comparison
    OpCode("OP_EQUAL", "0x87", "Comparison", "Returns 1 if equal, else 0"),
    OpCode("OP_EQUALVERIFY", "0x88", "Comparison", "OP_EQUAL + OP_VERIFY"),
    OpCode("OP_NUMEQUAL", "0x9c", "Comparison", "a == b (numeric)"),
    OpCode("OP_NUMEQUALVERIFY", "0x9d", "Comparison", "OP_NUMEQUAL + OP_VERIFY"),
    OpCode("OP_NUMNOTEQUAL", "0x9e", "Comparison", "a != b (numeric)"),
    OpCode("OP_LESSTHAN", "0x9f", "Comparison", "a < b"),
    OpCode("OP_GREATERTHAN", "0xa0", "Comparison", "a > b"),
    OpCode("OP_LESSTHANOREQUAL", "0xa1", "Comparison", "a <= b"),
    OpCode("OP_GREATERTHANOREQUAL", "0xa2", "Comparison", "a >= b"),
    OpCode("OP_MIN", "0xa3", "Comparison", "min(a, b)"),
    OpCode("OP_MAX", "0xa4", "Comparison", "max(a, b)"),
    OpCode("OP_WITHIN", "0xa5", "Comparison", "min <= x < max"),

    # Cryptographic
    OpCode("OP_RIPEMD160", "0xa6", "Cryptographic", "RIPEMD-160 hash"),
    OpCode("OP_SHA1", "0xa7", "Cryptographic", "SHA-1 hash"),
    OpCode("OP_SHA256", "0xa8", "Cryptographic", "SHA-256 hash"),
    OpCode("OP_HASH160", "0xa9", "Cryptographic", "SHA256 + RIPEMD160"),
    OpCode("OP_HASH256", "0xaa", "Cryptographic", "Double SHA-256"),
    OpCode("OP_CHECKSIG", "0xac", "Cryptographic", "Verify ECDSA signature (simulated)"),
    OpCode("OP_CHECKSIGVERIFY", "0xad", "Cryptographic", "OP_CHECKSIG + OP_VERIFY"),

    # Control Flow
    OpCode("OP_NOP", "0x61", "Control Flow", "Does nothing"),
    OpCode("OP_IF", "0x63", "Control Flow", "Execute if top is non-zero"),
    OpCode("OP_NOTIF", "0x64", "Control Flow", "Execute if top is zero"),
    OpCode("OP_ELSE", "0x67", "Control Flow", "Else branch"),
    OpCode("OP_ENDIF", "0x68", "Control Flow", "End conditional"),
    OpCode("OP_VERIFY", "0x69", "Control Flow", "Fail if top is false"),
    OpCode("OP_RETURN", "0x6a", "Control Flow", "Mark output unspendable"),

    # Disabled in Bitcoin since 2010
    OpCode("OP_CAT", "0x7e", "Disabled", "Concatenate two strings", enabled=False),
    OpCode("OP_SUBSTR", "0x7f", "Disabled", "Return a section of a string", enabled=False),
    OpCode("OP_LEFT", "0x80", "Disabled", "Keep characters left of a point", enabled=False),
    OpCode("OP_RIGHT", "0x81", "Disabled", "Keep characters right of a point", enabled=False),
    OpCode("OP_INVERT", "0x83", "Disabled", "Flip every bit", enabled=False),
    OpCode("OP_AND", "0x84", "Disabled", "Bitwise and", enabled=False),
    OpCode("OP_OR", "0x85", "Disabled", "Bitwise or", enabled=False),
    OpCode("OP_XOR", "0x86", "Disabled", "Bitwise exclusive or", enabled=False),
    OpCode("OP_2MUL", "0x8d", "Disabled", "a * 2", enabled=False),
    OpCode("OP_2DIV", "0x8e", "Disabled", "a / 2", enabled=False),
    OpCode("OP_MUL", "0x95", "Disabled", "a * b", enabled=False),
    OpCode("OP_DIV", "0x96", "Disabled", "a / b", enabled=False),
    OpCode("OP_MOD", "0x97", "Disabled", "a % b", enabled=False),
    OpCode("OP_LSHIFT", "0x98", "Disabled", "Shift a left by b bits", enabled=False),
    OpCode("OP_RSHIFT", "0x99", "Disabled", "Shift a right by b bits", enabled=False),
]

OPCODE_CATALOG = MappingProxyType({entry.name: entry for entry in _ENTRIES})


def get_opcode(name: str) -> Optional[OpCode]:
    return OPCODE_CATALOG.get(name.upper())


def is_enabled(name: str) -> bool:
    entry = get_opcode(name)
    return entry is not None and entry.enabled


def opcodes_by_category(category: str, enabled_only: bool = False) -> list[OpCode]:
    """
    Catalog entries for the given category, in catalog order
    """
    return [op for op in OPCODE_CATALOG.values()
            if op.category == category and (op.enabled or not enabled_only)]
