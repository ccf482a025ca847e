"""
The classes for the LabStack and ScriptNum, plus the rules for reading a StackItem as a bool, a number or bytes
"""
import json
import re
from typing import Any

from stacklab.core import DISPLAY, SCRIPT, InsufficientItemsError, ScriptNumError, StackItemError

__all__ = ["ScriptNum", "LabStack", "StackItem", "is_truthy", "to_number", "to_bytes", "items_equal",
           "normalize_item", "jsonable"]

_HEX_NUMBER = re.compile(r"0[xX][0-9a-fA-F]+")
_HEX_BYTES = re.compile(r"0[xX](?:[0-9a-fA-F]{2})*")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


class ScriptNum:
    """
    Signed-magnitude integers in Bitcoin Script byte encoding.

    Bitcoin script uses a special encoding for integers:
    - Little-endian representation
    - Negative numbers set the sign bit (0x80) in the last byte
    - Zero is represented as an empty byte array

    The 4-byte consensus limit is not applied here: numbers may grow as large as Python allows.
    """
    __slots__ = ("_value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ScriptNumError(f"ScriptNum value must be an integer, not {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def from_bytes(cls, data: bytes) -> "ScriptNum":
        """
        Parse Bitcoin Script number (little-endian, sign bit in MSB of last byte).
        """
        if data == b'':
            return cls(0)

        num = int.from_bytes(data, "little", signed=False)

        # If the sign bit is set in the last byte, interpret as a negative number.
        if data[-1] & SCRIPT.SIGN_BIT:
            num &= ~(1 << (8 * len(data) - 1))  # Clear sign bit
            num = -num

        return cls(num)

    def to_bytes(self) -> bytes:
        n = self._value
        if n == 0:
            return b""

        neg = n < 0
        a = -n if neg else n
        mag = a.to_bytes((a.bit_length() + 7) // 8, "little")

        # The most significant bit of the most significant byte holds the sign encoding
        if mag[-1] & SCRIPT.SIGN_BIT:
            return mag + (b"\x80" if neg else b"\x00")

        if neg:
            return mag[:-1] + bytes([mag[-1] | SCRIPT.SIGN_BIT])

        return mag

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScriptNum):
            return self._value == other.value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self):
        return f"ScriptNum({self._value})"


# --- STACK ITEMS --- #
StackItem = int | bool | str | bytes


def normalize_item(value: Any) -> StackItem:
    """
    Returns the value as a StackItem. Bytes-like objects are frozen to bytes so that snapshots can't be mutated
    through an alias.
    """
    if isinstance(value, (bool, int, str, bytes)):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise StackItemError(f"Cannot push value of type {type(value).__name__} to the stack")


def is_truthy(item: StackItem) -> bool:
    """
    0, False, "" and b"" are false. Everything else is true.
    """
    if isinstance(item, bool):
        return item
    if isinstance(item, int):
        return item != 0
    return len(item) > 0


def to_number(item: StackItem) -> int:
    if isinstance(item, bool):
        return int(item)
    if isinstance(item, int):
        return item
    if isinstance(item, bytes):
        return ScriptNum.from_bytes(item).value
    if isinstance(item, str):
        text = item.strip()
        try:
            if _HEX_NUMBER.fullmatch(text):
                return int(text[2:], 16)
            if _DECIMAL.fullmatch(text):
                return int(text)
        except ValueError as e:
            # Decimal strings longer than the int conversion limit
            raise ScriptNumError(f"Cannot convert '{text[:DISPLAY.HEX_HEAD]}...' to a number") from e
    raise ScriptNumError(f"Cannot convert {item!r} to a number")


def to_bytes(item: StackItem) -> bytes:
    if isinstance(item, bytes):
        return item
    if isinstance(item, bool):
        return b'\x01' if item else b''
    if isinstance(item, int):
        return ScriptNum(item).to_bytes()
    if _HEX_BYTES.fullmatch(item):
        return bytes.fromhex(item[2:])
    return item.encode("utf-8", errors="surrogatepass")


def _is_numeric(item: StackItem) -> bool:
    return isinstance(item, (bool, int))


def items_equal(a: StackItem, b: StackItem) -> bool:
    """
    Numbers and bools compare by value, everything else compares by its byte encoding
    """
    if _is_numeric(a) and _is_numeric(b):
        return int(a) == int(b)
    return to_bytes(a) == to_bytes(b)


def jsonable(item: StackItem):
    if isinstance(item, bytes):
        return SCRIPT.HEX_PREFIX + item.hex()
    if isinstance(item, int) and not isinstance(item, bool) and item.bit_length() > DISPLAY.MAX_INT_BITS:
        return ("-" if item < 0 else "") + hex(abs(item))
    return item


class LabStack:
    """
    A lightweight stack for the StackLab interpreter. The right-most element of the list is the top of the stack.
    There is no maximum height.
    """

    def __init__(self, items: list = None):
        """
        Given a list, we push the items from left to right, so that the first item ends up at the bottom
        """
        self.stack: list[StackItem] = []
        if items:
            self.pushlist(items)

    # --- Stack Properties --- #
    @property
    def height(self) -> int:
        return len(self.stack)

    @property
    def is_empty(self) -> bool:
        return self.height == 0

    @property
    def top(self):
        if not self.is_empty:
            return self.stack[-1]
        return None

    # --- Internal Validation --- #
    def check_min_height(self, n: int, op_name: str = None):
        if self.height < n:
            raise InsufficientItemsError(required=n, available=self.height, op_name=op_name)

    # --- Stack Ops --- #
    def push(self, item: StackItem):
        self.stack.append(normalize_item(item))

    def pushlist(self, items: list[StackItem]):
        """
        Push items in list order: the last element of the list becomes the top
        """
        for item in items:
            self.push(item)

    def pop(self) -> StackItem:
        self.check_min_height(1)
        return self.stack.pop()

    def popitems(self, n: int) -> list[StackItem]:
        """
        Pop n items from the stack into a list. Leftmost element is the former top
        """
        self.check_min_height(n)
        return [self.stack.pop() for _ in range(n)]

    def peek(self, index: int = 0) -> StackItem:
        """
        Item at the given depth without removing it. 0 is the top
        """
        self.check_min_height(index + 1)
        return self.stack[-1 - index]

    # --- Item Specific Helper Functions --- #
    def pushbool(self, boolean: bool):
        self.push(SCRIPT.TRUE if boolean else SCRIPT.FALSE)

    def popnum(self) -> int:
        return to_number(self.pop())

    def snapshot(self) -> list[StackItem]:
        return list(self.stack)

    def clear(self):
        self.stack.clear()

    # --- Dunder Ops --- #
    def __len__(self) -> int:
        return self.height

    def __repr__(self) -> str:
        return f"LabStack({self.stack})"

    # --- Display --- #
    def to_dict(self) -> dict:
        """
        Depth -> item, where depth 0 is the top
        """
        return {depth: jsonable(item) for depth, item in enumerate(reversed(self.stack))}

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)
