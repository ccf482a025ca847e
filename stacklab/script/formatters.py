"""
Display helpers for stack items: the script builder, the stack view and the execution log all render items through
these functions.
"""
import re
from typing import Optional

from stacklab.core import DISPLAY, SCRIPT

__all__ = ["bytes_to_hex", "format_stack_item", "format_stack_for_log", "get_item_type", "item_count",
           "parse_stack_item"]

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_HEX = re.compile(r"0[xX][0-9a-fA-F]+")


def bytes_to_hex(data: bytes, max_bytes: Optional[int] = None) -> str:
    """
    Hex string without the 0x prefix. If max_bytes is given only the first max_bytes are converted.
    """
    if max_bytes is not None and len(data) > max_bytes:
        data = data[:max_bytes]
    return data.hex()


def format_stack_item(item, max_hex_length: int = DISPLAY.MAX_HEX_LENGTH, hex_show_tail: bool = False,
                      bytes_max_bytes: int = DISPLAY.BYTES_MAX) -> str:
    """
    Format a single stack item for display.

    Args:
        item: the StackItem
        max_hex_length: 0x strings longer than this are truncated
        hex_show_tail: when truncating, keep the last characters as well as the first
        bytes_max_bytes: number of bytes shown for a bytes item before it is cut off with "..."
    """
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, int):
        if item.bit_length() > DISPLAY.MAX_INT_BITS:
            sign = "-" if item < 0 else ""
            return sign + format_stack_item(hex(abs(item)), max_hex_length, hex_show_tail)
        return str(item)
    if isinstance(item, str):
        if item.lower().startswith(SCRIPT.HEX_PREFIX) and len(item) > max_hex_length:
            head = item[:DISPLAY.HEX_HEAD]
            return f"{head}...{item[-DISPLAY.HEX_TAIL:]}" if hex_show_tail else f"{head}..."
        return item
    if isinstance(item, (bytes, bytearray)):
        suffix = "..." if len(item) > bytes_max_bytes else ""
        return f"{SCRIPT.HEX_PREFIX}{bytes_to_hex(bytes(item), bytes_max_bytes)}{suffix}"
    return str(item)


def format_stack_for_log(stack: list) -> str:
    """
    Format a whole stack (bottom first) for the execution log. Strings are quoted.
    """
    if not stack:
        return "[]"
    rendered = [
        f'"{item}"' if isinstance(item, str)
        else format_stack_item(item, max_hex_length=DISPLAY.LOG_MAX_HEX_LENGTH, bytes_max_bytes=DISPLAY.LOG_BYTES_MAX)
        for item in stack
    ]
    return f"[{', '.join(rendered)}]"


def get_item_type(item) -> str:
    if isinstance(item, bool):
        return "boolean"
    if isinstance(item, int):
        return "number"
    if isinstance(item, str):
        return "hex" if item.lower().startswith(SCRIPT.HEX_PREFIX) else "string"
    if isinstance(item, (bytes, bytearray)):
        return "bytes"
    return "unknown"


def item_count(count: int) -> str:
    return f"{count} item{'' if count == 1 else 's'}"


def parse_stack_item(text: str) -> int | str | None:
    """
    Parse user input into a StackItem.
        - Empty or whitespace-only: None
        - Decimal or 0x hex integer: int (over-long decimal strings stay strings)
        - Anything else: the trimmed string
    """
    trimmed = text.strip()
    if trimmed == "":
        return None
    if _DECIMAL.fullmatch(trimmed):
        try:
            return int(trimmed)
        except ValueError:
            # Past the int conversion limit: kept as text
            return trimmed
    if _HEX.fullmatch(trimmed):
        return int(trimmed, 16)
    return trimmed
