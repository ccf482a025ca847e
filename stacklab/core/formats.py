"""
The StackLab standard formats
"""
from typing import Final

__all__ = ["SCRIPT", "DISPLAY", "LOGGING"]


class SCRIPT:
    """
    Constants in use in the Script
    """
    OP_PREFIX: Final[str] = "OP_"
    HEX_PREFIX: Final[str] = "0x"
    MIN_PUSHNUM: Final[int] = 1  # OP_1
    MAX_PUSHNUM: Final[int] = 16  # OP_16
    TRUE: Final[int] = 1
    FALSE: Final[int] = 0
    SIGN_BIT: Final[int] = 0x80


class DISPLAY:
    """
    Truncation limits used when stack items are rendered for the UI and the execution log
    """
    MAX_HEX_LENGTH: Final[int] = 20
    HEX_HEAD: Final[int] = 10
    HEX_TAIL: Final[int] = 8
    BYTES_MAX: Final[int] = 8
    LOG_MAX_HEX_LENGTH: Final[int] = 80
    LOG_BYTES_MAX: Final[int] = 16
    MAX_INT_BITS: Final[int] = 256  # Larger ints are shown in hex


class LOGGING:
    DEFAULT_LEVEL: Final[str] = "INFO"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
