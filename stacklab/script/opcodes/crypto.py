"""
All cryptographic op-codes
    0xa6 | OP_RIPEMD160
    0xa7 | OP_SHA1
    0xa8 | OP_SHA256
    0xa9 | OP_HASH160
    0xaa | OP_HASH256
    0xac | OP_CHECKSIG

Hashes are real and operate on the byte encoding of the popped item. OP_CHECKSIG is simulated: it consumes the
signature and the public key and always pushes 1.
"""
from stacklab.core import SCRIPT, get_logger
from stacklab.cryptography import ripemd160, sha1, sha256, hash160, hash256
from stacklab.script.formatters import format_stack_item
from stacklab.script.stack import LabStack, to_bytes

__all__ = ["op_ripemd160", "op_sha1", "op_sha256", "op_hash160", "op_hash256", "op_checksig"]

logger = get_logger(__name__)


def op_ripemd160(main_stack: LabStack):
    """
    OP_RIPEMD160 | 0xa6
    The input is hashed using RIPEMD-160.
    """
    main_stack.push(ripemd160(to_bytes(main_stack.pop())))


def op_sha1(main_stack: LabStack):
    """
    OP_SHA1 | 0xa7
    The input is hashed using SHA-1.
    """
    main_stack.push(sha1(to_bytes(main_stack.pop())))


def op_sha256(main_stack: LabStack):
    """
    OP_SHA256 | 0xa8
    The input is hashed using SHA-256.
    """
    main_stack.push(sha256(to_bytes(main_stack.pop())))


def op_hash160(main_stack: LabStack):
    """
    OP_HASH160 | 0xa9
    The input is hashed twice: first with SHA-256 and then with RIPEMD-160.
    """
    main_stack.push(hash160(to_bytes(main_stack.pop())))


def op_hash256(main_stack: LabStack):
    """
    OP_HASH256 | 0xaa
    The input is hashed two times with SHA-256.
    """
    main_stack.push(hash256(to_bytes(main_stack.pop())))


def op_checksig(main_stack: LabStack):
    """
    OP_CHECKSIG | 0xac
    Pops pubkey (top) and signature. No verification takes place; 1 is pushed.
    """
    pubkey, sig = main_stack.popitems(2)
    logger.debug(f"Simulated OP_CHECKSIG for sig={format_stack_item(sig)}, pubkey={format_stack_item(pubkey)}")
    main_stack.push(SCRIPT.TRUE)
