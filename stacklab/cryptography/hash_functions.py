"""
Shortcuts for the hash functions used by the crypto opcodes. Each function returns the bytes digest
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["hash160", "hash256", "ripemd160", "sha1", "sha256"]


# --- SHA --- #
def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #

def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


# --- BTC HASH FUNCTIONS --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))
