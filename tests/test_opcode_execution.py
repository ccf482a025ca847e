"""
We test that all opcodes perform what's expected
"""
import hashlib

import pytest

from stacklab.script import OPCODE_MAP, LabStack
from stacklab.script.opcodes import op_pushnum, op_toaltstack, op_fromaltstack


def _final(engine, *program):
    return engine.execute(list(program)).final_stack


# --- Push --- #

@pytest.mark.parametrize("opcode, expected", [
    ("OP_0", 0),
    ("OP_FALSE", 0),
    ("OP_1NEGATE", -1),
    ("OP_1", 1),
    ("OP_TRUE", 1),
    ("OP_2", 2),
    ("OP_9", 9),
    ("OP_16", 16),
])
def test_push_opcodes(engine, opcode, expected):
    assert _final(engine, opcode) == [expected]


def test_op_pushnum_range():
    with pytest.raises(ValueError):
        op_pushnum(17)
    with pytest.raises(ValueError):
        op_pushnum(0)
    assert op_pushnum(5).__name__ == "op_5"


def test_op_nop(engine):
    assert _final(engine, 1, "OP_NOP") == [1]


# --- Stack ops --- #

@pytest.mark.parametrize("program, expected", [
    ([1, 2, 3, "OP_2DROP"], [1]),
    ([1, 2, "OP_2DUP"], [1, 2, 1, 2]),
    ([1, 2, 3, "OP_3DUP"], [1, 2, 3, 1, 2, 3]),
    ([1, 2, 3, 4, "OP_2OVER"], [1, 2, 3, 4, 1, 2]),
    ([1, 2, 3, 4, "OP_2SWAP"], [3, 4, 1, 2]),
    ([5, "OP_IFDUP"], [5, 5]),
    ([0, "OP_IFDUP"], [0]),
    ([1, 2, "OP_DEPTH"], [1, 2, 2]),
    (["OP_DEPTH"], [0]),
    ([1, 2, "OP_DROP"], [1]),
    ([7, "OP_DUP"], [7, 7]),
    ([1, 2, "OP_NIP"], [2]),
    ([1, 2, "OP_OVER"], [1, 2, 1]),
    ([1, 2, 3, "OP_ROT"], [2, 3, 1]),
    ([1, 2, "OP_SWAP"], [2, 1]),
    ([1, 2, "OP_TUCK"], [2, 1, 2]),
    (["abc", "OP_SIZE"], ["abc", 3]),
    ([0, "OP_SIZE"], [0, 0]),
    ([255, "OP_SIZE"], [255, 2]),
    (["0xdeadbeef", "OP_SIZE"], ["0xdeadbeef", 4]),
])
def test_stack_ops(engine, program, expected):
    assert _final(engine, *program) == expected


@pytest.mark.parametrize("opcode, required", [
    ("OP_2DROP", 2),
    ("OP_2DUP", 2),
    ("OP_3DUP", 3),
    ("OP_2OVER", 4),
    ("OP_2SWAP", 4),
    ("OP_ROT", 3),
    ("OP_TUCK", 2),
    ("OP_SIZE", 1),
    ("OP_WITHIN", 3),
])
def test_stack_ops_underflow(engine, opcode, required):
    result = engine.execute([opcode])
    assert not result.success
    plural = "item" if required == 1 else "items"
    assert result.error == f"Stack underflow: {opcode} requires {required} {plural}, found 0"


def test_op_toaltstack(engine):
    engine.execute([1, 2, "OP_TOALTSTACK"])
    assert engine.alt_stack.snapshot() == [2]
    assert engine.get_stack() == [1]


def test_op_fromaltstack(engine):
    assert _final(engine, 1, "OP_TOALTSTACK", "OP_FROMALTSTACK") == [1]


def test_altstack_handlers(alt_stack):
    main_stack = LabStack([1, 2])
    op_toaltstack(main_stack, alt_stack)
    op_toaltstack(main_stack, alt_stack)
    assert alt_stack.snapshot() == [2, 1]
    op_fromaltstack(main_stack, alt_stack)
    assert main_stack.snapshot() == [1]


# --- Arithmetic and comparison --- #

@pytest.mark.parametrize("program, expected", [
    ([5, "OP_1ADD"], 6),
    ([5, "OP_1SUB"], 4),
    ([5, "OP_NEGATE"], -5),
    ([-5, "OP_ABS"], 5),
    ([0, "OP_NOT"], 1),
    ([3, "OP_NOT"], 0),
    ([3, "OP_0NOTEQUAL"], 1),
    ([0, "OP_0NOTEQUAL"], 0),
    ([3, 5, "OP_ADD"], 8),
    ([10, 3, "OP_SUB"], 7),
    ([3, 10, "OP_SUB"], -7),
    ([1, 0, "OP_BOOLAND"], 0),
    ([2, 3, "OP_BOOLAND"], 1),
    ([1, 0, "OP_BOOLOR"], 1),
    ([0, 0, "OP_BOOLOR"], 0),
    ([3, 3, "OP_NUMEQUAL"], 1),
    ([3, 4, "OP_NUMNOTEQUAL"], 1),
    ([3, 7, "OP_LESSTHAN"], 1),
    ([7, 3, "OP_LESSTHAN"], 0),
    ([3, 7, "OP_GREATERTHAN"], 0),
    ([3, 3, "OP_LESSTHANOREQUAL"], 1),
    ([2, 3, "OP_GREATERTHANOREQUAL"], 0),
    ([10, 5, "OP_MIN"], 5),
    ([3, 9, "OP_MAX"], 9),
    ([5, 1, 10, "OP_WITHIN"], 1),
    ([1, 1, 10, "OP_WITHIN"], 1),
    ([10, 1, 10, "OP_WITHIN"], 0),
])
def test_numeric_ops(engine, program, expected):
    assert _final(engine, *program) == [expected]


@pytest.mark.parametrize("program, expected", [
    (["10", 5, "OP_ADD"], 15),
    (["0x10", 1, "OP_ADD"], 17),
    ([b"\x81", "OP_1ADD"], 0),
    ([b"", "OP_1ADD"], 1),
    ([True, True, "OP_ADD"], 2),
])
def test_numeric_conversion(engine, program, expected):
    assert _final(engine, *program) == [expected]


def test_non_numeric_operand_fails(engine):
    result = engine.execute(["hello", 1, "OP_ADD"])
    assert not result.success
    assert result.error == "Cannot convert 'hello' to a number"


def test_overlong_decimal_string_fails(engine):
    result = engine.execute(["1" * 5000, "OP_1ADD"])
    assert not result.success
    assert result.steps[-1].op_code == "OP_1ADD"
    assert result.error == "Cannot convert '1111111111...' to a number"


def test_large_numbers_do_not_overflow(engine):
    big = 2 ** 40
    assert _final(engine, big, big, "OP_ADD") == [2 ** 41]


@pytest.mark.parametrize("program, expected", [
    (["abc", "abc", "OP_EQUAL"], 1),
    (["abc", "abd", "OP_EQUAL"], 0),
    ([1, "0x01", "OP_EQUAL"], 1),
    ([True, 1, "OP_EQUAL"], 1),
    ([b"\x05", 5, "OP_EQUAL"], 1),
    ([0, b"", "OP_EQUAL"], 1),
])
def test_op_equal(engine, program, expected):
    assert _final(engine, *program) == [expected]


# --- Verify family --- #

def test_op_verify(engine):
    result = engine.execute([1, "OP_VERIFY", 1])
    assert result.success
    assert result.steps[1].stack_after == []


@pytest.mark.parametrize("program, error", [
    ([0, "OP_VERIFY"], "OP_VERIFY failed: top stack item is false"),
    ([5, 6, "OP_EQUALVERIFY"], "OP_EQUALVERIFY failed: top stack item is false"),
    ([5, 6, "OP_NUMEQUALVERIFY"], "OP_NUMEQUALVERIFY failed: top stack item is false"),
    ([1, "OP_RETURN"], "OP_RETURN marks script as invalid"),
])
def test_verify_failures(engine, program, error):
    result = engine.execute(program)
    assert not result.success
    assert result.error == error


def test_op_equalverify_passes(engine):
    assert engine.validate_script([5, 5, "OP_EQUALVERIFY", 1])
    assert _final(engine, 5, 5, "OP_EQUALVERIFY") == []


def test_op_numequalverify_passes(engine):
    assert engine.validate_script(["3", 3, "OP_NUMEQUALVERIFY", 1])


# --- Crypto --- #

@pytest.mark.parametrize("opcode, data, expected_hex", [
    ("OP_SHA256", "abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    ("OP_SHA1", "abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
    ("OP_RIPEMD160", b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
    ("OP_HASH160", b"", "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"),
    ("OP_HASH256", b"", "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"),
    ("OP_SHA256", 0, "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
])
def test_hash_ops(engine, opcode, data, expected_hex):
    assert _final(engine, data, opcode) == [bytes.fromhex(expected_hex)]


def test_hash_of_hex_string_hashes_the_bytes(engine):
    expected = hashlib.sha256(bytes.fromhex("deadbeef")).digest()
    assert _final(engine, "0xdeadbeef", "OP_SHA256") == [expected]


def test_hash_of_lone_surrogate(engine):
    expected = hashlib.sha256("\ud800".encode("utf-8", "surrogatepass")).digest()
    assert _final(engine, "\ud800", "OP_SHA256") == [expected]


def test_op_checksig_is_simulated(engine):
    result = engine.execute(["sig", "pubkey", "OP_CHECKSIG"])
    assert result.final_stack == [1]
    assert result.success


def test_op_checksig_with_huge_int_operands(engine):
    assert _final(engine, 10 ** 5000, 10 ** 5000, "OP_CHECKSIG") == [1]


def test_op_checksigverify(engine):
    assert _final(engine, "sig", "pubkey", "OP_CHECKSIGVERIFY", 1) == [1]


# --- Dispatch table --- #

def test_dispatch_table_is_read_only():
    with pytest.raises(TypeError):
        OPCODE_MAP["OP_NEW"] = OPCODE_MAP["OP_NOP"]
