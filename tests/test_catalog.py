"""
Tests for the opcode catalog and its agreement with the dispatch table
"""
import pytest

from stacklab.script import OP_CATEGORIES, OPCODE_CATALOG, OPCODE_MAP, get_opcode, is_enabled, opcodes_by_category


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        OPCODE_CATALOG["OP_NEW"] = OPCODE_CATALOG["OP_ADD"]


def test_catalog_entries_are_frozen():
    entry = get_opcode("OP_ADD")
    with pytest.raises(AttributeError):
        entry.enabled = False


def test_every_enabled_opcode_is_dispatched():
    enabled = {name for name, entry in OPCODE_CATALOG.items() if entry.enabled}
    assert enabled == set(OPCODE_MAP)


def test_disabled_opcodes_are_not_dispatched():
    for entry in opcodes_by_category("Disabled"):
        assert not entry.enabled
        assert entry.name not in OPCODE_MAP


def test_every_entry_has_known_category():
    assert all(entry.category in OP_CATEGORIES for entry in OPCODE_CATALOG.values())


@pytest.mark.parametrize("name, hex_code, category", [
    ("OP_DUP", "0x76", "Stack"),
    ("OP_ADD", "0x93", "Arithmetic"),
    ("OP_EQUAL", "0x87", "Comparison"),
    ("OP_HASH160", "0xa9", "Cryptographic"),
    ("OP_IF", "0x63", "Control Flow"),
    ("OP_16", "0x60", "Push"),
    ("OP_CAT", "0x7e", "Disabled"),
])
def test_get_opcode(name, hex_code, category):
    entry = get_opcode(name)
    assert entry.hex == hex_code
    assert entry.category == category


def test_lookup_is_case_insensitive():
    assert get_opcode("op_dup") is get_opcode("OP_DUP")
    assert get_opcode("OP_NOPE") is None


def test_is_enabled():
    assert is_enabled("OP_ADD")
    assert not is_enabled("OP_MUL")
    assert not is_enabled("OP_UNKNOWN")


def test_opcodes_by_category_enabled_only():
    assert opcodes_by_category("Disabled", enabled_only=True) == []
    push_names = [entry.name for entry in opcodes_by_category("Push")]
    assert push_names[:2] == ["OP_0", "OP_FALSE"]
    assert "OP_16" in push_names
