"""
Ready-made unlocking/locking script pairs for the script builder
"""
from dataclasses import dataclass

from stacklab.core import SCRIPT, ChallengeError
from stacklab.cryptography import hash160

__all__ = ["ScriptTemplate", "TEMPLATES", "get_template"]


@dataclass(frozen=True)
class ScriptTemplate:
    name: str
    description: str
    unlocking_script: tuple
    locking_script: tuple

    @property
    def program(self) -> list:
        """
        Unlocking script followed by the locking script, ready for ScriptEngine.execute
        """
        return [*self.unlocking_script, *self.locking_script]


# The P2PKH locking script commits to the HASH160 of the UTF-8 pubkey string
_PUBKEY = "pubkey"
_PUBKEY_HASH = SCRIPT.HEX_PREFIX + hash160(_PUBKEY.encode("utf-8")).hex()

TEMPLATES = (
    ScriptTemplate("P2PKH", "Pay-to-Pubkey-Hash",
                   ("sig_example_123", _PUBKEY),
                   ("OP_DUP", "OP_HASH160", _PUBKEY_HASH, "OP_EQUALVERIFY", "OP_CHECKSIG")),
    ScriptTemplate("Simple Addition", "5 + 3 = 8", (5, 3), ("OP_ADD", 8, "OP_EQUAL")),
    ScriptTemplate("Stack Operations", "DUP, SWAP, DROP", (10, 20), ("OP_DUP", "OP_SWAP", "OP_DROP")),
    ScriptTemplate("Conditional", "IF/ELSE example", (1,), ("OP_IF", 100, "OP_ELSE", 200, "OP_ENDIF")),
    ScriptTemplate("Comparison", "Check if equal", (5, 5), ("OP_EQUAL",)),
    ScriptTemplate("Hash Operation", "SHA256 hash", ("hello_world",), ("OP_SHA256",)),
    ScriptTemplate("Arithmetic", "Add and subtract", (10, 5), ("OP_ADD", 3, "OP_SUB")),
    ScriptTemplate("Verify", "Verify condition", (1,), ("OP_VERIFY", 1)),
    ScriptTemplate("Min/Max", "Find minimum", (10, 5), ("OP_MIN",)),
    ScriptTemplate("Nested Conditional", "Complex IF/ELSE", (1, 2),
                   ("OP_IF", "OP_DUP", "OP_ELSE", "OP_DROP", "OP_ENDIF")),
    ScriptTemplate("Stack Duplication", "2DUP example", (10, 20), ("OP_2DUP", "OP_ADD")),
    ScriptTemplate("Rotation", "Rotate stack items", (1, 2, 3), ("OP_ROT",)),
)


def get_template(name: str) -> ScriptTemplate:
    for template in TEMPLATES:
        if template.name.lower() == name.lower():
            return template
    raise ChallengeError(f"Unknown template: {name}")
