"""
Opcode handlers, grouped by kind. Every handler takes the main stack (and the alt stack for the alt stack ops)
and raises a ScriptEngineError to fail the step.
"""
# script/opcodes/__init__.py
from stacklab.script.opcodes.bools import *
from stacklab.script.opcodes.crypto import *
from stacklab.script.opcodes.numeric import *
from stacklab.script.opcodes.stackops import *
from stacklab.script.opcodes.verify import *
