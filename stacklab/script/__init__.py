"""
The Stack Lab interpreter: stack items, the opcode catalog and dispatch table, and the ScriptEngine
"""
# script/__init__.py
from stacklab.script.stack import *
from stacklab.script.catalog import *
from stacklab.script.context import *
from stacklab.script.formatters import *
from stacklab.script.opcode_map import *
from stacklab.script.results import *
from stacklab.script.script_engine import *
