"""
Fixtures used in the tests
"""
import pytest

from stacklab.script import LabStack, ScriptEngine


@pytest.fixture()
def engine():
    return ScriptEngine()


@pytest.fixture()
def alt_stack():
    return LabStack()
