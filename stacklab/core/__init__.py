"""
Contains the core elements that are used within StackLab

Core:
    -Provides the reference formats and constants
    -Provides custom exceptions for the interpreter and the lab
    -Provides the logger factory
"""
# core/__init__.py
from stacklab.core.exceptions import *
from stacklab.core.formats import *
from stacklab.core.logging import *
