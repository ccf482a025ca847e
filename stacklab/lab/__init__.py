"""
Learning content built on the interpreter: challenges and script templates
"""
# lab/__init__.py
from stacklab.lab.challenges import *
from stacklab.lab.templates import *
