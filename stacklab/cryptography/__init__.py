"""
Hash functions
"""
# cryptography/__init__.py

from stacklab.cryptography.hash_functions import *
