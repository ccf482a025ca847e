"""
Numerical Operations for StackLab script
    0x87 | OP_EQUAL
    0x8b | OP_1ADD
    0x8c | OP_1SUB
    0x8f | OP_NEGATE
    0x90 | OP_ABS
    0x91 | OP_NOT
    0x92 | OP_0NOTEQUAL
    0x93 | OP_ADD
    0x94 | OP_SUB
    0x9a | OP_BOOLAND
    0x9b | OP_BOOLOR
    0x9c | OP_NUMEQUAL
    0x9e | OP_NUMNOTEQUAL
    0x9f | OP_LESSTHAN
    0xa0 | OP_GREATERTHAN
    0xa1 | OP_LESSTHANOREQUAL
    0xa2 | OP_GREATERTHANOREQUAL
    0xa3 | OP_MIN
    0xa4 | OP_MAX
    0xa5 | OP_WITHIN

For the binary operators a is the top item and b the one below it, so OP_SUB pushes b - a.
"""
from stacklab.script.stack import LabStack, items_equal, to_number

__all__ = ["op_equal", "op_1add", "op_1sub", "op_negate", "op_abs", "op_not", "op_0notequal", "op_add", "op_sub",
           "op_booland", "op_boolor", "op_numequal", "op_numnotequal", "op_lessthan", "op_greaterthan",
           "op_lessthanorequal", "op_greaterthanorequal", "op_min", "op_max", "op_within"]


def _popnums(main_stack: LabStack) -> tuple[int, int]:
    # Both items leave the stack before either is converted
    a, b = main_stack.popitems(2)
    return to_number(a), to_number(b)


def op_equal(main_stack: LabStack):
    """
    OP_EQUAL | 0x87
    Returns 1 if the inputs are exactly equal, 0 otherwise
    """
    a, b = main_stack.popitems(2)
    main_stack.pushbool(items_equal(a, b))


def op_1add(main_stack: LabStack):
    """
    OP_1ADD | 0x8b
    """
    main_stack.push(main_stack.popnum() + 1)


def op_1sub(main_stack: LabStack):
    """
    OP_1SUB | 0x8c
    """
    main_stack.push(main_stack.popnum() - 1)


def op_negate(main_stack: LabStack):
    """
    OP_NEGATE | 0x8f
    The sign of the input is flipped.
    """
    main_stack.push(-main_stack.popnum())


def op_abs(main_stack: LabStack):
    """
    OP_ABS | 0x90
    """
    main_stack.push(abs(main_stack.popnum()))


def op_not(main_stack: LabStack):
    """
    OP_NOT | 0x91
    Pop the top item and push 1 if it is zero; otherwise, push 0
    """
    main_stack.pushbool(main_stack.popnum() == 0)


def op_0notequal(main_stack: LabStack):
    """
    OP_0NOTEQUAL | 0x92
    Returns 0 if the input is 0. 1 otherwise.
    """
    main_stack.pushbool(main_stack.popnum() != 0)


def op_add(main_stack: LabStack):
    """
    OP_ADD | 0x93
    """
    a, b = _popnums(main_stack)
    main_stack.push(b + a)


def op_sub(main_stack: LabStack):
    """
    OP_SUB | 0x94
    Pop two stack items and push the second minus the top
    """
    a, b = _popnums(main_stack)
    main_stack.push(b - a)


def op_booland(main_stack: LabStack):
    """
    OP_BOOLAND | 0x9a
    If both a and b are not 0, the output is 1. Otherwise, 0.
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(a != 0 and b != 0)


def op_boolor(main_stack: LabStack):
    """
    OP_BOOLOR | 0x9b
    If a or b is not 0, the output is 1. Otherwise, 0.
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(a != 0 or b != 0)


def op_numequal(main_stack: LabStack):
    """
    OP_NUMEQUAL | 0x9c
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(a == b)


def op_numnotequal(main_stack: LabStack):
    """
    OP_NUMNOTEQUAL | 0x9e
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(a != b)


def op_lessthan(main_stack: LabStack):
    """
    OP_LESSTHAN | 0x9f
    Returns 1 if b is less than a, 0 otherwise. (bottom < top)
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(b < a)


def op_greaterthan(main_stack: LabStack):
    """
    OP_GREATERTHAN | 0xa0
    Returns 1 if b is greater than a, 0 otherwise. (bottom > top)
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(b > a)


def op_lessthanorequal(main_stack: LabStack):
    """
    OP_LESSTHANOREQUAL | 0xa1
    (bottom <= top)
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(b <= a)


def op_greaterthanorequal(main_stack: LabStack):
    """
    OP_GREATERTHANOREQUAL | 0xa2
    (bottom >= top)
    """
    a, b = _popnums(main_stack)
    main_stack.pushbool(b >= a)


def op_min(main_stack: LabStack):
    """
    OP_MIN | 0xa3
    """
    a, b = _popnums(main_stack)
    main_stack.push(min(a, b))


def op_max(main_stack: LabStack):
    """
    OP_MAX | 0xa4
    """
    a, b = _popnums(main_stack)
    main_stack.push(max(a, b))


def op_within(main_stack: LabStack):
    """
    OP_WITHIN | 0xa5
    Returns 1 if x is within the specified range (left-inclusive), 0 otherwise. Stack: x min max
    """
    _max, _min, num = (to_number(item) for item in main_stack.popitems(3))
    main_stack.pushbool(_min <= num < _max)
