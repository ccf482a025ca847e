"""
Basic Stack Operation OpCodes
    0x6b | OP_TOALTSTACK
    0x6c | OP_FROMALTSTACK
    0x6d | OP_2DROP
    0x6e | OP_2DUP
    0x6f | OP_3DUP
    0x70 | OP_2OVER
    0x72 | OP_2SWAP
    0x73 | OP_IFDUP
    0x74 | OP_DEPTH
    0x75 | OP_DROP
    0x76 | OP_DUP
    0x77 | OP_NIP
    0x78 | OP_OVER
    0x7b | OP_ROT
    0x7c | OP_SWAP
    0x7d | OP_TUCK
    0x82 | OP_SIZE

popitems returns the items top-first; pushlist pushes bottom-first. Most handlers pop, rearrange and push back.
"""
from stacklab.script.stack import LabStack, is_truthy, to_bytes

__all__ = ["op_toaltstack", "op_fromaltstack", "op_2drop", "op_2dup", "op_3dup", "op_2over", "op_2swap",
           "op_ifdup", "op_depth", "op_drop", "op_dup", "op_nip", "op_over", "op_rot", "op_swap", "op_tuck",
           "op_size"]


def op_toaltstack(main_stack: LabStack, alt_stack: LabStack):
    """
    OP_TOALTSTACK | 0x6b
    Puts the input onto the top of the alt stack. Removes it from the main stack.
    """
    alt_stack.push(main_stack.pop())


def op_fromaltstack(main_stack: LabStack, alt_stack: LabStack):
    """
    OP_FROMALTSTACK | 0x6c
    Puts the input onto the top of the main stack. Removes it from the alt stack.
    """
    alt_stack.check_min_height(1, "OP_FROMALTSTACK")
    main_stack.push(alt_stack.pop())


def op_2drop(main_stack: LabStack):
    """
    OP_2DROP | 0x6d
    Removes the top two stack items.
    """
    main_stack.popitems(2)


def op_2dup(main_stack: LabStack):
    """
    OP_2DUP | 0x6e
    Duplicates the top two stack items.
    """
    items = list(reversed(main_stack.popitems(2)))  # [second, top]
    main_stack.pushlist(items + items)


def op_3dup(main_stack: LabStack):
    """
    OP_3DUP | 0x6f
    Duplicates the top three stack items.
    """
    items = list(reversed(main_stack.popitems(3)))
    main_stack.pushlist(items + items)


def op_2over(main_stack: LabStack):
    """
    OP_2OVER | 0x70
    Copies the pair of items two spaces back to the top: x1 x2 x3 x4 -> x1 x2 x3 x4 x1 x2
    """
    items = list(reversed(main_stack.popitems(4)))  # bottom [x1, x2, x3, x4] top
    main_stack.pushlist(items + items[:2])


def op_2swap(main_stack: LabStack):
    """
    OP_2SWAP | 0x72
    Swaps the top two pairs of items: x1 x2 x3 x4 -> x3 x4 x1 x2
    """
    items = list(reversed(main_stack.popitems(4)))
    main_stack.pushlist(items[2:] + items[:2])


def op_ifdup(main_stack: LabStack):
    """
    OP_IFDUP | 0x73
    Duplicates the top item iff it is true
    """
    if is_truthy(main_stack.top):
        main_stack.push(main_stack.top)


def op_depth(main_stack: LabStack):
    """
    OP_DEPTH | 0x74
    Puts the number of stack items onto the stack.
    """
    main_stack.push(main_stack.height)


def op_drop(main_stack: LabStack):
    """
    OP_DROP | 0x75
    """
    main_stack.pop()


def op_dup(main_stack: LabStack):
    """
    OP_DUP | 0x76
    """
    main_stack.push(main_stack.peek())


def op_nip(main_stack: LabStack):
    """
    OP_NIP | 0x77
    Removes the second-to-top stack item.
    """
    top, _ = main_stack.popitems(2)
    main_stack.push(top)


def op_over(main_stack: LabStack):
    """
    OP_OVER | 0x78
    Copies the second-to-top stack item to the top.
    """
    main_stack.push(main_stack.peek(1))


def op_rot(main_stack: LabStack):
    """
    OP_ROT | 0x7b
    The 3rd item down the stack is moved to the top: x1 x2 x3 -> x2 x3 x1
    """
    x3, x2, x1 = main_stack.popitems(3)
    main_stack.pushlist([x2, x3, x1])


def op_swap(main_stack: LabStack):
    """
    OP_SWAP | 0x7c
    """
    top, second = main_stack.popitems(2)
    main_stack.pushlist([top, second])


def op_tuck(main_stack: LabStack):
    """
    OP_TUCK | 0x7d
    The item at the top of the stack is copied and inserted before the second-to-top item: x1 x2 -> x2 x1 x2
    """
    top, second = main_stack.popitems(2)
    main_stack.pushlist([top, second, top])


def op_size(main_stack: LabStack):
    """
    OP_SIZE | 0x82
    Pushes the byte length of the top element without popping it
    """
    main_stack.push(len(to_bytes(main_stack.peek())))
