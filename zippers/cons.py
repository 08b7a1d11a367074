"""
Immutable singly linked lists.

A list is either ``None`` (empty) or a pair ``(head, tail)``. Pushing and
popping at the head are O(1) and never copy, which is what the zipper
threads and sibling lists need.

>>> xs = from_iterable([1, 2, 3])
>>> xs
(1, (2, (3, None)))
>>> to_list(reverse(xs))
[3, 2, 1]
"""

import operator


def from_iterable(values, tail=None):
    """
    Builds a linked list holding ``values`` in order, ending in ``tail``.
    """
    items = list(values)
    for value in reversed(items):
        tail = (value, tail)
    return tail


def iterate(linked_list):
    node = linked_list
    while node is not None:
        yield node[0]
        node = node[1]


def to_list(linked_list):
    return list(iterate(linked_list))


def reverse(linked_list, tail=None):
    """
    Returns the elements of ``linked_list`` in reverse order, followed by
    ``tail``.

    >>> reverse(from_iterable([2, 1]), from_iterable([3]))
    (1, (2, (3, None)))
    """
    for value in iterate(linked_list):
        tail = (value, tail)
    return tail


def length(linked_list):
    n = 0
    for _ in iterate(linked_list):
        n += 1
    return n


def equal(a, b, same=operator.eq):
    # tuple == recurses once per cell, which breaks on long lists
    while a is not None and b is not None:
        if a is b:
            return True
        if not same(a[0], b[0]):
            return False
        a, b = a[1], b[1]
    return a is b
