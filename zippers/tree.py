"""
A zipper over binary trees.

A standard tree is either ``Leaf`` or ``Node(value, left, right)``. The
zipper keeps the focused subtree plus a thread of ``Choice`` records, one
per step taken from the root, each remembering which side was taken, the
parent's value and the sibling subtree that was not taken.

>>> t = Node(1, Node(2, Leaf, Leaf), Node(3, Leaf, Leaf))
>>> z = from_standard_tree(t).go_right().set_value(30)
>>> z.get_value(), z.is_root()
(30, False)
>>> z.to_standard_tree().right.value
30
"""

import logging
from collections import namedtuple

from . import cons
from .errors import NotFound

log = logging.getLogger(__name__)


class _Leaf(object):
    """The empty tree. Use the ``Leaf`` singleton, never instantiate."""

    __slots__ = ()

    def __repr__(self):
        return 'Leaf'

    def __reduce__(self):
        return 'Leaf'


Leaf = _Leaf()

Node = namedtuple('Node', ['value', 'left', 'right'])

LEFT = 'left'
RIGHT = 'right'

Choice = namedtuple('Choice', ['side', 'value', 'sibling'])

Adapter = namedtuple('Adapter', ['get_value', 'get_children', 'build_node'])


def from_standard_tree(tree):
    return Zipper(thread=None, focus=tree)


def from_tree(node, adapter):
    """
    Builds a zipper from a tree in the caller's own representation.

    ``adapter.get_value(node)`` returns the node's value or ``None`` for an
    empty node; ``adapter.get_children(node)`` returns a ``(left, right)``
    pair of caller nodes where ``None`` stands for an empty child. The
    walk is iterative, so deep trees do not hit the recursion limit.

    The reverse direction hands ``adapter.build_node`` the value (``None``
    for an empty tree) and the standard ``(left, right)`` subtrees, with
    ``None`` in place of ``Leaf``; ``build_node`` raises those itself.
    """
    return from_standard_tree(_lower(node, adapter))


_VISIT = object()
_BUILD = object()


def _lower(node, adapter):
    results = []
    stack = [(_VISIT, node)]
    count = 0
    while stack:
        action, item = stack.pop()
        if action is _BUILD:
            right = results.pop()
            left = results.pop()
            results.append(Node(item, left, right))
            continue

        value = None if item is None else adapter.get_value(item)
        if value is None:
            results.append(Leaf)
            continue

        count += 1
        left, right = adapter.get_children(item)
        stack.append((_BUILD, value))
        stack.append((_VISIT, right))
        stack.append((_VISIT, left))

    log.debug('converted %d nodes to standard form', count)
    return results.pop()


def _option(tree):
    return None if tree is Leaf else tree


def _raise(tree, adapter):
    # build_node receives standard children and raises them itself
    if tree is Leaf:
        return adapter.build_node(None, (None, None))
    log.debug('raising %r', tree.value)
    return adapter.build_node(
        tree.value,
        (_option(tree.left), _option(tree.right)),
    )


def _wrap(choice, focus):
    if choice.side == LEFT:
        return Node(choice.value, focus, choice.sibling)
    return Node(choice.value, choice.sibling, focus)


_Zipper = namedtuple('Zipper', ['thread', 'focus'])


class Zipper(_Zipper):

    def __repr__(self):
        return 'tree.Zipper(focus={!r}, depth={})'.format(
            self.focus, cons.length(self.thread),
        )

    def __eq__(self, other):
        if not isinstance(other, Zipper):
            return NotImplemented
        return (self.focus == other.focus and
                cons.equal(self.thread, other.thread))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.focus, cons.length(self.thread)))

    ## Conversion
    def to_standard_tree(self):
        focus = self.focus
        for choice in cons.iterate(self.thread):
            focus = _wrap(choice, focus)
        return focus

    def get_standard_tree(self):
        return self.focus

    def to_tree(self, adapter):
        return _raise(self.to_standard_tree(), adapter)

    def get_tree(self, adapter):
        """Returns the focused subtree in the caller's representation."""
        return _raise(self.focus, adapter)

    def set_tree(self, node, adapter):
        return self._replace(focus=_lower(node, adapter))

    ## Context
    def is_root(self):
        return self.thread is None

    def is_leaf(self):
        return self.focus is Leaf

    ## Access
    def get_value(self):
        if self.focus is Leaf:
            raise NotFound('focus is a leaf')
        return self.focus.value

    def set_value(self, value):
        return self.update(lambda _: value)

    def update(self, f):
        if self.focus is Leaf:
            raise NotFound('focus is a leaf')
        return self._replace(focus=self.focus._replace(
            value=f(self.focus.value),
        ))

    def upsert(self, f):
        """
        Replaces the whole focused subtree with ``f(subtree)``.

        This is the only way to grow a leaf into a node, or to prune a node
        down to a leaf in place.

        >>> z = from_standard_tree(Leaf).upsert(lambda t: Node(5, t, t))
        >>> z.get_value()
        5
        """
        return self._replace(focus=f(self.focus))

    ## Editing
    def _set_child(self, side, tree):
        if self.focus is Leaf:
            raise NotFound('focus is a leaf')
        return self._replace(focus=self.focus._replace(**{side: tree}))

    def set_left(self, tree):
        return self._set_child(LEFT, tree)

    def set_right(self, tree):
        return self._set_child(RIGHT, tree)

    def delete_left(self):
        return self._set_child(LEFT, Leaf)

    def delete_right(self):
        return self._set_child(RIGHT, Leaf)

    def delete(self):
        """
        Empties the focused position and moves up to its parent.

        The root position itself cannot be deleted.
        """
        if self.thread is None:
            raise NotFound('cannot delete the root')
        return self._replace(focus=Leaf).go_up()

    ## Navigation
    def go_left(self):
        focus = self.focus
        if focus is Leaf or focus.left is Leaf:
            raise NotFound('no left child')
        choice = Choice(LEFT, focus.value, focus.right)
        return Zipper(thread=(choice, self.thread), focus=focus.left)

    def go_right(self):
        focus = self.focus
        if focus is Leaf or focus.right is Leaf:
            raise NotFound('no right child')
        choice = Choice(RIGHT, focus.value, focus.left)
        return Zipper(thread=(choice, self.thread), focus=focus.right)

    def go_up(self):
        if self.thread is None:
            raise NotFound('already at the root')
        choice, thread = self.thread
        return Zipper(thread=thread, focus=_wrap(choice, self.focus))

    def top(self):
        return from_standard_tree(self.to_standard_tree())


del _Zipper
