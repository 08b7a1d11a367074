"""
A zipper over rose (multi-way) trees.

Every node is a ``RoseTree(value, children)`` where ``children`` is a sequence
of rose trees; a node without children is a leaf. Each step down records a
``Choice`` holding the parent's value, the left siblings nearest-first and
the right siblings in order, so the parent can be rebuilt on the way up.

For example given the following tree:

        a
      /   \\
     b     e
     ^     ^
    c d   f g

>>> t = RoseTree('a', (
...     RoseTree('b', (RoseTree('c', ()), RoseTree('d', ()))),
...     RoseTree('e', (RoseTree('f', ()), RoseTree('g', ()))),
... ))
>>> z = from_standard_tree(t).go_down().go_right()
>>> z.get_value()
'e'
>>> [loc.get_value() for loc in z.top().preorder_iter()]
['a', 'b', 'c', 'd', 'e', 'f', 'g']
"""

import logging
from collections import namedtuple

from . import cons
from .errors import NotFound

log = logging.getLogger(__name__)

_RoseTree = namedtuple('RoseTree', ['value', 'children'])


class RoseTree(_RoseTree):
    """
    A node and its children, in order.

    ``children`` may be any sequence of rose trees; two trees are equal when
    their values and children match, whatever sequence type holds them.

    >>> RoseTree(1, [leaf(2)]) == RoseTree(1, (leaf(2),))
    True
    """

    def __eq__(self, other):
        if not isinstance(other, RoseTree):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if a.value != b.value or len(a.children) != len(b.children):
                return False
            pending.extend(zip(a.children, b.children))
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.value, tuple(self.children)))


del _RoseTree

Choice = namedtuple('Choice', ['value', 'left_siblings', 'right_siblings'])

Adapter = namedtuple('Adapter', ['get_value', 'get_children', 'build_node'])


def leaf(value):
    return RoseTree(value, ())


def from_standard_tree(tree):
    return Zipper(thread=None, focus=tree)


def from_tree(node, adapter):
    """
    Builds a zipper from a tree in the caller's own representation.

    ``adapter.get_value(node)`` returns the node's value and
    ``adapter.get_children(node)`` returns its children already lowered to
    standard ``RoseTree`` values, in order.
    """
    return from_standard_tree(_lower(node, adapter))


def _lower(node, adapter):
    tree = RoseTree(adapter.get_value(node), tuple(adapter.get_children(node)))
    log.debug('lowered %r with %d children', tree.value, len(tree.children))
    return tree


def _raise(tree, adapter):
    # build_node receives standard children and raises them itself
    log.debug('raising %r with %d children', tree.value, len(tree.children))
    return adapter.build_node(tree.value, tree.children)


def _rebuild(choice, focus):
    children = cons.reverse(
        choice.left_siblings,
        (focus, choice.right_siblings),
    )
    return RoseTree(choice.value, tuple(cons.iterate(children)))


def _same_choice(a, b):
    return (a.value == b.value and
            cons.equal(a.left_siblings, b.left_siblings) and
            cons.equal(a.right_siblings, b.right_siblings))


_Zipper = namedtuple('Zipper', ['thread', 'focus'])


class Zipper(_Zipper):

    def __repr__(self):
        return 'rose.Zipper(focus={!r}, depth={})'.format(
            self.focus, cons.length(self.thread),
        )

    def __eq__(self, other):
        if not isinstance(other, Zipper):
            return NotImplemented
        return (self.focus == other.focus and
                cons.equal(self.thread, other.thread, _same_choice))

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
            focus = _rebuild(choice, focus)
        return focus

    def to_tree(self, adapter):
        return _raise(self.to_standard_tree(), adapter)

    def get_tree(self, adapter):
        """Returns the focused subtree in the caller's representation."""
        return _raise(self.focus, adapter)

    def set_tree(self, node, adapter):
        return self.replace(_lower(node, adapter))

    ## Context
    def subtree(self):
        return self.focus

    def is_root(self):
        return self.thread is None

    def is_leaf(self):
        return not self.focus.children

    def is_leftmost(self):
        return self.thread is None or self.thread[0].left_siblings is None

    def is_rightmost(self):
        return self.thread is None or self.thread[0].right_siblings is None

    ## Access
    def get_value(self):
        return self.focus.value

    def set_value(self, value):
        return self.update(lambda _: value)

    def update(self, f):
        return self.replace(self.focus._replace(value=f(self.focus.value)))

    ## Navigation
    def go_down(self):
        children = self.focus.children
        if not children:
            raise NotFound('focus has no children')
        choice = Choice(
            value=self.focus.value,
            left_siblings=None,
            right_siblings=cons.from_iterable(children[1:]),
        )
        return Zipper(thread=(choice, self.thread), focus=children[0])

    def go_up(self):
        if self.thread is None:
            raise NotFound('already at the root')
        choice, thread = self.thread
        return Zipper(thread=thread, focus=_rebuild(choice, self.focus))

    def go_left(self):
        if self.is_leftmost():
            raise NotFound('no left sibling')
        choice, thread = self.thread
        current, left = choice.left_siblings
        choice = choice._replace(
            left_siblings=left,
            right_siblings=(self.focus, choice.right_siblings),
        )
        return Zipper(thread=(choice, thread), focus=current)

    def go_right(self):
        if self.is_rightmost():
            raise NotFound('no right sibling')
        choice, thread = self.thread
        current, right = choice.right_siblings
        choice = choice._replace(
            left_siblings=(self.focus, choice.left_siblings),
            right_siblings=right,
        )
        return Zipper(thread=(choice, thread), focus=current)

    def top(self):
        return from_standard_tree(self.to_standard_tree())

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        loc = self
        while not loc.is_leftmost():
            loc = loc.go_left()
        return loc

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        loc = self
        while not loc.is_rightmost():
            loc = loc.go_right()
        return loc

    def ancestor(self, pred):
        """
        Return the first ancestor preceding the current loc that
        matches the pred(ancestor) function.

        The search moves one level up at a time until the root has been
        checked, then raises NotFound.
        """
        loc = self
        while not loc.is_root():
            loc = loc.go_up()
            if pred(loc):
                return loc
        raise NotFound('no matching ancestor')

    ## Enumeration
    def preorder_iter(self):
        """
        Visits this loc and every loc below it in depth-first pre-order.

        Siblings of the starting loc are not visited.
        """
        depth = 0
        loc = self
        while True:
            yield loc
            if not loc.is_leaf():
                loc = loc.go_down()
                depth += 1
                continue
            while depth and loc.is_rightmost():
                loc = loc.go_up()
                depth -= 1
            if not depth:
                return
            loc = loc.go_right()

    def find(self, pred):
        for loc in self.preorder_iter():
            if pred(loc):
                return loc
        raise NotFound('no matching location')

    ## Editing
    def replace(self, tree):
        return self._replace(focus=tree)

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.focus, *args))

    def insert_left(self, tree):
        """Insert tree as left sibling of node without moving"""
        if self.thread is None:
            raise NotFound("can't insert beside the root")
        choice, thread = self.thread
        choice = choice._replace(
            left_siblings=(tree, choice.left_siblings),
        )
        return self._replace(thread=(choice, thread))

    def insert_right(self, tree):
        """Insert tree as right sibling of node without moving"""
        if self.thread is None:
            raise NotFound("can't insert beside the root")
        choice, thread = self.thread
        choice = choice._replace(
            right_siblings=(tree, choice.right_siblings),
        )
        return self._replace(thread=(choice, thread))

    def insert_child(self, tree):
        """
        Inserts the tree as the leftmost child of the node at this loc,
        without moving.
        """
        return self.replace(
            self.focus._replace(
                children=(tree,) + tuple(self.focus.children),
            ),
        )

    def insert_child_back(self, tree):
        """
        Inserts the tree as the rightmost child of the node at this loc,
        without moving.
        """
        return self.replace(
            self.focus._replace(
                children=tuple(self.focus.children) + (tree,),
            ),
        )

    def delete(self):
        """
        Removes the node at the current location.

        Focus moves to the right sibling if there is one, else to the left
        sibling, else to the parent, which is left without children.

        For example given the following tree:

                a
              /   \\
             b     e
             ^
            c d

        Removing c moves to d, removing d moves to c, and removing e moves
        to b.
        """
        if self.thread is None:
            raise NotFound('cannot delete the root')
        choice, thread = self.thread

        if choice.right_siblings is not None:
            current, right = choice.right_siblings
            choice = choice._replace(right_siblings=right)
            return Zipper(thread=(choice, thread), focus=current)

        if choice.left_siblings is not None:
            current, left = choice.left_siblings
            choice = choice._replace(left_siblings=left)
            return Zipper(thread=(choice, thread), focus=current)

        return Zipper(thread=thread, focus=leaf(choice.value))


del _Zipper
