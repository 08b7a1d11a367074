"""
A zipper over a linear sequence.

The cursor splits the list in two: ``thread`` holds the elements left of the
cursor nearest-first, ``focus`` holds the cursor element followed by
everything to its right. Both halves are cons lists, so every move and edit
is O(1) and returns a new zipper.

>>> z = from_list([1, 2, 3, 4]).go_right().set(99).insert_left(42)
>>> z.get(), z.to_list()
(99, [1, 42, 99, 3, 4])
>>> z.go_right().delete().to_list()
[1, 42, 99, 4]
"""

from collections import namedtuple

from . import cons
from .errors import NotFound


def from_list(seq):
    return Zipper(thread=None, focus=cons.from_iterable(seq))


def new():
    return from_list(())


_Zipper = namedtuple('Zipper', ['thread', 'focus'])


class Zipper(_Zipper):

    def __repr__(self):
        return 'sequence.Zipper(left={!r}, focus={!r})'.format(
            cons.to_list(cons.reverse(self.thread)),
            cons.to_list(self.focus),
        )

    def __eq__(self, other):
        if not isinstance(other, Zipper):
            return NotImplemented
        return (cons.equal(self.thread, other.thread) and
                cons.equal(self.focus, other.focus))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((
            tuple(cons.iterate(self.thread)),
            tuple(cons.iterate(self.focus)),
        ))

    ## Conversion
    def to_list(self):
        return cons.to_list(cons.reverse(self.thread, self.focus))

    def values(self):
        """Iterates the logical list from left to right."""
        for value in cons.iterate(cons.reverse(self.thread)):
            yield value
        for value in cons.iterate(self.focus):
            yield value

    def length(self):
        return cons.length(self.thread) + cons.length(self.focus)

    ## Context
    def is_empty(self):
        return self.thread is None and self.focus is None

    def is_leftmost(self):
        return self.thread is None

    def is_rightmost(self):
        return self.focus is None or self.focus[1] is None

    ## Access
    def get(self):
        if self.focus is None:
            raise NotFound('empty focus')
        return self.focus[0]

    def set(self, value):
        return self.update(lambda _: value)

    def update(self, f):
        if self.focus is None:
            raise NotFound('empty focus')
        head, rest = self.focus
        return self._replace(focus=(f(head), rest))

    def upsert(self, f):
        """
        Replaces the focus element with ``f(element)``, or inserts ``f(None)``
        as the only element when there is nothing under the cursor.
        """
        if self.focus is None:
            return self._replace(focus=(f(None), None))
        head, rest = self.focus
        return self._replace(focus=(f(head), rest))

    ## Editing
    def insert_left(self, value):
        """Insert value immediately left of the cursor without moving"""
        if self.is_empty():
            return self._replace(focus=(value, None))
        return self._replace(thread=(value, self.thread))

    def insert_right(self, value):
        """Insert value immediately right of the cursor without moving"""
        if self.focus is None:
            return self._replace(focus=(value, None))
        head, rest = self.focus
        return self._replace(focus=(head, (value, rest)))

    def delete(self):
        """
        Removes the element under the cursor.

        The cursor moves to the next element to the right, or to the new
        rightmost element when the rightmost one was removed. Removing the
        only element of the list is refused.

        >>> from_list([1, 2]).go_right().delete().get()
        1
        >>> from_list([7]).delete()
        Traceback (most recent call last):
        ...
        zippers.errors.NotFound: cannot delete the only element
        """
        if self.focus is None:
            raise NotFound('empty focus')
        rest = self.focus[1]
        if rest is not None:
            return self._replace(focus=rest)
        if self.thread is None:
            raise NotFound('cannot delete the only element')
        previous, thread = self.thread
        return Zipper(thread=thread, focus=(previous, None))

    ## Navigation
    def go_left(self):
        if self.thread is None:
            raise NotFound('already leftmost')
        head, thread = self.thread
        return Zipper(thread=thread, focus=(head, self.focus))

    def go_right(self):
        if self.is_rightmost():
            raise NotFound('already rightmost')
        head, focus = self.focus
        return Zipper(thread=(head, self.thread), focus=focus)

    def leftmost(self):
        return Zipper(thread=None, focus=cons.reverse(self.thread, self.focus))

    def rightmost(self):
        if self.is_rightmost():
            return self
        thread = self.thread
        focus = self.focus
        while focus[1] is not None:
            head, focus = focus
            thread = (head, thread)
        return Zipper(thread=thread, focus=focus)


del _Zipper
