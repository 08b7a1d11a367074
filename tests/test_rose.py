from collections import namedtuple

import pytest

from zippers import rose
from zippers.errors import NotFound
from zippers.rose import RoseTree, leaf


def values(z):
    return [loc.get_value() for loc in z.preorder_iter()]


def test_round_trip(rose_tree, rose_zipper):
    assert rose_zipper.to_standard_tree() == rose_tree
    assert rose_zipper.is_root()
    assert rose_zipper.is_leftmost()
    assert rose_zipper.is_rightmost()


def test_down_then_up_restores(rose_zipper):
    assert rose_zipper.go_down().go_up() == rose_zipper
    z = rose_zipper.go_down().go_right()
    assert z.go_down().go_up() == z


def test_navigation(rose_zipper):
    b = rose_zipper.go_down()
    assert b.get_value() == 'b'
    assert b.is_leftmost()
    assert not b.is_rightmost()

    e = b.go_right()
    assert e.get_value() == 'e'
    assert e.is_rightmost()
    assert e.go_left() == b

    g = e.go_down().go_right()
    assert g.get_value() == 'g'
    assert g.is_leaf()
    assert g.go_up().go_up() == rose_zipper


def test_navigation_failures(rose_zipper):
    with pytest.raises(NotFound):
        rose_zipper.go_up()
    with pytest.raises(NotFound):
        rose_zipper.go_left()
    with pytest.raises(NotFound):
        rose_zipper.go_right()
    c = rose_zipper.go_down().go_down()
    with pytest.raises(NotFound):
        c.go_down()
    with pytest.raises(NotFound):
        c.go_left()


def test_values_never_fail():
    z = rose.from_standard_tree(leaf(1))
    assert z.get_value() == 1
    assert z.set_value(2).get_value() == 2
    assert z.update(lambda v: v * 5).get_value() == 5


def test_update_keeps_children(rose_zipper):
    z = rose_zipper.go_down().update(str.upper)
    assert z.subtree() == RoseTree('B', (leaf('c'), leaf('d')))


def test_insert_siblings(rose_zipper):
    z = rose_zipper.go_down().go_right().insert_left(leaf('x'))
    z = z.insert_right(leaf('y'))
    assert z.get_value() == 'e'
    assert [c.value for c in z.to_standard_tree().children] == [
        'b', 'x', 'e', 'y',
    ]
    assert z.go_left().get_value() == 'x'
    assert z.go_right().get_value() == 'y'


def test_insert_sibling_at_root_fails(rose_zipper):
    with pytest.raises(NotFound):
        rose_zipper.insert_left(leaf('x'))
    with pytest.raises(NotFound):
        rose_zipper.insert_right(leaf('x'))


def test_insert_children(rose_zipper):
    z = rose_zipper.insert_child(leaf('first')).insert_child_back(leaf('last'))
    assert z.get_value() == 'a'
    assert [c.value for c in z.subtree().children] == [
        'first', 'b', 'e', 'last',
    ]
    z = rose.from_standard_tree(leaf(0)).insert_child_back(leaf(1))
    assert z.go_down().get_value() == 1


def test_delete_prefers_right_sibling(rose_zipper):
    c = rose_zipper.go_down().go_down()
    z = c.delete()
    assert z.get_value() == 'd'
    assert z.is_leftmost()
    assert z.top().to_standard_tree().children[0] == RoseTree(
        'b', (leaf('d'),),
    )


def test_delete_falls_back_to_left_sibling(rose_zipper):
    e = rose_zipper.go_down().go_right()
    z = e.delete()
    assert z.get_value() == 'b'
    assert z.is_rightmost()
    assert [c.value for c in z.to_standard_tree().children] == ['b']


def test_delete_only_child_moves_to_parent():
    t = RoseTree('p', (leaf('only'),))
    z = rose.from_standard_tree(t).go_down().delete()
    assert z.is_root()
    assert z.subtree() == leaf('p')


def test_delete_root_fails(rose_zipper):
    with pytest.raises(NotFound):
        rose_zipper.delete()


def test_leftmost_rightmost(rose_zipper):
    f = rose_zipper.go_down().go_right().go_down()
    g = f.rightmost()
    assert g.get_value() == 'g'
    assert g.leftmost() == f
    assert rose_zipper.leftmost() is rose_zipper


def test_preorder_iter(rose_zipper):
    assert values(rose_zipper) == ['a', 'b', 'c', 'd', 'e', 'f', 'g']
    assert values(rose_zipper.go_down()) == ['b', 'c', 'd']
    assert values(rose_zipper.go_down().go_down()) == ['c']


def test_find(rose_zipper):
    f = rose_zipper.find(lambda loc: loc.get_value() == 'f')
    assert f.go_up().get_value() == 'e'
    with pytest.raises(NotFound):
        rose_zipper.find(lambda loc: loc.get_value() == 'zz')


def test_ancestor(rose_zipper):
    d = rose_zipper.find(lambda loc: loc.get_value() == 'd')
    a = d.ancestor(lambda loc: loc.is_root())
    assert a.get_value() == 'a'
    with pytest.raises(NotFound):
        d.ancestor(lambda loc: loc.get_value() == 'e')


def test_edit_and_replace(rose_zipper):
    z = rose_zipper.go_down().edit(lambda t, v: t._replace(value=v), 'B')
    assert z.get_value() == 'B'
    z = z.replace(leaf('new'))
    assert [c.value for c in z.to_standard_tree().children] == ['new', 'e']


def test_old_zipper_unchanged(rose_tree, rose_zipper):
    rose_zipper.go_down().set_value('changed').delete()
    assert rose_zipper.to_standard_tree() == rose_tree


def test_deep_tree():
    depth = 20000
    t = leaf(0)
    for i in range(1, depth):
        t = RoseTree(i, (t,))
    z = rose.from_standard_tree(t)
    for _ in range(depth - 1):
        z = z.go_down()
    assert z.get_value() == 0
    assert z.top().get_value() == depth - 1


def test_list_children():
    t = RoseTree('a', [RoseTree('b', []), leaf('c')])
    z = rose.from_standard_tree(t)
    assert z.go_down().go_up().to_standard_tree() == t
    assert z.go_down().go_up() == z

    z = z.insert_child(leaf('x')).insert_child_back(leaf('y'))
    assert [c.value for c in z.subtree().children] == ['x', 'b', 'c', 'y']
    b = rose.from_standard_tree(t).go_down().insert_child(leaf('x'))
    assert b.go_down().get_value() == 'x'


def test_rose_tree_equality_ignores_sequence_type():
    assert RoseTree(1, [leaf(2)]) == RoseTree(1, (leaf(2),))
    assert RoseTree(1, [leaf(2)]) != RoseTree(1, (leaf(3),))
    assert RoseTree(1, ()) != RoseTree(1, (leaf(1),))
    assert hash(RoseTree(1, [leaf(2)])) == hash(RoseTree(1, (leaf(2),)))


def test_deep_zippers_compare_without_recursion():
    depth = 20000

    def chain():
        t = leaf(0)
        for i in range(1, depth):
            t = RoseTree(i, (t,))
        return t

    a = rose.from_standard_tree(chain())
    b = rose.from_standard_tree(chain())
    assert a == b
    for _ in range(depth - 1):
        a, b = a.go_down(), b.go_down()
    assert a == b
    assert a != b.set_value('x')


# A caller-side tree with its own field names. Its callbacks lower and raise
# their own descendants.
Dir = namedtuple('Dir', ['name', 'entries'])

built_with = []


def _lower_dir(d):
    return RoseTree(d.name, tuple(_lower_dir(e) for e in d.entries))


def _raise_dir(t):
    return Dir(t.value, [_raise_dir(c) for c in t.children])


def _build_dir(name, children):
    built_with.append(children)
    return Dir(name, [_raise_dir(c) for c in children])


adapter = rose.Adapter(
    get_value=lambda d: d.name,
    get_children=lambda d: [_lower_dir(e) for e in d.entries],
    build_node=_build_dir,
)


def test_from_tree():
    d = Dir('root', [Dir('etc', []), Dir('usr', [Dir('bin', [])])])
    z = rose.from_tree(d, adapter)
    assert z.to_standard_tree() == RoseTree('root', (
        leaf('etc'),
        RoseTree('usr', (leaf('bin'),)),
    ))


def test_to_tree_round_trip():
    d = Dir('root', [Dir('etc', []), Dir('usr', [Dir('bin', [])])])
    assert rose.from_tree(d, adapter).to_tree(adapter) == d


def test_build_node_receives_standard_children():
    del built_with[:]
    rose.from_standard_tree(
        RoseTree('root', (leaf('etc'), leaf('usr'))),
    ).to_tree(adapter)
    assert len(built_with) == 1
    assert built_with[0] == (leaf('etc'), leaf('usr'))
    assert all(isinstance(c, RoseTree) for c in built_with[0])


def test_adapter_round_trips_a_single_node():
    d = Dir('usr', [Dir('bin', []), Dir('lib', [])])
    rebuilt = adapter.build_node(
        adapter.get_value(d), adapter.get_children(d),
    )
    assert rebuilt == d


def test_get_and_set_tree():
    d = Dir('root', [Dir('etc', []), Dir('usr', [])])
    z = rose.from_tree(d, adapter).go_down().go_right()
    assert z.get_tree(adapter) == Dir('usr', [])

    z = z.set_tree(Dir('var', [Dir('log', [])]), adapter)
    assert z.get_value() == 'var'
    assert z.to_tree(adapter) == Dir('root', [
        Dir('etc', []), Dir('var', [Dir('log', [])]),
    ])
