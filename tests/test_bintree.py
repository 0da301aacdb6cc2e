import pytest

from dstructs.bintree import (
    BinaryNode,
    TraversalOrder,
    balance_factor,
    height,
    search_link,
    size,
)


def cmp_key(key, node):
    return key - node.value


def cmp_nodes(a, b):
    return (a.value > b.value) - (a.value < b.value)


@pytest.fixture
def sample():
    """
            10
           /  \\
          5    15
         / \\
        3   7
    """
    nodes = {v: BinaryNode(v) for v in (10, 5, 15, 3, 7)}
    nodes[10].left = nodes[5]
    nodes[10].right = nodes[15]
    nodes[5].left = nodes[3]
    nodes[5].right = nodes[7]
    return nodes


def values(nodes):
    return [n.value for n in nodes]


def test_init():
    node = BinaryNode(1)
    assert node.parent is None
    assert node.left is None
    assert node.right is None


def test_init_links_children():
    left, right = BinaryNode(1), BinaryNode(3)
    node = BinaryNode(2, None, left, right)
    assert node.left is left and node.right is right
    assert left.parent is node and right.parent is node


def test_getters_setters():
    root, left, right = BinaryNode(10), BinaryNode(5), BinaryNode(15)
    root.left = left
    root.right = right
    assert root.left is left
    assert root.right is right
    assert left.parent is root
    assert right.parent is root


def test_root_functions():
    n10, n5, n3 = BinaryNode(10), BinaryNode(5), BinaryNode(3)
    assert n10.is_root()
    assert n10.root() is n10
    n10.left = n5
    n5.left = n3
    assert n10.is_root()
    assert not n5.is_root()
    assert not n3.is_root()
    assert n3.root() is n10
    assert n5.root() is n10


def test_detach():
    n10, n5, n15, n3 = (BinaryNode(v) for v in (10, 5, 15, 3))
    n10.left = n5
    n10.right = n15
    n5.left = n3
    n15.detach()
    assert n10.right is None
    assert n15.parent is None
    assert n15.is_root()
    assert n10.left is n5
    assert n5.left is n3


def test_replace():
    n10, n5, n15, n20 = (BinaryNode(v) for v in (10, 5, 15, 20))
    n10.left = n5
    n10.right = n15
    n5.replace(n20)
    assert n10.left is n20
    assert n20.parent is n10
    assert n5.parent is None


def test_replace_advanced():
    n10, n5, n15, n3, n20 = (BinaryNode(v) for v in (10, 5, 15, 3, 20))
    n10.left = n5
    n10.right = n15
    n5.left = n3
    n5.replace(n20)
    assert n10.left is n20
    assert n20.parent is n10
    assert n20.left is n3
    assert n3.parent is n20
    assert n5.left is None


def test_search(sample):
    root = sample[10]
    assert root.search(7, cmp_key) is sample[7]
    assert root.search(15, cmp_key) is sample[15]
    assert root.search(10, cmp_key) is root
    assert root.search(100, cmp_key) is None


def test_tree_structure(sample):
    assert sample[10].left.left is sample[3]


def test_size():
    n10, n5, n15 = BinaryNode(10), BinaryNode(5), BinaryNode(15)
    assert size(n10) == 1
    n10.left = n5
    n10.right = n15
    assert size(n10) == 3
    assert size(None) == 0


def test_size_of_subtree_stays_inside(sample):
    assert size(sample[5]) == 3


def test_level():
    n10, n5, n15, n3 = (BinaryNode(v) for v in (10, 5, 15, 3))
    n10.left = n5
    n10.right = n15
    n5.left = n3
    assert n10.level() == 0
    assert n10.root() is n10
    assert n5.level() == 1
    assert n15.level() == 1
    assert n3.level() == 2


def test_height():
    n10, n5, n3 = BinaryNode(10), BinaryNode(5), BinaryNode(3)
    assert height(n10) == 0
    assert height(None) == -1
    n10.left = n5
    assert height(n10) == 1
    n5.left = n3
    assert height(n10) == 2


def test_balance_factor():
    n10, n5, n15, n3 = (BinaryNode(v) for v in (10, 5, 15, 3))
    n10.left = n5
    n10.right = n15
    assert balance_factor(n10) == 0
    n5.left = n3
    assert balance_factor(n10) == 1
    assert balance_factor(None) == 0


def test_inorder_iteration(sample):
    first = sample[10].first_inorder()
    assert first.value == 3
    curr = first
    for expected in [3, 5, 7, 10, 15]:
        assert curr.value == expected
        curr = curr.inorder_next()
    assert curr is None

    curr = sample[15]
    for expected in [15, 10, 7, 5, 3]:
        assert curr.value == expected
        curr = curr.inorder_prev()
    assert curr is None


def test_preorder_postorder_iterators(sample):
    first_pre = sample[10].first_preorder()
    assert first_pre.value == 10
    curr = first_pre
    for expected in [10, 5, 3, 7, 15]:
        assert curr.value == expected
        curr = curr.preorder_next()
    assert curr is None

    first_post = sample[10].first_postorder()
    assert first_post.value == 3
    curr = first_post
    for expected in [3, 7, 5, 15, 10]:
        assert curr.value == expected
        curr = curr.postorder_next()
    assert curr is None

    curr = sample[15]
    for expected in [15, 7, 3, 5, 10]:
        assert curr.value == expected
        curr = curr.preorder_prev()
    assert curr is None

    curr = sample[10]
    for expected in [10, 15, 5, 7, 3]:
        assert curr.value == expected
        curr = curr.postorder_prev()
    assert curr is None


def test_traversal_orders():
    n10, n5, n15 = BinaryNode(10), BinaryNode(5), BinaryNode(15)
    n10.left = n5
    n10.right = n15
    assert values(n10.traverse(TraversalOrder.INORDER)) == [5, 10, 15]
    assert values(n10.traverse(TraversalOrder.PREORDER)) == [10, 5, 15]
    assert values(n10.traverse(TraversalOrder.POSTORDER)) == [5, 15, 10]


def test_traverse_larger_tree(sample):
    root = sample[10]
    assert values(root.traverse(TraversalOrder.INORDER)) == [3, 5, 7, 10, 15]
    assert values(root.traverse(TraversalOrder.PREORDER)) == [10, 5, 3, 7, 15]
    assert values(root.traverse(TraversalOrder.POSTORDER)) == [3, 7, 5, 15, 10]


def test_bfs(sample):
    assert values(sample[10].bfs()) == [10, 5, 15, 3, 7]


def test_dfs():
    n10, n5, n15 = BinaryNode(10), BinaryNode(5), BinaryNode(15)
    n10.left = n5
    n10.right = n15
    visited = values(n10.dfs())
    assert len(visited) == 3
    assert visited[0] == 10
    assert visited == [10, 5, 15]


def test_clear():
    n10, n5, n15 = BinaryNode(10), BinaryNode(5), BinaryNode(15)
    n10.left = n5
    n10.right = n15
    seen = []
    n10.clear(seen.append)
    assert values(seen) == [5, 15, 10]
    assert n10.left is None and n10.right is None
    assert n5.parent is None


def test_swap_parent_with_right_child(sample):
    n10, n5, n3, n7 = sample[10], sample[5], sample[3], sample[7]
    n5.swap(n7)
    assert n10.left is n7
    assert n7.parent is n10
    assert n7.left is n3 and n7.right is n5
    assert n3.parent is n7 and n5.parent is n7
    assert n5.left is None and n5.right is None


def test_swap_child_with_left_parent(sample):
    n10, n5, n3, n7 = sample[10], sample[5], sample[3], sample[7]
    n3.swap(n5)
    assert n10.left is n3
    assert n3.left is n5 and n3.right is n7
    assert n5.parent is n3 and n7.parent is n3
    assert n5.left is None and n5.right is None


def test_swap_distant_nodes(sample):
    n10, n5, n15, n3 = sample[10], sample[5], sample[15], sample[3]
    n3.swap(n15)
    assert n10.right is n3 and n3.parent is n10
    assert n5.left is n15 and n15.parent is n5


def test_swap_siblings(sample):
    n5, n3, n7 = sample[5], sample[3], sample[7]
    n3.swap(n7)
    assert n5.left is n7 and n5.right is n3
    assert n3.parent is n5 and n7.parent is n5


def test_search_link_finds_existing(sample):
    probe = BinaryNode(7)
    parent, is_left, existing = search_link(sample[10], probe, cmp_nodes)
    assert existing is sample[7]
    assert parent is sample[5]
    assert is_left is False


def test_search_link_missing(sample):
    probe = BinaryNode(6)
    parent, is_left, existing = search_link(sample[10], probe, cmp_nodes)
    assert existing is None
    assert parent is sample[7]
    assert is_left is True


def test_search_link_empty():
    assert search_link(None, BinaryNode(1), cmp_nodes) == (None, False, None)