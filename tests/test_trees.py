from hypothesis import given
from hypothesis import strategies as st

from dsalgo.trees import TreeNode, Trie, morris_inorder

words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)


def _source_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5, None, TreeNode(6))),
        TreeNode(3),
    )


def _bst_insert(root, value):
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def test_trie_insert_then_search():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple")
    assert not trie.search("app")
    assert trie.starts_with("app")
    assert not trie.starts_with("apx")


def test_trie_prefix_becomes_word_when_inserted():
    trie = Trie()
    trie.insert("apple")
    trie.insert("app")
    assert trie.search("app")
    assert trie.search("apple")


def test_trie_empty_trie():
    trie = Trie()
    assert not trie.search("a")
    assert not trie.starts_with("a")
    assert trie.starts_with("")


@given(st.lists(words, max_size=20), words)
def test_trie_matches_set_semantics(inserted, probe):
    trie = Trie()
    for word in inserted:
        trie.insert(word)
    for word in inserted:
        assert trie.search(word)
        assert all(trie.starts_with(word[:i]) for i in range(len(word) + 1))
    assert trie.search(probe) == (probe in inserted)
    assert trie.starts_with(probe) == any(w.startswith(probe) for w in inserted)


def test_morris_source_example():
    assert morris_inorder(_source_tree()) == [4, 2, 5, 6, 1, 3]


def test_morris_restores_tree():
    root = _source_tree()
    first = morris_inorder(root)
    assert root.left.left.right is None
    assert root.left.right.right.right is None
    assert morris_inorder(root) == first


def test_morris_empty_tree():
    assert not morris_inorder(None)


@given(st.lists(st.integers(-100, 100), unique=True, max_size=40))
def test_morris_of_search_tree_is_sorted(values):
    root = None
    for value in values:
        root = _bst_insert(root, value)
    assert morris_inorder(root) == sorted(values)