import pytest

from algoworks.trie import Trie


WORDS = ["cat", "add", "dog", "doggy", "cast", "does"]


def _filled():
    trie = Trie()
    for word in WORDS:
        trie.add(word, word.upper())
    return trie


def test_add_and_lookup():
    trie = _filled()
    assert len(trie) == len(WORDS)
    for word in WORDS:
        assert trie.node(word).value == word.upper()
        assert word in trie


def test_prefix_is_not_a_key():
    trie = _filled()
    assert trie.node("do") is None
    assert "ca" not in trie
    assert trie.node("dogs") is None


def test_add_existing_returns_old_value():
    trie = _filled()
    assert trie.add("dog", "puppy") == "DOG"
    assert trie.node("dog").value == "puppy"
    assert len(trie) == len(WORDS)


def test_add_new_returns_none():
    trie = Trie()
    assert trie.add("a", 1) is None
    assert len(trie) == 1


def test_empty_key_rejected():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.add("", 1)
    assert trie.node("") is None


def test_remove_leaf_prunes_branch():
    trie = _filled()
    assert trie.remove("doggy") == "DOGGY"
    assert "doggy" not in trie
    assert "dog" in trie
    assert trie.node("dog").children == {}
    assert len(trie) == len(WORDS) - 1


def test_remove_inner_key_keeps_children():
    trie = _filled()
    assert trie.remove("dog") == "DOG"
    assert "dog" not in trie
    assert trie.node("doggy").value == "DOGGY"


def test_remove_whole_branch():
    trie = Trie()
    trie.add("abc", 1)
    trie.remove("abc")
    assert trie.root.children == {}
    assert len(trie) == 0


def test_remove_missing_raises():
    trie = _filled()
    with pytest.raises(KeyError):
        trie.remove("do")
    with pytest.raises(KeyError):
        trie.remove("zebra")


def test_clear():
    trie = _filled()
    trie.clear()
    assert len(trie) == 0
    assert "cat" not in trie