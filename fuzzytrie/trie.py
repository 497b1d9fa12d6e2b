"""R-way trie over lowercase words with prefix and subsequence ("fuzzy") search.

Keys are made of the letters a-z. A key is stored as a path of character nodes
ending in a NUL-keyed terminal sentinel, so "car" and "cart" share the c-a-r
path and the r node has two children: the sentinel and t.

Fuzzy search finds every key that contains the pattern as an ordered, not
necessarily contiguous, subsequence: "lgrm" matches "algorithm" and
"logarithm". Each node's letter mask lets the search skip any subtree that
doesn't contain all of the pattern letters it still needs.
"""

import logging
from typing import Iterable

from tqdm import tqdm

from fuzzytrie.errors import KeyNotFoundError, LoadError, UnsupportedCharacterError
from fuzzytrie.node import NUL, Node, check_word, letter_bit

logger = logging.getLogger(__name__)


def suffix_masks(word: str) -> list[int]:
    """masks[i] is the letter mask of word[i:]; masks[len(word)] == 0."""
    masks = [0] * (len(word) + 1)
    for i in range(len(word) - 1, -1, -1):
        masks[i] = masks[i + 1] | letter_bit(word[i])
    return masks


class Trie:
    _root: Node
    _size: int

    def __init__(self):
        self._root = Node()
        self._size = 0

    @property
    def root(self) -> Node:
        return self._root

    @property
    def size(self) -> int:
        """Number of distinct keys in the trie."""
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, key):
        if not isinstance(key, str):
            return False
        try:
            node = self.find_node(key)
        except UnsupportedCharacterError:
            return False
        return node is not None and NUL in node.children

    def num_nodes(self):
        return self._root.num_nodes()

    def find_node(self, prefix: str) -> Node | None:
        """Return the node at the end of prefix's path, or None if there isn't one."""
        check_word(prefix)
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # ---

    def add(self, key: str) -> int:
        """Add key to the trie. Returns the depth of the key (its length).

        Adding a key that's already present leaves the trie and its size unchanged.
        """
        check_word(key)
        masks = suffix_masks(key)
        node = self._root
        node.mask |= masks[0]
        # Nothing below can fail, so a key is either fully added or not at all.
        for i, ch in enumerate(key):
            child = node.children.get(ch)
            if child is None:
                child = node.new_child(node, ch, masks[i], ch, False)
            child.mask |= masks[i]
            node = child

        if NUL not in node.children:
            node.new_child(node, NUL, 0, NUL, True)
            self._size += 1
        return len(key)

    def remove(self, key: str):
        """Remove key from the trie, pruning any nodes that no other key uses.

        Raises KeyNotFoundError if key isn't in the trie.
        """
        node = self.find_node(key)
        if node is None or NUL not in node.children:
            raise KeyNotFoundError(key)

        self._size -= 1
        # Climb the chain of single-child nodes that only this key uses and cut
        # it off at the first node with other children (or at the root).
        edge = NUL
        while not node.is_root() and len(node.children) == 1:
            edge = node.character
            node = node.parent
        node.remove_child(edge)
        logger.debug("Removed %r, pruned edge %r", key, edge)

    def add_words(self, words: Iterable[str]) -> int:
        """Add every word. Nothing is added if any word has an unsupported character."""
        words = list(words)
        for word in words:
            check_word(word)
        for word in words:
            self.add(word)
        return len(words)

    def add_from_file(self, path: str, progress=False) -> int:
        """Add the words in a file with one word per line.

        The whole file is read and checked before anything is added, so a
        LoadError leaves the trie as it was. Returns the number of lines added.
        """
        words = read_words(path)
        it = tqdm(words, desc="Loading", unit="words") if progress else words
        for word in it:
            self.add(word)
        logger.info("Loaded %d words from %s (%d keys)", len(words), path, self._size)
        return len(words)

    # ---

    def keys(self) -> list[str]:
        return self.prefix_search("")

    def prefix_search(self, prefix: str) -> list[str]:
        """Return all keys that start with prefix.

        Keys come back in the order of the trie's children maps (insertion order),
        not sorted. Sort them yourself if you need a stable order.
        """
        node = self.find_node(prefix)
        if node is None:
            return []
        keys = []
        collect(node, prefix, keys)
        return keys

    def fuzzy_search(self, pattern: str) -> list[str]:
        """Return, sorted, every key that contains pattern as a subsequence."""
        check_word(pattern)
        masks = suffix_masks(pattern)
        n = len(pattern)
        keys = []

        stack = [(self._root, "", 0)]
        while stack:
            node, matched, pos = stack.pop()
            if pos == n:
                collect(node, matched, keys)
                continue

            m = masks[pos]
            want = pattern[pos]
            for ch, child in node.children.items():
                # The subtree needs every letter left in the pattern.
                if m & (child.mask ^ m):
                    continue
                stack.append((child, matched + ch, pos + 1 if ch == want else pos))

        keys.sort()
        return keys


def collect(node: Node, prefix: str, keys: list[str]):
    """Append every key at or below node to keys. prefix spells the path to node."""
    stack = [(node, prefix)]
    while stack:
        n, pre = stack.pop()
        if n.is_terminal:
            keys.append(pre)
            continue
        # Reversed so that keys pop off the stack in children-map order.
        for ch, child in reversed(n.children.items()):
            stack.append((child, pre if child.is_terminal else pre + ch))


def read_words(path: str) -> list[str]:
    """Read a word list with one word per line, skipping blank lines."""
    words = []
    try:
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                word = line.strip()
                if not word:
                    continue
                try:
                    check_word(word)
                except UnsupportedCharacterError as e:
                    raise LoadError(path, str(e), line_number) from e
                words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e
    return words


def make_trie(path: str, progress=False) -> Trie:
    t = Trie()
    t.add_from_file(path, progress=progress)
    return t


def reverse_lookup(node: Node) -> str:
    """Return the key spelled by the path from the root down to node."""
    chars = []
    while not node.is_root():
        if not node.is_terminal:
            chars.append(node.character)
        node = node.parent
    return "".join(reversed(chars))


def assert_invariants(trie: Trie):
    """Check masks, parent links and sentinels on every node of the trie."""
    root = trie.root
    assert root.is_root()
    assert not root.is_terminal

    num_keys = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_terminal:
            assert node.character == NUL
            assert not node.children
            assert node.mask == 0
            num_keys += 1
            continue
        if not node.is_root():
            # A character node with no children is a chain that removal missed.
            assert node.children, f"dangling {node!r}"

        expected = letter_bit(node.character)
        for k, child in node.children.items():
            assert child.parent is node
            assert child.character == k
            assert child.is_terminal == (k == NUL)
            expected |= letter_bit(k) | child.mask
            stack.append(child)
        assert node.mask == expected, f"{node!r}: expected mask {expected:#x}"

    assert num_keys == trie.size, f"{num_keys} sentinels, size={trie.size}"
