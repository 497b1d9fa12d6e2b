"""A single vertex of the trie, plus the letter bitmasks used to prune searches.

Every node carries a 26-bit mask of the letters that occur on the node itself or
anywhere below it:

    mask(node) = bit(node.character) | OR(bit(child.character) | mask(child))

Keys end in a synthetic child keyed by NUL with is_terminal set. NUL has no bit,
so sentinels never contribute to a mask.
"""

from typing import Iterable, Self

from fuzzytrie.errors import UnsupportedCharacterError

LETTER_A = ord("a")
LETTER_Z = ord("z")
NUL = "\0"


def letter_bit(ch: str) -> int:
    if ch == NUL:
        return 0
    code = ord(ch)
    if code < LETTER_A or code > LETTER_Z:
        raise UnsupportedCharacterError(ch)
    return 1 << (code - LETTER_A)


def word_mask(chars: Iterable[str]) -> int:
    m = 0
    for ch in chars:
        m |= letter_bit(ch)
    return m


def check_word(word: str):
    """Raise UnsupportedCharacterError if word has anything other than a-z."""
    for ch in word:
        if not "a" <= ch <= "z":
            raise UnsupportedCharacterError(ch, word)


class Node:
    character: str
    is_terminal: bool
    mask: int
    parent: Self | None
    """Structural back-reference; the parent owns this node, not vice versa."""
    children: dict[str, Self]

    __slots__ = ("character", "is_terminal", "mask", "parent", "children")

    def __init__(
        self,
        parent: Self | None = None,
        character: str = NUL,
        mask: int = 0,
        is_terminal: bool = False,
    ):
        self.character = character
        self.is_terminal = is_terminal
        self.mask = mask
        self.parent = parent
        self.children = {}

    def __repr__(self):
        ch = "NUL" if self.character == NUL else self.character
        term = " terminal" if self.is_terminal else ""
        return f"Node({ch}, mask={self.mask:#x}, children={len(self.children)}{term})"

    def is_root(self):
        return self.parent is None

    def new_child(
        self,
        parent: Self,
        key: str,
        mask: int,
        character: str,
        is_terminal: bool,
    ) -> Self:
        """Create a child and register it under key. Masks are left to the caller."""
        node = Node(parent, character, mask, is_terminal)
        self.children[key] = node
        return node

    def remove_child(self, key: str):
        """Detach the child under key and recompute masks from here up to the root."""
        child = self.children.pop(key)
        child.parent = None

        self.recalculate_mask()
        parent = self.parent
        while parent is not None:
            parent.recalculate_mask()
            parent = parent.parent

    def recalculate_mask(self):
        m = letter_bit(self.character)
        for k, child in self.children.items():
            m |= letter_bit(k) | child.mask
        self.mask = m

    def num_nodes(self):
        n = 0
        stack = [self]
        while stack:
            node = stack.pop()
            n += 1
            stack.extend(node.children.values())
        return n
