"""Exceptions raised by the trie and its loaders."""


class TrieError(Exception):
    """Base class for everything raised by fuzzytrie."""


class UnsupportedCharacterError(TrieError, ValueError):
    """A key or query contains a character outside a-z."""

    def __init__(self, char: str, key: str | None = None):
        self.char = char
        self.key = key
        msg = f"unsupported character {char!r}"
        if key is not None:
            msg += f" in {key!r}"
        super().__init__(msg)


class KeyNotFoundError(TrieError, KeyError):
    """remove() was called with a key that isn't in the trie."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"key not found: {self.key!r}"


class LoadError(TrieError):
    """A word list could not be read into the trie."""

    def __init__(self, path: str, reason: str, line_number: int | None = None):
        self.path = path
        self.line_number = line_number
        where = path if line_number is None else f"{path}:{line_number}"
        super().__init__(f"{where}: {reason}")
