from typing import Iterable, Iterator, List, Optional

from loguru import logger

from .config import GrammarConfig
from .errors import KeyNotSetError, TagNotExistError
from .schema import Tag


class Tags:
    """
    Ordered collection of parsed tags.

    Keys are not required to be unique; lookups and mutators always
    address the first tag stored under a key. The collection keeps its
    own copies of the tags, so a tag returned by ``get`` has to be written
    back with ``set`` for a change to stick.
    """

    def __init__(self, tags: Optional[Iterable[Tag]] = None):
        self._tags: List[Tag] = [tag.model_copy(deep=True) for tag in tags or ()]

    def _index(self, key: str) -> Optional[int]:
        for i, tag in enumerate(self._tags):
            if tag.key == key:
                return i
        return None

    def len(self) -> int:
        """Return the number of stored tags."""
        return len(self._tags)

    def keys(self) -> List[str]:
        """Return the keys in storage order, duplicates included."""
        return [tag.key for tag in self._tags]

    def tags(self) -> List[Tag]:
        """Return copies of the stored tags in storage order."""
        return [tag.model_copy(deep=True) for tag in self._tags]

    def get(self, key: str) -> Tag:
        """
        Return a copy of the first tag stored under ``key``.

        Raises:
            TagNotExistError: If no tag has this key.
        """
        i = self._index(key)
        if i is None:
            raise TagNotExistError(key)
        return self._tags[i].model_copy(deep=True)

    def set(self, tag: Tag) -> None:
        """
        Replace the tag stored under ``tag.key`` in place, or append it.

        Raises:
            KeyNotSetError: If the tag has an empty key.
        """
        if not tag.key:
            raise KeyNotSetError()

        tag = tag.model_copy(deep=True)
        i = self._index(tag.key)
        if i is None:
            self._tags.append(tag)
        else:
            self._tags[i] = tag

    def delete(self, *keys: str) -> None:
        """Remove the first tag stored under each of the given keys."""
        for key in keys:
            i = self._index(key)
            if i is None:
                logger.debug(f"Delete skipped, no tag with key {key!r}")
                continue
            del self._tags[i]

    def add_options(self, key: str, *options: str) -> None:
        """Append each option the tag stored under ``key`` does not have yet."""
        i = self._index(key)
        if i is None:
            logger.debug(f"Cannot add options {options}, no tag with key {key!r}")
            return

        tag = self._tags[i]
        for option in options:
            if not tag.has_option(option):
                tag.options.append(option)

    def delete_options(self, key: str, *options: str) -> None:
        """Remove every occurrence of the given options from the tag stored under ``key``."""
        i = self._index(key)
        if i is None:
            logger.debug(f"Cannot delete options {options}, no tag with key {key!r}")
            return

        tag = self._tags[i]
        tag.options = [option for option in tag.options if option not in options]

    # Ordering primitives, usable by any index based sort.

    def less(self, i: int, j: int) -> bool:
        return self._tags[i].key < self._tags[j].key

    def swap(self, i: int, j: int) -> None:
        self._tags[i], self._tags[j] = self._tags[j], self._tags[i]

    def sort(self) -> None:
        """Sort the tags by key, ascending. Tags sharing a key keep their order."""
        self._tags.sort(key=lambda tag: tag.key)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return False
        return self._tags == other._tags

    def __str__(self) -> str:
        return GrammarConfig.TAG_SEPARATOR.join(str(tag) for tag in self._tags)

    def __repr__(self) -> str:
        return f"Tags({str(self)!r})"
