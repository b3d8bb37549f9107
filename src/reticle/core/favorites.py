"""Favorite configurations, keyed by structural equality."""

from collections.abc import Iterable, Iterator

from reticle.domain import CrosshairConfig


class FavoriteSet:
    """Ordered collection of configurations without duplicates.

    Membership is full structural equality of the configuration, not any
    preset identity. Lookups are a linear scan; favorites number in the tens.
    """

    def __init__(self, configs: Iterable[CrosshairConfig] = ()) -> None:
        self._items: list[CrosshairConfig] = []
        for config in configs:
            if not self.contains(config):
                self._items.append(config)

    def contains(self, config: CrosshairConfig) -> bool:
        return any(item == config for item in self._items)

    def toggle(self, config: CrosshairConfig) -> bool:
        """Add ``config`` if absent, remove it if present.

        Returns:
            True if the configuration is a favorite afterwards
        """
        for index, item in enumerate(self._items):
            if item == config:
                del self._items[index]
                return False
        self._items.append(config)
        return True

    def __contains__(self, config: object) -> bool:
        return isinstance(config, CrosshairConfig) and self.contains(config)

    def __iter__(self) -> Iterator[CrosshairConfig]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FavoriteSet):
            return NotImplemented
        return self._items == other._items
