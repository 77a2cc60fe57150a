"""
registry.py — Visualizer Registry
==================================
Maps a visualizer id to its config card and a zero-arg factory.  `get()`
always returns a FRESH instance so two sessions never share a structure.

Listeners are notified (no arguments) whenever the catalog changes.
"""

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple

from visualizers.base import Visualizer, VisualizerConfig

logger = logging.getLogger(__name__)

VisualizerFactory = Callable[[], Visualizer]


class VisualizerRegistry:
    def __init__(self):
        self._entries:    Dict[str, Tuple[VisualizerConfig, VisualizerFactory]] = {}
        self._listeners:  Set[Callable[[], None]] = set()

    # ---------- mutation ----------
    def register(self, config: VisualizerConfig, factory: VisualizerFactory) -> None:
        if config.id in self._entries:
            logger.warning('Visualizer "%s" is already registered. Overwriting.', config.id)
        self._entries[config.id] = (config, factory)
        self._notify()

    def unregister(self, visualizer_id: str) -> bool:
        if self._entries.pop(visualizer_id, None) is None:
            return False
        logger.info('Visualizer "%s" unregistered', visualizer_id)
        self._notify()
        return True

    def clear(self) -> None:
        self._entries.clear()
        self._notify()

    # ---------- lookup ----------
    def get(self, visualizer_id: str) -> Optional[Visualizer]:
        entry = self._entries.get(visualizer_id)
        return entry[1]() if entry else None

    def get_config(self, visualizer_id: str) -> Optional[VisualizerConfig]:
        entry = self._entries.get(visualizer_id)
        return entry[0] if entry else None

    def get_all(self) -> List[VisualizerConfig]:
        return [config for config, _ in self._entries.values()]

    def get_by_category(self, category: str) -> List[VisualizerConfig]:
        return [c for c in self.get_all() if c.category == category]

    def get_categories(self) -> List[str]:
        return sorted({c.category for c in self.get_all()})

    def has(self, visualizer_id: str) -> bool:
        return visualizer_id in self._entries

    @property
    def count(self) -> int:
        return len(self._entries)

    # ---------- observers ----------
    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.add(listener)
        return lambda: self._listeners.discard(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
