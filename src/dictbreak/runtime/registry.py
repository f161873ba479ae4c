"""Registry holding one break engine per script."""

import threading
from typing import Callable, Dict, Mapping, Optional, Set

from ..core.abc import Logger
from ..dictionary.loader import DictionaryLoadError
from .engine import DictionaryBreakEngine

EngineFactory = Callable[[], DictionaryBreakEngine]


class EngineRegistry:
    """
    Lazily builds and caches dictionary break engines keyed by script tag.

    An engine whose dictionary fails to load is never handed out; the script
    is remembered as unavailable and the failure is logged once.
    """

    def __init__(self, factories: Optional[Mapping[str, EngineFactory]] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize registry.

        Args:
            factories: Script tag -> zero-argument callable building the engine
            logger: Optional structured logger
        """
        self.factories: Dict[str, EngineFactory] = dict(factories or {})
        self.log = logger
        self._engines: Dict[str, DictionaryBreakEngine] = {}
        self._failed: Set[str] = set()
        self._lock = threading.Lock()

    def register(self, engine: DictionaryBreakEngine) -> DictionaryBreakEngine:
        """
        Add an engine, keeping the existing one if an equal engine is registered.

        Returns:
            DictionaryBreakEngine: The engine now registered for the script
        """
        with self._lock:
            existing = self._engines.get(engine.script)
            if existing is not None:
                return existing
            self._engines[engine.script] = engine
            self._failed.discard(engine.script)
            return engine

    def engine_for_script(self, script: str) -> Optional[DictionaryBreakEngine]:
        """
        Get the engine for a script tag, building it on first use.

        Returns:
            Optional[DictionaryBreakEngine]: The engine, or None when no factory
            is known or its dictionary could not be loaded
        """
        with self._lock:
            engine = self._engines.get(script)
            if engine is not None:
                return engine

            factory = self.factories.get(script)
            if factory is None or script in self._failed:
                if self.log:
                    self.log.warn("engine_unavailable", script=script,
                                  reason="dictionary_failed" if factory else "no_factory")
                return None

            try:
                engine = factory()
            except DictionaryLoadError as e:
                self._failed.add(script)
                if self.log:
                    self.log.error("dictionary_load_failed", script=script, error=str(e))
                return None

            self._engines[script] = engine
            return engine

    def engine_for(self, c: int) -> Optional[DictionaryBreakEngine]:
        """Get the built engine that handles a code point, if any."""
        with self._lock:
            engines = list(self._engines.values())
        for engine in engines:
            if engine.handles(c):
                return engine
        return None

    def build_all(self) -> Dict[str, Optional[DictionaryBreakEngine]]:
        """Build every engine with a known factory; return script -> engine or None."""
        return {script: self.engine_for_script(script) for script in list(self.factories)}

    def __contains__(self, script: str) -> bool:
        return script in self._engines

    def __len__(self) -> int:
        return len(self._engines)
