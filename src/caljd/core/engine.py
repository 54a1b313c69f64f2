from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .types import CalendarKind, CalendarLike
from ..engines.interfaces import CalendarEngineProtocol as CalendarEngine

@dataclass
class EngineRegistry:
    _engines: Dict[CalendarKind, CalendarEngine]

    def get(self, calendar: CalendarLike = None) -> CalendarEngine:
        kind = CalendarKind.parse(calendar)
        if kind not in self._engines:
            raise KeyError(f"No engine registered for '{kind.value}'. Available: {self.list()}")
        return self._engines[kind]

    def list(self) -> List[str]:
        return sorted(k.value for k in self._engines)

    def register(self, kind: CalendarKind, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (kind in self._engines):
            raise KeyError(f"Engine '{kind.value}' already exists. Use overwrite=True to replace.")
        self._engines[kind] = engine
