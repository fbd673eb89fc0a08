from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List

from ..engines.interfaces import SolarPositionProvider

ModelFactory = Callable[..., SolarPositionProvider]

@dataclass
class ModelRegistry:
    _factories: Dict[str, ModelFactory]

    def get(self, name: str) -> ModelFactory:
        if name not in self._factories:
            raise KeyError(f"Unknown model '{name}'. Available: {sorted(self._factories)}")
        return self._factories[name]

    def list(self) -> List[str]:
        return sorted(self._factories.keys())

    def register(self, name: str, factory: ModelFactory, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._factories):
            raise KeyError(f"Model '{name}' already exists. Use overwrite=True to replace.")
        self._factories[name] = factory
