from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Factory


class FactoryRepository(Protocol):
    def factories(self) -> Sequence[Factory]:
        raise NotImplementedError

    def get_factory(self, factory_id: str) -> Optional[Factory]:
        raise NotImplementedError

    def add_factory(self, factory: Factory) -> Sequence[Factory]:
        raise NotImplementedError
