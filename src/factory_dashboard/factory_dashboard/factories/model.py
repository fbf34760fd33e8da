from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Factory:
    factory_id: str
    name: str
    location: str
