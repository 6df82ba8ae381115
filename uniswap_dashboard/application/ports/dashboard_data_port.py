from __future__ import annotations

from typing import Protocol


class DashboardDataPort(Protocol):
    def get_pool_data(self) -> dict | None:
        ...

    def get_factories_data(self) -> dict | None:
        ...
