from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from html import escape
import logging
from typing import Generic, TypeVar

from uniswap_dashboard.domain.exceptions import DashboardFetchError


logger = logging.getLogger(__name__)


T = TypeVar("T")


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class DataComponent(ABC, Generic[T]):
    """A display component that fetches once on mount and again on retry.

    Every load starts from a clean slate: data and error from a previous
    load are dropped before the new fetch is issued.
    """

    title = ""

    def __init__(self, *, retry_href: str):
        self.retry_href = retry_href
        self.state = LoadState.IDLE
        self.data: T | None = None
        self.error: str | None = None
        self.fetch_count = 0

    @abstractmethod
    def fetch(self) -> T:
        ...

    def mount(self) -> DataComponent[T]:
        self.load()
        return self

    def load(self) -> None:
        self.state = LoadState.LOADING
        self.data = None
        self.error = None
        self.fetch_count += 1
        try:
            data = self.fetch()
        except DashboardFetchError as exc:
            logger.warning(
                "components: load_failed component=%s attempt=%s error=%s",
                type(self).__name__,
                self.fetch_count,
                exc,
            )
            self.error = str(exc)
            self.state = LoadState.ERROR
            return
        self.data = data
        self.state = LoadState.LOADED

    def retry(self) -> None:
        self.load()

    @property
    def is_loading(self) -> bool:
        return self.state in (LoadState.IDLE, LoadState.LOADING)

    def render(self) -> str:
        if self.state is LoadState.ERROR:
            return self.render_error()
        if self.is_loading:
            return self.render_loading()
        return self.render_loaded()

    def render_loading(self) -> str:
        return (
            f'<section class="component loading"><h2>Loading {escape(self.title)}...</h2></section>'
        )

    def render_error(self) -> str:
        return (
            '<section class="component error">'
            f"<h2>Error Loading {escape(self.title)}</h2>"
            f"<p>{escape(self.error or '')}</p>"
            f"{action_link(self.retry_href, 'Retry')}"
            "</section>"
        )

    @abstractmethod
    def render_loaded(self) -> str:
        ...


def action_link(href: str, label: str) -> str:
    return f'<a class="button" href="{escape(href, quote=True)}">{escape(label)}</a>'


def metric(label: str, value: str, *, css_class: str = "metric") -> str:
    return f'<div class="{css_class}"><h3>{escape(label)}</h3><p>{escape(value)}</p></div>'
