from __future__ import annotations


class DomainError(Exception):
    """Base for dashboard domain errors."""


class SubgraphNotConfiguredError(DomainError):
    """Requested subgraph has no configured upstream."""


class RelayUpstreamError(DomainError):
    """Relaying a query to the upstream gateway failed."""


class DashboardFetchError(DomainError):
    """Dashboard data could not be loaded; the message is shown to the user."""
