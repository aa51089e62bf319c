"""Base class for domain services."""


class Service:
    """Marker for domain services.

    Services hold the comment engine rules that span entities (threads,
    the vote ledger, notification fan-out) and reach storage only through
    repository interfaces.
    """
