"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an aggregate and its store.
    Each public operation runs inside a ``<service>.<operation>`` logfire span.
    """

    pass
