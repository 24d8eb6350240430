"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities or
    repositories: merging activity, resolving presence, walking the
    friendship graph, evaluating achievements.
    """

    pass
