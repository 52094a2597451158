class ContributorsError(Exception):
    """Base class for every failure raised by this package."""


class ConfigurationError(ContributorsError):
    """Missing token or malformed config file."""


class QueryError(ContributorsError):
    """The API answered but the requested repository or organization is absent."""

    def __init__(self, key, context):
        self.key = key
        self.context = context
        super().__init__(f"Bad query: {key} '{context}' does not exist")


class TransportError(ContributorsError):
    """The GraphQL endpoint rejected the request."""

    def __init__(self, message, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class RemoteURLError(ContributorsError, ValueError):
    """A git remote could not be read as a GitHub owner/repo pair."""
