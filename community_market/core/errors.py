"""Domain exceptions raised by the catalog and community services."""


class CommunityMarketError(Exception):
    """Base class for domain errors."""


class NotFoundError(CommunityMarketError):
    """Raised when a mutation targets a record that does not exist."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} '{identifier}' not found")


class DuplicateSlugError(CommunityMarketError):
    """Raised when a public identifier is already taken."""

    def __init__(self, slug: str, kind: str = "Store"):
        self.slug = slug
        self.kind = kind
        super().__init__(f"{kind} slug '{slug}' is already in use")


class InvalidRequestError(CommunityMarketError, ValueError):
    """Raised for arguments a service refuses, e.g. a page number below 1."""
