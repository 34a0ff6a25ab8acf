"""Exceptions raised by the credential builder and its lookups."""


class CredentialError(Exception):
    """Base class for everything this package raises."""


class NotFoundError(CredentialError):
    """The identity (service account) does not exist."""

    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} '{namespace}/{name}' not found")
        self.kind = kind
        self.namespace = namespace
        self.name = name


class ResourceLookupError(CredentialError, LookupError):
    """The backing store failed to answer (transient or backend error, not "absent")."""


class DescriptorError(CredentialError):
    """A manifest has no container/pod template the builder knows how to patch."""
