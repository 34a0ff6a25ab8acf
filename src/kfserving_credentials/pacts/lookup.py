"""Lookup capability consumed by the credential builder."""

from kfserving_credentials.pacts.types import Identity, SecretResource


class ResourceLookup:
    """Read access to identities and secrets.

    Both methods return ``None`` when the resource does not exist and raise
    ResourceLookupError when the store itself fails. Timeouts and retries
    are the implementation's business; the builder calls each method once.
    """

    def get_identity(self, namespace: str, name: str) -> Identity | None:
        raise NotImplementedError

    def get_secret(self, namespace: str, name: str) -> SecretResource | None:
        raise NotImplementedError
