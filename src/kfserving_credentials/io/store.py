"""In-memory lookup over parsed manifests."""

from kfserving_credentials.core.constants import IDENTITY_KIND, SECRET_KIND
from kfserving_credentials.io.parsing import identity_from_manifest, secret_from_manifest
from kfserving_credentials.pacts.lookup import ResourceLookup
from kfserving_credentials.pacts.types import Identity, SecretResource


class ManifestStore(ResourceLookup):
    """ServiceAccounts and Secrets indexed by (namespace, name).

    Manifests without metadata.namespace are placed in *default_namespace*.
    When the same (namespace, name) appears twice, the last one wins.
    """

    def __init__(self, manifests: dict[str, list[dict]], default_namespace: str = "default"):
        self.identities: dict[tuple[str, str], Identity] = {}
        self.secrets: dict[tuple[str, str], SecretResource] = {}
        for m in manifests.get(IDENTITY_KIND, []):
            identity = identity_from_manifest(m, default_namespace)
            if identity.name:
                self.identities[(identity.namespace, identity.name)] = identity
        for m in manifests.get(SECRET_KIND, []):
            secret = secret_from_manifest(m, default_namespace)
            if secret.name:
                self.secrets[(secret.namespace, secret.name)] = secret

    def get_identity(self, namespace: str, name: str) -> Identity | None:
        return self.identities.get((namespace, name))

    def get_secret(self, namespace: str, name: str) -> SecretResource | None:
        return self.secrets.get((namespace, name))
