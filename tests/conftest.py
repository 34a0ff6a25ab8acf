import pytest

from kfserving_credentials import (
    Identity, ResourceLookup, ResourceLookupError, SecretRef, SecretResource,
)
from kfserving_credentials.providers.gcs import GCS_CREDENTIAL_FILE_NAME
from kfserving_credentials.providers.s3 import (
    AWS_ACCESS_KEY_ID_NAME, AWS_SECRET_ACCESS_KEY_NAME, S3_ENDPOINT_ANNOTATION,
)


class FakeLookup(ResourceLookup):
    """In-memory lookup; names in *failing* raise ResourceLookupError on any get."""

    def __init__(self, identities=(), secrets=(), failing=()):
        self.identities = {(i.namespace, i.name): i for i in identities}
        self.secrets = {(s.namespace, s.name): s for s in secrets}
        self.failing = set(failing)
        self.secret_calls: list[tuple[str, str]] = []

    def get_identity(self, namespace, name):
        if name in self.failing:
            raise ResourceLookupError(f"backend unavailable fetching {namespace}/{name}")
        return self.identities.get((namespace, name))

    def get_secret(self, namespace, name):
        self.secret_calls.append((namespace, name))
        if name in self.failing:
            raise ResourceLookupError(f"backend unavailable fetching {namespace}/{name}")
        return self.secrets.get((namespace, name))


def make_identity(*secret_names, namespace="default", name="default"):
    return Identity(namespace=namespace, name=name,
                    secrets=[SecretRef(name=s, namespace=namespace) for s in secret_names])


def s3_secret(name="s3-secret", endpoint=None, namespace="default", extra=None):
    annotations = {S3_ENDPOINT_ANNOTATION: endpoint} if endpoint is not None else {}
    data = {AWS_ACCESS_KEY_ID_NAME: b"", AWS_SECRET_ACCESS_KEY_NAME: b""}
    data.update(extra or {})
    return SecretResource(name=name, namespace=namespace, data=data, annotations=annotations)


def gcs_secret(name="user-gcp-sa", namespace="default"):
    return SecretResource(name=name, namespace=namespace,
                          data={GCS_CREDENTIAL_FILE_NAME: b""})


def other_secret(name="default-token-abcde", namespace="default"):
    return SecretResource(name=name, namespace=namespace,
                          data={"token": b"eyJ...", "ca.crt": b"---"},
                          annotations={"kubernetes.io/service-account.name": "default"})


@pytest.fixture
def s3_only_lookup():
    return FakeLookup(identities=[make_identity("s3-secret")],
                      secrets=[s3_secret(endpoint="s3.aws.com")])
