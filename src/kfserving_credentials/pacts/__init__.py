"""Public contracts — data types, lookup interface, errors and fragment helpers."""

from kfserving_credentials.pacts.types import (
    CredentialShape, Identity, Patch, SecretRef, SecretResource, WorkloadDescriptor,
)
from kfserving_credentials.pacts.errors import (
    CredentialError, DescriptorError, NotFoundError, ResourceLookupError,
)
from kfserving_credentials.pacts.lookup import ResourceLookup
from kfserving_credentials.pacts.helpers import (
    literal_env, read_only_mount, secret_key_env, secret_volume,
)

__all__ = [
    "CredentialShape",
    "Identity",
    "Patch",
    "SecretRef",
    "SecretResource",
    "WorkloadDescriptor",
    "CredentialError",
    "DescriptorError",
    "NotFoundError",
    "ResourceLookupError",
    "ResourceLookup",
    "literal_env",
    "read_only_mount",
    "secret_key_env",
    "secret_volume",
]
