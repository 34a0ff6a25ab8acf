"""kfserving-credentials — wire S3/GCS credentials from a ServiceAccount into workloads.

Re-exports the public API.
"""

from kfserving_credentials.pacts.types import (
    CredentialShape, Identity, Patch, SecretRef, SecretResource, WorkloadDescriptor,
)
from kfserving_credentials.pacts.errors import (
    CredentialError, DescriptorError, NotFoundError, ResourceLookupError,
)
from kfserving_credentials.pacts.lookup import ResourceLookup
from kfserving_credentials.core.classify import classify
from kfserving_credentials.core.builder import CredentialBuilder, apply_patch

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
    "classify",
    "CredentialBuilder",
    "apply_patch",
]
