"""Secret classification — which provider shape a secret's field names match."""

from kfserving_credentials.pacts.types import CredentialShape, SecretResource
from kfserving_credentials.providers import PROVIDERS

_BY_SHAPE = {p.shape: p for p in PROVIDERS}


def classify(secret: SecretResource) -> CredentialShape:
    """Return the first shape whose required data keys are all present.

    Only key names matter: empty values count as present and extra keys
    are ignored. Byte content is never inspected.
    """
    for provider in PROVIDERS:
        if all(key in secret.data for key in provider.required_keys):
            return provider.shape
    return CredentialShape.UNKNOWN


def provider_for(shape: CredentialShape):
    """Provider instance for a shape, or None for UNKNOWN."""
    return _BY_SHAPE.get(shape)
