"""S3 provider — access key pair as secretKeyRef env vars, optional endpoint."""

from kfserving_credentials.core.constants import ANNOTATION_PREFIX
from kfserving_credentials.pacts.helpers import literal_env, secret_key_env
from kfserving_credentials.pacts.types import CredentialShape, Patch, SecretResource

# Secret data keys (written by whoever authors the secret)
AWS_ACCESS_KEY_ID_NAME = "awsAccessKeyID"
AWS_SECRET_ACCESS_KEY_NAME = "awsSecretAccessKey"

# Secret annotation holding the S3-compatible endpoint host (optional)
S3_ENDPOINT_ANNOTATION = f"{ANNOTATION_PREFIX}/s3-endpoint"

# Container env var names
AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
S3_ENDPOINT = "S3_ENDPOINT"
AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"

ENDPOINT_SCHEME = "https://"


class S3Provider:
    """Wire an S3 key pair secret into a container's env."""
    shape = CredentialShape.OBJECT_STORE_KEY_PAIR
    required_keys = (AWS_ACCESS_KEY_ID_NAME, AWS_SECRET_ACCESS_KEY_NAME)

    def build_patch(self, secret: SecretResource) -> Patch:
        env = [
            secret_key_env(AWS_ACCESS_KEY_ID, secret.name, AWS_ACCESS_KEY_ID_NAME),
            secret_key_env(AWS_SECRET_ACCESS_KEY, secret.name, AWS_SECRET_ACCESS_KEY_NAME),
        ]
        endpoint = secret.annotations.get(S3_ENDPOINT_ANNOTATION)
        if endpoint is not None:
            env.append(literal_env(S3_ENDPOINT, endpoint))
            env.append(literal_env(AWS_ENDPOINT_URL, ENDPOINT_SCHEME + endpoint))
        return Patch(env=env)
