"""GCS provider — service account key file mounted from the secret."""

from kfserving_credentials.pacts.helpers import literal_env, read_only_mount, secret_volume
from kfserving_credentials.pacts.types import CredentialShape, Patch, SecretResource

# Secret data key holding the service account JSON key
GCS_CREDENTIAL_FILE_NAME = "gcloud-application-credentials.json"

GCS_CREDENTIAL_VOLUME_NAME = "user-gcp-sa"
GCS_CREDENTIAL_VOLUME_MOUNT_PATH = "/var/secrets/"
GCS_CREDENTIAL_ENV_KEY = "GOOGLE_APPLICATION_CREDENTIALS"


class GCSProvider:
    """Mount a GCS credential secret and point GOOGLE_APPLICATION_CREDENTIALS at it."""
    shape = CredentialShape.FILE_BLOB_CREDENTIAL
    required_keys = (GCS_CREDENTIAL_FILE_NAME,)

    def build_patch(self, secret: SecretResource) -> Patch:
        return Patch(
            env=[literal_env(GCS_CREDENTIAL_ENV_KEY, GCS_CREDENTIAL_VOLUME_MOUNT_PATH)],
            volumes=[secret_volume(GCS_CREDENTIAL_VOLUME_NAME, secret.name)],
            volume_mounts=[read_only_mount(GCS_CREDENTIAL_VOLUME_NAME,
                                           GCS_CREDENTIAL_VOLUME_MOUNT_PATH)],
        )
