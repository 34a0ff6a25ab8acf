"""Built-in credential providers, one per CredentialShape."""

from kfserving_credentials.providers.gcs import GCSProvider
from kfserving_credentials.providers.s3 import S3Provider

# Checked in this order by classify(); required key sets are disjoint
PROVIDERS = (S3Provider(), GCSProvider())

__all__ = ["GCSProvider", "PROVIDERS", "S3Provider"]
