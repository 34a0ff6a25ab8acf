"""Public data types — the contracts shared by the builder, providers and lookups."""

import copy
import enum
from dataclasses import dataclass, field


def _list_field(obj: dict, key: str) -> list:
    """Return obj[key] as a list, creating it when missing or null (``env: null`` in YAML)."""
    value = obj.get(key)
    if value is None:
        value = obj[key] = []
    return value


class CredentialShape(enum.Enum):
    """Storage-provider shape a secret resource matches."""
    OBJECT_STORE_KEY_PAIR = "s3"
    FILE_BLOB_CREDENTIAL = "gcs"
    UNKNOWN = "unknown"


@dataclass
class SecretRef:
    """Reference to a secret attached to an identity (empty namespace = identity's)."""
    name: str
    namespace: str = ""


@dataclass
class Identity:
    """Namespace-scoped principal (a ServiceAccount) with its attached secrets, in order."""
    namespace: str
    name: str
    secrets: list[SecretRef] = field(default_factory=list)


@dataclass
class SecretResource:
    """A Secret as seen by the classifier: named byte fields plus annotations."""
    name: str
    namespace: str
    data: dict[str, bytes] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass
class Patch:
    """Insertions produced for one classified secret, applied in list order."""
    env: list[dict] = field(default_factory=list)
    volumes: list[dict] = field(default_factory=list)
    volume_mounts: list[dict] = field(default_factory=list)


@dataclass
class WorkloadDescriptor:
    """Mutable container spec nested in its pod spec.

    Both dicts are K8s-shaped (``env``/``volumeMounts`` on the container,
    ``volumes`` on the pod spec) and may be views into a larger manifest,
    in which case appending here mutates that manifest.
    """
    container: dict = field(default_factory=dict)
    pod_spec: dict = field(default_factory=dict)

    @property
    def env(self) -> list[dict]:
        return _list_field(self.container, "env")

    @property
    def volume_mounts(self) -> list[dict]:
        return _list_field(self.container, "volumeMounts")

    @property
    def volumes(self) -> list[dict]:
        return _list_field(self.pod_spec, "volumes")

    def clone(self) -> "WorkloadDescriptor":
        """Deep copy, detached from any manifest this descriptor points into."""
        # Shared memo keeps the container inside the copied pod spec when nested
        memo: dict = {}
        return WorkloadDescriptor(container=copy.deepcopy(self.container, memo),
                                  pod_spec=copy.deepcopy(self.pod_spec, memo))
