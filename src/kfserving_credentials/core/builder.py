"""Credential builder — resolve a service account's secrets and patch a workload."""

from kfserving_credentials.core.classify import classify, provider_for
from kfserving_credentials.core.constants import IDENTITY_KIND
from kfserving_credentials.pacts.errors import NotFoundError
from kfserving_credentials.pacts.lookup import ResourceLookup
from kfserving_credentials.pacts.types import CredentialShape, Patch, WorkloadDescriptor


def apply_patch(descriptor: WorkloadDescriptor, patch: Patch) -> None:
    """Append a patch's insertions to the descriptor, preserving order.

    Lists the patch leaves empty are not touched (not even created), so a
    no-op patch leaves the descriptor structurally equal to its input.
    """
    if patch.env:
        descriptor.env.extend(patch.env)
    if patch.volumes:
        descriptor.volumes.extend(patch.volumes)
    if patch.volume_mounts:
        descriptor.volume_mounts.extend(patch.volume_mounts)


class CredentialBuilder:
    """Inject credentials from a service account's attached secrets into workloads.

    Every matching secret is applied, in the order the service account lists
    them; nothing is deduplicated, so injecting twice appends twice. There is
    no rollback: if a lookup fails midway, patches already applied stay.
    Callers wanting all-or-nothing should inject into ``descriptor.clone()``.
    """

    def __init__(self, lookup: ResourceLookup):
        self.lookup = lookup

    def inject(self, namespace: str, identity_name: str,
               descriptor: WorkloadDescriptor,
               warnings: list[str] | None = None) -> WorkloadDescriptor:
        """Patch descriptor in place with the identity's credentials and return it.

        Raises NotFoundError if the identity does not exist and
        ResourceLookupError if the store fails. Secrets matching no provider
        are skipped; missing secrets are skipped with a note in *warnings*.
        """
        identity = self.lookup.get_identity(namespace, identity_name)
        if identity is None:
            raise NotFoundError(IDENTITY_KIND, namespace, identity_name)

        for ref in identity.secrets:
            secret_ns = ref.namespace or identity.namespace
            secret = self.lookup.get_secret(secret_ns, ref.name)
            if secret is None:
                _warn(warnings, f"secret '{secret_ns}/{ref.name}' attached to "
                                f"{IDENTITY_KIND}/{identity_name} not found — skipped")
                continue
            shape = classify(secret)
            # SA token secrets and the like: skipped without a warning
            if shape is CredentialShape.UNKNOWN:
                continue
            apply_patch(descriptor, provider_for(shape).build_patch(secret))

        return descriptor


def _warn(warnings: list[str] | None, message: str) -> None:
    if warnings is not None:
        warnings.append(message)
