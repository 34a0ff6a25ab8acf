"""Manifest parsing and adapters from K8s manifests to builder types."""

import sys
from pathlib import Path

import yaml

from kfserving_credentials.core.constants import POD_TEMPLATE_KINDS, REVISION_TEMPLATE_KINDS
from kfserving_credentials.pacts.errors import DescriptorError
from kfserving_credentials.pacts.helpers import _secret_bytes
from kfserving_credentials.pacts.types import (
    Identity, SecretRef, SecretResource, WorkloadDescriptor,
)


def parse_manifests(manifest_dir: str) -> dict[str, list[dict]]:
    """Load all YAML files under manifest_dir, classify by kind."""
    manifests: dict[str, list[dict]] = {}
    root = Path(manifest_dir)
    for yaml_file in sorted([*root.rglob("*.yaml"), *root.rglob("*.yml")]):
        try:
            with open(yaml_file, encoding="utf-8") as f:
                for doc in yaml.safe_load_all(f):
                    if not doc or not isinstance(doc, dict):
                        continue
                    kind = doc.get("kind", "Unknown")
                    manifests.setdefault(kind, []).append(doc)
        except yaml.YAMLError as exc:
            print(f"⚠ Skipping {yaml_file.name}: {exc.__class__.__name__}",
                  file=sys.stderr)
    return manifests


def load_manifest(path: str) -> dict:
    """Load a single-document YAML manifest (the workload to patch)."""
    with open(path, encoding="utf-8") as f:
        try:
            doc = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise DescriptorError(f"{path} is not valid YAML: {exc.__class__.__name__}") from exc
    if not isinstance(doc, dict):
        raise DescriptorError(f"{path} does not contain a manifest")
    return doc


def identity_from_manifest(manifest: dict, default_namespace: str = "") -> Identity:
    """Build an Identity from a ServiceAccount manifest (secrets kept in order)."""
    meta = manifest.get("metadata") or {}
    namespace = meta.get("namespace") or default_namespace
    refs = [
        SecretRef(name=s.get("name", ""), namespace=s.get("namespace", ""))
        for s in manifest.get("secrets") or []
        if isinstance(s, dict) and s.get("name")
    ]
    return Identity(namespace=namespace, name=meta.get("name", ""), secrets=refs)


def secret_from_manifest(manifest: dict, default_namespace: str = "") -> SecretResource:
    """Build a SecretResource from a Secret manifest.

    ``data`` values are base64-decoded, ``stringData`` is merged over them
    (as the API server does). Null annotation values become empty strings.
    """
    meta = manifest.get("metadata") or {}
    keys = list(manifest.get("data") or {})
    keys += [k for k in manifest.get("stringData") or {} if k not in keys]
    return SecretResource(
        name=meta.get("name", ""),
        namespace=meta.get("namespace") or default_namespace,
        data={k: _secret_bytes(manifest, k) or b"" for k in keys},
        annotations={k: "" if v is None else str(v)
                     for k, v in (meta.get("annotations") or {}).items()},
    )


def _revision_template_pod_spec(spec: dict) -> dict | None:
    """Pod spec of a Knative v1alpha1 revisionTemplate, directly or under runLatest/release."""
    holder = spec
    if "revisionTemplate" not in spec:
        holder = next((spec[k].get("configuration") for k in ("runLatest", "release")
                       if isinstance(spec.get(k), dict)), None)
        if not isinstance(holder, dict) or "revisionTemplate" not in holder:
            return None
    template = holder["revisionTemplate"]
    if template is None:
        template = holder["revisionTemplate"] = {}
    if template.get("spec") is None:
        template["spec"] = {}
    return template["spec"]


def descriptor_from_manifest(manifest: dict) -> WorkloadDescriptor:
    """Return a WorkloadDescriptor viewing into manifest (mutations apply in place).

    Knative v1alpha1 revision templates carry a single ``container``; every
    other supported kind has ``spec.template.spec.containers`` and the first
    container is the one patched.
    """
    kind = manifest.get("kind", "?")
    name = (manifest.get("metadata") or {}).get("name", "?")
    spec = manifest.get("spec") or {}

    if kind in REVISION_TEMPLATE_KINDS:
        pod_spec = _revision_template_pod_spec(spec)
        if pod_spec is not None:
            if pod_spec.get("container") is None:
                pod_spec["container"] = {}
            return WorkloadDescriptor(container=pod_spec["container"], pod_spec=pod_spec)

    if kind in POD_TEMPLATE_KINDS:
        pod_spec = (spec.get("template") or {}).get("spec")
        containers = (pod_spec or {}).get("containers") or []
        if containers:
            return WorkloadDescriptor(container=containers[0], pod_spec=pod_spec)
        raise DescriptorError(f"{kind}/{name} has no containers")

    raise DescriptorError(f"{kind}/{name} has no pod template to inject credentials into")
