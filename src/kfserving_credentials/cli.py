"""CLI — inject service account credentials into a workload manifest."""

import argparse
import os
import sys

from kfserving_credentials.core.builder import CredentialBuilder
from kfserving_credentials.core.constants import IDENTITY_KIND
from kfserving_credentials.io.config import CONFIG_FILE, load_config
from kfserving_credentials.io.output import emit_warnings, write_manifest
from kfserving_credentials.io.parsing import (
    descriptor_from_manifest, load_manifest, parse_manifests,
)
from kfserving_credentials.io.store import ManifestStore
from kfserving_credentials.pacts.errors import CredentialError


def main(argv: list[str] | None = None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inject S3/GCS credentials from a ServiceAccount's secrets into a workload"
    )
    parser.add_argument(
        "--from-dir", required=True,
        help="Directory of YAML manifests holding ServiceAccounts and Secrets",
    )
    parser.add_argument(
        "--descriptor", required=True,
        help="Workload manifest to patch (Knative Configuration/Service, Deployment, ...)",
    )
    parser.add_argument(
        "-n", "--namespace",
        help="Namespace of the service account (default: from config, else 'default')",
    )
    parser.add_argument(
        "--service-account",
        help="Service account name (default: from config, else 'default')",
    )
    parser.add_argument(
        "--output",
        help="Where to write the patched manifest (default: stdout)",
    )
    parser.add_argument(
        "--config", default=CONFIG_FILE,
        help=f"Configuration file (default: {CONFIG_FILE})",
    )
    args = parser.parse_args(argv)

    if not os.path.isdir(args.from_dir):
        print(f"Manifest directory not found: {args.from_dir}", file=sys.stderr)
        sys.exit(1)

    config = load_config(args.config)
    namespace = args.namespace or config["namespace"]
    service_account = args.service_account or config["serviceAccountName"]

    manifests = parse_manifests(args.from_dir)
    kinds = {k: len(v) for k, v in manifests.items()}
    print(f"Parsed manifests: {kinds}", file=sys.stderr)

    warnings: list[str] = []
    try:
        workload = load_manifest(args.descriptor)
        descriptor = descriptor_from_manifest(workload)
        builder = CredentialBuilder(ManifestStore(manifests, default_namespace=namespace))
        builder.inject(namespace, service_account, descriptor, warnings=warnings)
    except (CredentialError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    emit_warnings(warnings, f"{IDENTITY_KIND}/{namespace}/{service_account}")
    write_manifest(workload, args.output)


if __name__ == "__main__":
    main()
