"""CLI configuration file."""

import os

import yaml

from kfserving_credentials.core.constants import DEFAULT_NAMESPACE, DEFAULT_SERVICE_ACCOUNT

CONFIG_FILE = "kfserving-credentials.yaml"


def load_config(path: str) -> dict:
    """Load kfserving-credentials.yaml or return the defaults."""
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = {}
    cfg.setdefault("namespace", DEFAULT_NAMESPACE)
    cfg.setdefault("serviceAccountName", DEFAULT_SERVICE_ACCOUNT)
    return cfg
