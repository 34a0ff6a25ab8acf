"""Public helper functions for building K8s env/volume fragments."""

import base64


def literal_env(name: str, value: str) -> dict:
    """Env var with an inline value."""
    return {"name": name, "value": value}


def secret_key_env(name: str, secret_name: str, key: str) -> dict:
    """Env var sourced from one key of a Secret (never inlined)."""
    return {
        "name": name,
        "valueFrom": {"secretKeyRef": {"name": secret_name, "key": key}},
    }


def secret_volume(volume_name: str, secret_name: str) -> dict:
    """Pod volume backed by a whole Secret."""
    return {"name": volume_name, "secret": {"secretName": secret_name}}


def read_only_mount(volume_name: str, mount_path: str) -> dict:
    """Container volume mount, read-only."""
    return {"name": volume_name, "readOnly": True, "mountPath": mount_path}


def _secret_bytes(secret: dict, key: str) -> bytes | None:
    """Get raw bytes from a K8s Secret manifest (base64 data or plain stringData)."""
    # stringData is plain text (rare in rendered output, but possible)
    val = (secret.get("stringData") or {}).get(key)
    if val is not None:
        return str(val).encode("utf-8")
    # data is base64-encoded
    val = (secret.get("data") or {}).get(key)
    if val is None:
        return None
    if not val:
        return b""
    try:
        return base64.b64decode(val, validate=True)
    except (ValueError, TypeError):
        return str(val).encode("utf-8")  # fallback: keep raw if decode fails
