"""Output — patched manifest and warnings."""

import sys

import yaml


def write_manifest(manifest: dict, path: str | None = None) -> None:
    """Write the patched manifest as YAML to path, or stdout when path is None."""
    if path is None:
        yaml.dump(manifest, sys.stdout, default_flow_style=False, sort_keys=False)
        return
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(manifest, f, default_flow_style=False, sort_keys=False)
    print(f"Wrote {path}", file=sys.stderr)


def emit_warnings(warnings: list[str], identity: str) -> None:
    """Print injection warnings for one service account to stderr, under a count header."""
    if not warnings:
        return
    noun = "warning" if len(warnings) == 1 else "warnings"
    print(f"{len(warnings)} {noun} injecting credentials from {identity}:", file=sys.stderr)
    for w in warnings:
        print(f"  ⚠ {w}", file=sys.stderr)
