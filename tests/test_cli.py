import pytest
import yaml

from kfserving_credentials.cli import main


def _write_cluster(path, endpoint="s3.aws.com"):
    path.mkdir()
    (path / "sa.yaml").write_text(yaml.dump({
        "apiVersion": "v1", "kind": "ServiceAccount",
        "metadata": {"name": "default", "namespace": "default"},
        "secrets": [{"name": "s3-secret", "namespace": "default"},
                    {"name": "default-token-xyz"},
                    {"name": "deleted-secret"}],
    }))
    (path / "secrets.yaml").write_text(yaml.dump_all([
        {"apiVersion": "v1", "kind": "Secret",
         "metadata": {"name": "s3-secret", "namespace": "default",
                      "annotations": {"serving.kubeflow.org/s3-endpoint": endpoint}},
         "data": {"awsAccessKeyID": "", "awsSecretAccessKey": ""}},
        {"apiVersion": "v1", "kind": "Secret",
         "metadata": {"name": "default-token-xyz", "namespace": "default"},
         "data": {"token": "dG9rZW4="}},
    ]))


def _write_configuration(path):
    path.write_text(yaml.dump({
        "apiVersion": "serving.knative.dev/v1alpha1", "kind": "Configuration",
        "metadata": {"name": "sklearn", "namespace": "default"},
        "spec": {"revisionTemplate": {"spec": {"container": {"image": "sklearnserver"}}}},
    }))


def test_injects_and_writes_output(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    _write_cluster(cluster)
    descriptor = tmp_path / "config.yaml"
    _write_configuration(descriptor)
    out = tmp_path / "out.yaml"

    main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
          "--output", str(out), "--config", str(tmp_path / "none.yaml")])

    patched = yaml.safe_load(out.read_text())
    env = patched["spec"]["revisionTemplate"]["spec"]["container"]["env"]
    assert [e["name"] for e in env] == [
        "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "S3_ENDPOINT", "AWS_ENDPOINT_URL",
    ]
    assert env[3]["value"] == "https://s3.aws.com"
    err = capsys.readouterr().err
    assert "Parsed manifests" in err
    assert "1 warning injecting credentials from ServiceAccount/default/default:" in err
    assert "default/deleted-secret" in err
    assert f"Wrote {out}" in err


def test_writes_to_stdout_by_default(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    _write_cluster(cluster)
    descriptor = tmp_path / "config.yaml"
    _write_configuration(descriptor)

    main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
          "--config", str(tmp_path / "none.yaml")])

    patched = yaml.safe_load(capsys.readouterr().out)
    assert patched["metadata"]["name"] == "sklearn"
    assert len(patched["spec"]["revisionTemplate"]["spec"]["container"]["env"]) == 4


def test_config_file_supplies_service_account(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    _write_cluster(cluster)
    descriptor = tmp_path / "config.yaml"
    _write_configuration(descriptor)
    config = tmp_path / "kfserving-credentials.yaml"
    config.write_text(yaml.dump({"namespace": "default", "serviceAccountName": "nobody"}))

    with pytest.raises(SystemExit) as exc_info:
        main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
              "--config", str(config)])

    assert exc_info.value.code == 1
    assert "ServiceAccount 'default/nobody' not found" in capsys.readouterr().err


def test_missing_manifest_dir(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--from-dir", str(tmp_path / "nope"), "--descriptor", "x.yaml"])

    assert exc_info.value.code == 1
    assert "Manifest directory not found" in capsys.readouterr().err


def test_unsupported_descriptor(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    _write_cluster(cluster)
    descriptor = tmp_path / "cm.yaml"
    descriptor.write_text(yaml.dump({"kind": "ConfigMap", "metadata": {"name": "cm"}}))

    with pytest.raises(SystemExit):
        main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
              "--config", str(tmp_path / "none.yaml")])

    assert "ConfigMap/cm" in capsys.readouterr().err


def test_malformed_descriptor_exits_cleanly(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    _write_cluster(cluster)
    descriptor = tmp_path / "bad.yaml"
    descriptor.write_text("kind: [unclosed\n")

    with pytest.raises(SystemExit) as exc_info:
        main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
              "--config", str(tmp_path / "none.yaml")])

    assert exc_info.value.code == 1
    assert "not valid YAML" in capsys.readouterr().err


def test_no_warnings_no_header(tmp_path, capsys):
    cluster = tmp_path / "cluster"
    cluster.mkdir()
    (cluster / "sa.yaml").write_text(yaml.dump({
        "kind": "ServiceAccount", "metadata": {"name": "default", "namespace": "default"},
    }))
    descriptor = tmp_path / "config.yaml"
    _write_configuration(descriptor)

    main(["--from-dir", str(cluster), "--descriptor", str(descriptor),
          "--config", str(tmp_path / "none.yaml")])

    assert "warning" not in capsys.readouterr().err
