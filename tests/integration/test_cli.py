import json
import logging
import pytest
import yaml
from click.testing import CliRunner
from helm_images.CLI.main import cli

MANIFESTS = """---
# Source: chart/templates/deployment.yaml
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
spec:
  template:
    spec:
      containers:
        - name: web
          image: nginx:1.25
---
# Source: chart/templates/pod.yaml
apiVersion: v1
kind: Pod
metadata:
  name: debug
spec:
  containers:
    - name: debug
      image: busybox:1.36
"""


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    for name in ('KINDS', 'IMAGE_KEYWORD', 'SKIP_ERRORS', 'LOG_LEVEL'):
        monkeypatch.delenv(f'HELM_IMAGES_{name}', raising=False)
    yield
    logger = logging.getLogger('helm_images')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def invoke(args, input=None):
    runner = CliRunner()
    return runner.invoke(cli, ['--env-file', 'does-not-exist.env'] + args, input=input)


def test_cli_help():
    result = invoke(['--help'])
    assert result.exit_code == 0
    assert 'Fetch all images' in result.output


def test_cli_get_json_from_stdin():
    result = invoke(['get', '-o', 'json'], input=MANIFESTS)
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {'kind': 'Deployment', 'name': 'web', 'image': ['nginx:1.25']},
        {'kind': 'Pod', 'name': 'debug', 'image': ['busybox:1.36']},
    ]


def test_cli_get_yaml_from_file(tmp_path):
    manifest_file = tmp_path / 'rendered.yaml'
    manifest_file.write_text(MANIFESTS)
    result = invoke(['get', str(manifest_file), '--kind', 'Pod'])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == [
        {'kind': 'Pod', 'name': 'debug', 'image': ['busybox:1.36']},
    ]


def test_cli_get_table():
    result = invoke(['get', '-o', 'table'], input=MANIFESTS)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ['KIND', 'NAME', 'IMAGE']
    assert lines[2].split() == ['Deployment', 'web', 'nginx:1.25']
    assert lines[3].split() == ['Pod', 'debug', 'busybox:1.36']


def test_cli_get_rejects_unknown_kind():
    result = invoke(['get', '--kind', 'Service'], input=MANIFESTS)
    assert result.exit_code == 2


def test_cli_get_extraction_error():
    result = invoke(['get'], input='kind: 5\n')
    assert result.exit_code == 1
    assert "'kind' is not type string" in result.output


def test_cli_get_skip_errors():
    result = invoke(['get', '-o', 'json', '--skip-errors'], input='kind: 5\n---\n' + MANIFESTS)
    assert result.exit_code == 0
    assert '"busybox:1.36"' in result.output


def test_cli_kinds():
    result = invoke(['kinds'])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == 'Deployment'
    assert 'Receiver' in result.output.splitlines()


def test_cli_version():
    result = invoke(['version'])
    assert result.exit_code == 0
    assert 'helm-images version: 0.1.0' in result.output


MIRRORED = """---
kind: Pod
metadata:
  name: a
spec:
  containers:
    - image: quay.io/prometheus/prometheus:v2
    - image: docker.io/library/nginx:1.25
---
kind: Pod
metadata:
  name: b
spec:
  containers:
    - image: docker.io/library/nginx:1.25
---
kind: Pod
metadata:
  name: c
spec:
  containers:
    - image: ghcr.io/org/tool:1
"""


def test_cli_get_registry():
    result = invoke(['get', '-o', 'json', '--registry', 'quay.io'], input=MIRRORED)
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {'kind': 'Pod', 'name': 'a', 'image': ['quay.io/prometheus/prometheus:v2']},
    ]


def test_cli_get_registry_repeated():
    result = invoke(['get', '-o', 'json', '-r', 'ghcr.io', '-r', 'quay.io/'], input=MIRRORED)
    assert result.exit_code == 0
    assert [record['name'] for record in json.loads(result.output)] == ['a', 'c']


def test_cli_get_registry_needs_full_host():
    result = invoke(['get', '-o', 'json', '--registry', 'docker'], input=MIRRORED)
    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_cli_get_unique():
    result = invoke(['get', '-o', 'json', '--unique'], input=MIRRORED)
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        'quay.io/prometheus/prometheus:v2',
        'docker.io/library/nginx:1.25',
        'ghcr.io/org/tool:1',
    ]


def test_cli_get_unique_with_registry():
    result = invoke(['get', '-u', '-r', 'docker.io'], input=MIRRORED)
    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == ['docker.io/library/nginx:1.25']


def test_cli_get_unique_table():
    result = invoke(['get', '-u', '-o', 'table'], input=MIRRORED)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == 'IMAGE'
    assert lines[2:] == [
        'quay.io/prometheus/prometheus:v2',
        'docker.io/library/nginx:1.25',
        'ghcr.io/org/tool:1',
    ]
