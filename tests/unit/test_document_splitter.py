import pytest
from helm_images.errors import DecodeError
from helm_images.PARSERS.document_splitter import source_of, split_documents
from helm_images.PARSERS.kind_resolver import resolve_kind

RENDERED = """---
# Source: app/templates/serviceaccount.yaml
apiVersion: v1
kind: ServiceAccount
metadata:
  name: app
---
# Source: app/templates/deployment.yaml
apiVersion: apps/v1
kind: Deployment
metadata:
  name: app
spec:
  template:
    spec:
      containers:
        - name: app
          image: "nginx:1.25"
---
# Source: app/templates/empty.yaml
---   # trailing comment on the separator
kind: ConfigMap
"""


def test_split_documents():
    documents = split_documents(RENDERED)
    assert len(documents) == 3
    assert 'kind: ServiceAccount' in documents[0]
    assert 'kind: Deployment' in documents[1]
    assert 'kind: ConfigMap' in documents[2]
    assert [resolve_kind(doc) for doc in documents] == ['ServiceAccount', 'Deployment', 'ConfigMap']


def test_split_single_document():
    assert split_documents('kind: Pod') == ['kind: Pod']


def test_split_empty_stream():
    assert split_documents('') == []
    assert split_documents('---\n---\n# nothing\n') == []


def test_document_end_marker():
    documents = split_documents('kind: Pod\n...\n---\nkind: Job\n')
    assert documents == ['kind: Pod', 'kind: Job']


def test_document_on_separator_line():
    content = 'kind: Pod\nmetadata: {name: a}\n--- {kind: Pod, metadata: {name: b}}\n'
    documents = split_documents(content)
    assert len(documents) == 2
    assert documents[0] == 'kind: Pod\nmetadata: {name: a}'
    assert resolve_kind(documents[1]) == 'Pod'
    assert 'name: b' in documents[1]


def test_directives_stay_out_of_documents():
    documents = split_documents('%YAML 1.1\n---\nkind: Pod\nmetadata:\n  name: a\n')
    assert documents == ['kind: Pod\nmetadata:\n  name: a']


def test_separator_inside_block_scalar_is_kept():
    content = 'kind: ConfigMap\ndata:\n  file: |\n    ---\n    a: b\n'
    assert split_documents(content) == [content.rstrip('\n')]


def test_malformed_stream():
    with pytest.raises(DecodeError):
        split_documents('kind: Pod\n---\nspec: {containers: [\n')


def test_source_of():
    documents = split_documents(RENDERED)
    assert source_of(documents[0]) == 'app/templates/serviceaccount.yaml'
    assert source_of(documents[1]) == 'app/templates/deployment.yaml'
    assert source_of(documents[2]) is None
