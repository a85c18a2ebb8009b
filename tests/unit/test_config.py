import pytest
from pydantic import ValidationError

from helm_images.config import ExtractionConfig
from helm_images.EXTRACTORS.kinds import SUPPORTED_KINDS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('KINDS', 'IMAGE_KEYWORD', 'SKIP_ERRORS', 'LOG_LEVEL'):
        monkeypatch.delenv(f'HELM_IMAGES_{name}', raising=False)


def test_defaults():
    config = ExtractionConfig()
    assert config.kinds == list(SUPPORTED_KINDS)
    assert config.image_keyword == 'image'
    assert config.skip_errors is False
    assert config.log_level == 'warning'


def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        ExtractionConfig(kinds=['Deployment', 'Service'])


def test_empty_keyword_rejected():
    with pytest.raises(ValidationError):
        ExtractionConfig(image_keyword='')


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv('HELM_IMAGES_KINDS', 'Deployment, ConfigMap')
    monkeypatch.setenv('HELM_IMAGES_SKIP_ERRORS', 'true')
    config = ExtractionConfig.from_env(str(tmp_path / 'missing.env'))
    assert config.kinds == ['Deployment', 'ConfigMap']
    assert config.skip_errors is True


def test_from_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('HELM_IMAGES_IMAGE_KEYWORD=repository\nHELM_IMAGES_LOG_LEVEL=DEBUG\n')
    monkeypatch.setenv('HELM_IMAGES_LOG_LEVEL', 'info')

    config = ExtractionConfig.from_env(str(env_file))
    assert config.image_keyword == 'repository'
    # process environment wins over the file
    assert config.log_level == 'info'


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv('HELM_IMAGES_KINDS', 'Deployment')
    config = ExtractionConfig.from_env(None, kinds=['Pod'], skip_errors=None)
    assert config.kinds == ['Pod']
    assert config.skip_errors is False
