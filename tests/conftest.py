import pytest

from micro_vdom import Config, Document


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def strict_config():
    config = Config()
    config.set("dom.strict", True)
    return config


@pytest.fixture
def strict_document(strict_config):
    return Document(config=strict_config)
