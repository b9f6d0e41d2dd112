"""Feature-level fixtures for language cache tests."""

import pytest

from mlang.infrastructure.i18n import (
    LanguageFileRepository,
    TranslationStore,
    Translator,
)
from tests.factories.i18n import (
    EN_US_MESSAGES,
    RU_RU_MESSAGES,
    FakeAssetSource,
    make_language_payload,
)


@pytest.fixture
def languages_dir(tmp_path):
    """Empty languages directory."""
    path = tmp_path / "languages"
    path.mkdir()
    return path


@pytest.fixture
def repository(languages_dir):
    return LanguageFileRepository(languages_dir)


@pytest.fixture
def fake_source():
    """Asset source serving en_us and ru_ru; everything else is a 404."""
    return FakeAssetSource(
        {
            "en_us": make_language_payload(EN_US_MESSAGES),
            "ru_ru": make_language_payload(RU_RU_MESSAGES),
        }
    )


@pytest.fixture
def store():
    return TranslationStore()


@pytest.fixture
def translator(repository, fake_source, store):
    """Translator with en_us default, nothing loaded."""
    translator = Translator(
        repository=repository,
        source=fake_source,
        default_language="en_us",
        default_version="1.20.4",
        store=store,
        load_timeout=5,
    )
    yield translator
    translator.shutdown(wait=True)
