"""Tests for mlang.infrastructure.i18n.repository module."""

import pytest

from mlang.infrastructure.i18n import LanguageFileRepository, TranslationTable
from mlang.infrastructure.operations import OperationStatus
from tests.factories.i18n import write_language_file


@pytest.mark.unit
class TestLanguageFileRepository:
    """Tests for LanguageFileRepository."""

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "plugin" / "languages"
        LanguageFileRepository(target)
        assert target.is_dir()

    def test_create_disabled(self, tmp_path):
        target = tmp_path / "languages"
        LanguageFileRepository(target, create=False)
        assert not target.exists()

    def test_path_depends_on_language_only(self, repository, languages_dir):
        assert repository.path_for("EN_us") == languages_dir / "en_us.json"

    def test_exists(self, repository, languages_dir):
        assert repository.exists("en_us") is False
        write_language_file(languages_dir, "en_us", {"a": "b"})
        assert repository.exists("en_us") is True

    def test_read_table_success(self, repository, languages_dir):
        path = write_language_file(languages_dir, "ru_ru", {"block.minecraft.stone": "Камень"})

        result = repository.read_table("ru_ru")

        assert result.is_success
        assert isinstance(result.data, TranslationTable)
        assert result.data.get("block.minecraft.stone") == "Камень"
        assert result.data.source == path

    def test_read_table_invalid_content(self, repository, languages_dir):
        path = write_language_file(languages_dir, "fr_fr", "{ this is not json")

        result = repository.read_table("fr_fr")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "PARSE_ERROR"
        # File is left untouched
        assert path.read_bytes() == b"{ this is not json"

    def test_read_table_empty_file(self, repository, languages_dir):
        write_language_file(languages_dir, "fr_fr", b"")

        result = repository.read_table("fr_fr")

        assert not result.is_success
        assert result.error_code == "PARSE_ERROR"

    def test_read_table_missing_file(self, repository):
        result = repository.read_table("de_de")

        assert not result.is_success
        assert result.error_code == "PARSE_ERROR"
