"""Local persistence of downloaded language files.

One file per language, named <language>.json, inside the languages directory.
Files found there are treated as authoritative.
"""

from pathlib import Path

from mlang.core.logging import get_module_logger
from mlang.infrastructure.i18n.models import (
    TranslationParseError,
    TranslationTable,
    normalize_language_code,
)
from mlang.infrastructure.operations import OperationResult

logger = get_module_logger()


class LanguageFileRepository:
    """Reads language files from a local directory.

    Attributes:
        languages_dir: Directory holding <language>.json files.
    """

    def __init__(self, languages_dir: Path, create: bool = True):
        """Initialize the repository.

        Args:
            languages_dir: Directory for language files.
            create: Create the directory (and parents) if it does not exist.
        """
        self.languages_dir = Path(languages_dir)
        if create:
            self.ensure_directory()

    def ensure_directory(self) -> None:
        if not self.languages_dir.exists():
            self.languages_dir.mkdir(parents=True, exist_ok=True)
            logger.info("created_languages_dir", path=str(self.languages_dir))

    def path_for(self, language: str) -> Path:
        """Return the local file path for a language.

        The path depends on the language code only, never on the version.
        """
        return self.languages_dir / f"{normalize_language_code(language)}.json"

    def exists(self, language: str) -> bool:
        return self.path_for(language).is_file()

    def read_table(self, language: str) -> OperationResult:
        """Read and parse the local file for a language.

        The file is never modified, even when it cannot be parsed.

        Args:
            language: Language code.

        Returns:
            SUCCESS with the TranslationTable as data, or PERMANENT_ERROR
            with error_code PARSE_ERROR.
        """
        language = normalize_language_code(language)
        path = self.path_for(language)

        try:
            raw = path.read_bytes()
            table = TranslationTable.from_json_bytes(language, raw, source=path)
        except TranslationParseError as e:
            logger.error(
                "language_parse_failed",
                language=language,
                path=str(path),
                error=str(e),
            )
            return OperationResult.permanent_error(
                f"Failed to parse language file {path}: {e}",
                error_code="PARSE_ERROR",
            )
        except OSError as e:
            logger.error(
                "language_read_failed",
                language=language,
                path=str(path),
                error=str(e),
            )
            return OperationResult.permanent_error(
                f"Failed to read language file {path}: {e}",
                error_code="PARSE_ERROR",
            )

        logger.info(
            "parsed_language_file",
            language=language,
            path=str(path),
            key_count=len(table),
        )
        return OperationResult.success(data=table, message="parsed")
