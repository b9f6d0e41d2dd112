import sys
from pathlib import Path

# Make the project root importable when the package is not installed.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from mlang.core.config import MLangSettings, Settings  # noqa: E402
from mlang.core.logging import configure_logging  # noqa: E402

configure_logging()


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    return Settings(
        mlang=MLangSettings(
            MLANG_DATA_DIR=str(tmp_path / "data"),
            MLANG_DEFAULT_LANGUAGE="en_us",
            MLANG_DEFAULT_VERSION="1.20.4",
            MLANG_LOAD_TIMEOUT_SECONDS=5,
        )
    )
