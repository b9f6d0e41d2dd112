"""Remote language asset source.

Downloads language files from an HTTP file server laid out as
<base_url>/<version>/assets/minecraft/lang/<language>.json.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional, Tuple

import requests

from mlang.core.config import DEFAULT_ASSETS_BASE_URL
from mlang.core.logging import get_module_logger
from mlang.infrastructure.i18n.models import normalize_language_code
from mlang.infrastructure.operations import (
    OperationResult,
    classify_os_error,
    classify_request_error,
)

logger = get_module_logger()


class LanguageAssetSource:
    """HTTP client for the remote language asset files.

    Attributes:
        base_url: Root URL of the asset server (no trailing slash).
        timeout: (connect, read) timeout in seconds passed to requests.
        chunk_size: Bytes per chunk when streaming a download.

    Each calling thread gets its own requests.Session. An injected session
    is shared by every thread as-is.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ASSETS_BASE_URL,
        timeout: Tuple[float, float] = (10.0, 30.0),
        chunk_size: int = 8192,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.chunk_size = chunk_size
        self._injected_session = session
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """HTTP session for the calling thread."""
        if self._injected_session is not None:
            return self._injected_session

        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def url_for(self, language: str, version: str) -> str:
        return (
            f"{self.base_url}/{version}/assets/minecraft/lang/"
            f"{normalize_language_code(language)}.json"
        )

    def download(self, language: str, version: str, destination: Path) -> OperationResult:
        """Download a language file to destination.

        The body is streamed into a temporary file in the destination
        directory and moved into place only once it has been fully received,
        so an interrupted download never leaves a truncated file behind.

        Args:
            language: Language code.
            version: Game version the asset is addressed by.
            destination: Final path of the language file.

        Returns:
            SUCCESS with the destination path as data, or an error result
            (FETCH_* codes for network failures, PERSIST_ERROR for local
            write failures). On failure nothing exists at destination.
        """
        destination = Path(destination)
        url = self.url_for(language, version)
        logger.info(
            "downloading_language_file",
            language=language,
            version=version,
            url=url,
        )

        tmp_path: Optional[Path] = None
        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{destination.name}.",
                    suffix=".part",
                    dir=destination.parent,
                )
                tmp_path = Path(tmp_name)
                size = 0
                with os.fdopen(fd, "wb") as handle:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            handle.write(chunk)
                            size += len(chunk)
            os.replace(tmp_path, destination)
            tmp_path = None
        except requests.RequestException as e:
            result = classify_request_error(e)
            logger.error(
                "language_download_failed",
                language=language,
                version=version,
                url=url,
                error_code=result.error_code,
                error=str(e),
            )
            return result
        except OSError as e:
            result = classify_os_error(e)
            logger.error(
                "language_persist_failed",
                language=language,
                path=str(destination),
                error=str(e),
            )
            return result
        finally:
            if tmp_path is not None:
                self._discard(tmp_path)

        logger.info(
            "downloaded_language_file",
            language=language,
            version=version,
            path=str(destination),
            size=size,
        )
        return OperationResult.success(data=destination, message="downloaded")

    def close(self) -> None:
        if self._injected_session is not None:
            self._injected_session.close()
            return

        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
            self._local = threading.local()
        for session in sessions:
            session.close()

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("failed_to_remove_partial_file", path=str(path), error=str(e))
