"""Tests for mlang.infrastructure.i18n.source module."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest
import requests

from mlang.infrastructure.i18n import LanguageAssetSource
from mlang.infrastructure.operations import OperationStatus
from tests.factories.i18n import make_http_error, make_streaming_session


def _source(session, base_url="https://assets.example.com/"):
    return LanguageAssetSource(base_url=base_url, timeout=(1, 2), chunk_size=4, session=session)


@pytest.mark.unit
class TestLanguageAssetSourceUrl:
    def test_url_layout(self):
        source = _source(session=object())
        assert (
            source.url_for("RU_RU", "1.20.4")
            == "https://assets.example.com/1.20.4/assets/minecraft/lang/ru_ru.json"
        )


@pytest.mark.unit
class TestLanguageAssetSourceDownload:
    """Tests for LanguageAssetSource.download()."""

    def test_streams_body_to_destination(self, languages_dir):
        session = make_streaming_session(chunks=[b'{"a.b": ', b"", b'"c"}'])
        source = _source(session)
        destination = languages_dir / "en_us.json"

        result = source.download("en_us", "1.20.4", destination)

        assert result.is_success
        assert result.data == destination
        assert destination.read_bytes() == b'{"a.b": "c"}'
        session.get.assert_called_once_with(
            "https://assets.example.com/1.20.4/assets/minecraft/lang/en_us.json",
            stream=True,
            timeout=(1, 2),
        )

    def test_no_temporary_files_left_after_success(self, languages_dir):
        source = _source(make_streaming_session(chunks=[b"{}"]))

        source.download("en_us", "1.20.4", languages_dir / "en_us.json")

        assert [p.name for p in languages_dir.iterdir()] == ["en_us.json"]

    def test_http_404_creates_no_file(self, languages_dir):
        session = make_streaming_session(status_error=make_http_error(404))
        source = _source(session)
        destination = languages_dir / "de_de.json"

        result = source.download("de_de", "1.20.4", destination)

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "FETCH_NOT_FOUND"
        assert list(languages_dir.iterdir()) == []

    def test_server_error_is_transient(self, languages_dir):
        session = make_streaming_session(status_error=make_http_error(503))

        result = _source(session).download("en_us", "1.20.4", languages_dir / "en_us.json")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "FETCH_SERVER_ERROR"

    def test_timeout_is_transient(self, languages_dir):
        session = make_streaming_session()
        session.get.side_effect = requests.Timeout("read timed out")

        result = _source(session).download("en_us", "1.20.4", languages_dir / "en_us.json")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "FETCH_TIMEOUT"
        assert list(languages_dir.iterdir()) == []

    def test_connection_error_is_transient(self, languages_dir):
        session = make_streaming_session()
        session.get.side_effect = requests.ConnectionError("unreachable")

        result = _source(session).download("en_us", "1.20.4", languages_dir / "en_us.json")

        assert result.error_code == "FETCH_CONNECTION_ERROR"

    def test_interrupted_stream_leaves_no_partial_file(self, languages_dir):
        session = make_streaming_session(
            stream_error=requests.exceptions.ChunkedEncodingError("connection reset")
        )
        destination = languages_dir / "en_us.json"

        result = _source(session).download("en_us", "1.20.4", destination)

        assert not result.is_success
        assert not destination.exists()
        assert list(languages_dir.iterdir()) == []

    def test_write_failure_is_persist_error(self, tmp_path):
        source = _source(make_streaming_session(chunks=[b"{}"]))
        destination = tmp_path / "missing-dir" / "en_us.json"

        result = source.download("en_us", "1.20.4", destination)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "PERSIST_ERROR"
        assert not destination.exists()

    def test_existing_file_replaced_only_on_success(self, languages_dir):
        destination = languages_dir / "en_us.json"
        destination.write_bytes(b'{"old": "value"}')
        session = make_streaming_session(status_error=make_http_error(500))

        _source(session).download("en_us", "1.20.4", destination)

        assert destination.read_bytes() == b'{"old": "value"}'

    def test_close_closes_session(self):
        session = make_streaming_session()
        _source(session).close()
        session.close.assert_called_once()


@pytest.mark.unit
class TestLanguageAssetSourceSessions:
    @patch("mlang.infrastructure.i18n.source.requests.Session")
    def test_same_thread_reuses_session(self, mock_session_cls):
        mock_session_cls.side_effect = lambda: MagicMock()
        source = LanguageAssetSource()

        assert source.session is source.session
        assert mock_session_cls.call_count == 1

    @patch("mlang.infrastructure.i18n.source.requests.Session")
    def test_each_thread_gets_its_own_session(self, mock_session_cls):
        mock_session_cls.side_effect = lambda: MagicMock()
        source = LanguageAssetSource()
        main_session = source.session

        with ThreadPoolExecutor(max_workers=1) as executor:
            worker_session = executor.submit(lambda: source.session).result()

        assert worker_session is not main_session
        assert mock_session_cls.call_count == 2

    @patch("mlang.infrastructure.i18n.source.requests.Session")
    def test_close_closes_every_thread_session(self, mock_session_cls):
        mock_session_cls.side_effect = lambda: MagicMock()
        source = LanguageAssetSource()
        main_session = source.session
        with ThreadPoolExecutor(max_workers=1) as executor:
            worker_session = executor.submit(lambda: source.session).result()

        source.close()

        main_session.close.assert_called_once()
        worker_session.close.assert_called_once()
        assert source.session is not main_session

    def test_injected_session_shared_across_threads(self):
        session = make_streaming_session()
        source = _source(session)

        with ThreadPoolExecutor(max_workers=1) as executor:
            worker_session = executor.submit(lambda: source.session).result()

        assert worker_session is session
        assert source.session is session
