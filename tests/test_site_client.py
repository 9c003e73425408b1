from unittest.mock import MagicMock

import pytest
import requests  # type: ignore[import-untyped]

from sanpi.services.news.client import SiteClient
from sanpi.services.news.errors import NetworkError, ParseError

URL = "https://www.gamesanpi.com/"


def make_client(session: MagicMock) -> SiteClient:
    session.headers = {}
    return SiteClient(user_agent="test-agent/1.0", timeout_s=5.0, session=session)


def test_fetch_text_returns_body_and_sets_user_agent() -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(
        content="<html>ゲーム</html>".encode("utf-8"), encoding="utf-8"
    )
    client = make_client(session)

    assert client.fetch_text(URL) == "<html>ゲーム</html>"
    session.get.assert_called_once_with(URL, timeout=5.0)
    assert session.headers["User-Agent"] == "test-agent/1.0"


def test_fetch_text_wraps_http_status() -> None:
    response = MagicMock(status_code=500)
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error", response=response)
    session = MagicMock()
    session.get.return_value = response

    with pytest.raises(NetworkError) as exc_info:
        make_client(session).fetch_text(URL)
    assert exc_info.value.status_code == 500
    assert exc_info.value.url == URL


def test_fetch_text_wraps_connection_error() -> None:
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("boom")

    with pytest.raises(NetworkError) as exc_info:
        make_client(session).fetch_text(URL)
    assert exc_info.value.status_code is None
    assert session.get.call_count == 1


@pytest.mark.parametrize("ok", [True, False])
def test_exists_reports_head_status(ok: bool) -> None:
    session = MagicMock()
    session.head.return_value = MagicMock(ok=ok)

    assert make_client(session).exists(URL + "illust1.png") is ok
    session.head.assert_called_once_with(URL + "illust1.png", timeout=5.0, allow_redirects=True)


def test_exists_treats_network_error_as_absent() -> None:
    session = MagicMock()
    session.head.side_effect = requests.Timeout("slow")
    assert make_client(session).exists(URL + "illust1.png") is False


def test_fetch_text_raises_parse_error_on_undecodable_body() -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(content=b"<html>\xff\xfe\xfa</html>", encoding="utf-8")

    with pytest.raises(ParseError):
        make_client(session).fetch_text(URL)


def test_fetch_text_raises_parse_error_on_unknown_charset() -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(content=b"<html></html>", encoding="x-no-such-charset")

    with pytest.raises(ParseError):
        make_client(session).fetch_text(URL)


def test_fetch_text_falls_back_to_detected_encoding() -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(
        content="人気".encode("shift_jis"), encoding=None, apparent_encoding="shift_jis"
    )
    assert make_client(session).fetch_text(URL) == "人気"
