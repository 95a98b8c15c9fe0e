# SPDX-License-Identifier: GPL-3.0-or-later
from unittest import mock

import pytest
import requests

from tests.utils import make_response
from yumget.core.errors import NetworkError, RemoteStatusError
from yumget.core.yum import fetcher

URL = "https://repo.example.com/repodata/repomd.xml"


@mock.patch("yumget.core.yum.fetcher.http_session")
def test_fetch_passes_timeout(mock_session: mock.Mock) -> None:
    mock_session.get.return_value = make_response(b"<repomd/>")

    response = fetcher.fetch(URL, timeout=12.5, stream=True)

    assert response.status_code == 200
    mock_session.get.assert_called_once_with(URL, timeout=12.5, stream=True)


@mock.patch("yumget.core.yum.fetcher.http_session")
def test_fetch_bytes(mock_session: mock.Mock) -> None:
    mock_session.get.return_value = make_response(b"<repomd/>")

    assert fetcher.fetch_bytes(URL, timeout=1) == b"<repomd/>"


@pytest.mark.parametrize("status_code", [201, 204, 301, 404, 500])
@mock.patch("yumget.core.yum.fetcher.http_session")
def test_fetch_non_ok_status(mock_session: mock.Mock, status_code: int) -> None:
    mock_session.get.return_value = make_response(b"nope", status_code=status_code)

    with pytest.raises(RemoteStatusError, match=f"Unexpected status {status_code}") as exc_info:
        fetcher.fetch(URL, timeout=1)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.url == URL
    assert isinstance(exc_info.value, NetworkError)


@pytest.mark.parametrize(
    "exception",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
        requests.exceptions.ChunkedEncodingError("connection broken"),
    ],
)
@mock.patch("yumget.core.yum.fetcher.http_session")
def test_fetch_transport_error(mock_session: mock.Mock, exception: Exception) -> None:
    mock_session.get.side_effect = exception

    with pytest.raises(NetworkError, match=f"Could not fetch {URL}") as exc_info:
        fetcher.fetch_bytes(URL, timeout=1)

    assert exc_info.value.__cause__ is exception
    assert not isinstance(exc_info.value, RemoteStatusError)


@mock.patch("yumget.core.yum.fetcher.http_session")
def test_fetch_does_not_retry(mock_session: mock.Mock) -> None:
    mock_session.get.side_effect = requests.ConnectionError("boom")

    with pytest.raises(NetworkError):
        fetcher.fetch(URL, timeout=1)

    assert mock_session.get.call_count == 1
