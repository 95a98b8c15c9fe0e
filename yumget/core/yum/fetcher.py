# SPDX-License-Identifier: GPL-3.0-or-later
import logging

import requests

from yumget.core.errors import NetworkError, RemoteStatusError
from yumget.core.http_requests import get_requests_session

log = logging.getLogger(__name__)

http_session = get_requests_session()


def fetch(url: str, *, timeout: float, stream: bool = False) -> requests.Response:
    """
    Send a GET request and check that it succeeded.

    :param str url: absolute URL to fetch
    :param float timeout: seconds to wait for the server before giving up
    :param bool stream: don't read the body yet, the caller will iterate over it
    :raise NetworkError: if the request could not be completed
    :raise RemoteStatusError: if the server responded with anything but 200
    """
    log.debug("GET %s", url)
    try:
        response = http_session.get(url, timeout=timeout, stream=stream)
    except requests.RequestException as e:
        raise NetworkError(f"Could not fetch {url}: {e}") from e

    if response.status_code != requests.codes.ok:
        response.close()
        raise RemoteStatusError(url, response.status_code, response.reason)

    return response


def fetch_bytes(url: str, *, timeout: float) -> bytes:
    """
    Fetch the whole body of a URL.

    :raise NetworkError: if the request could not be completed
    :raise RemoteStatusError: if the server responded with anything but 200
    """
    # without stream=True, requests reads the body inside get()
    content = fetch(url, timeout=timeout).content

    log.debug("Fetched %d bytes from %s", len(content), url)
    return content
