# SPDX-License-Identifier: GPL-3.0-or-later
import requests
from requests.adapters import HTTPAdapter

from yumget import APP_NAME, __version__

USER_AGENT = f"{APP_NAME}/{__version__}"


def get_requests_session() -> requests.Session:
    """Create a requests session for talking to Yum repositories.

    Failed requests are never retried, the first failure is reported to the caller.
    """
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
