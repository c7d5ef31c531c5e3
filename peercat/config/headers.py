from typing import Dict

from peercat import __version__

USER_AGENT = f"peercat-python/{__version__}"

BASE_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_headers(api_key: str) -> Dict[str, str]:
    """Заголовки одной попытки: bearer-токен + JSON."""
    headers = BASE_HEADERS.copy()
    headers["Authorization"] = f"Bearer {api_key}"
    headers["User-Agent"] = USER_AGENT
    return headers
