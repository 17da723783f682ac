import requests
from coinswap.utils.errors import NetworkError, ParseError
from coinswap.utils.settings import settings

def fetch_json(url: str, params=None, headers=None, timeout=None):
    timeout = timeout or settings.http_timeout
    hdrs = {"User-Agent": settings.user_agent, "Accept": "application/json"} | (headers or {})
    try:
        r = requests.get(url, params=params or {}, headers=hdrs, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e
    if r.status_code >= 400:
        raise NetworkError(f"HTTP {r.status_code}: {r.text[:160]}")
    try:
        return r.json()
    except ValueError as e:
        raise ParseError(f"Malformed JSON from {url}: {e}") from e
