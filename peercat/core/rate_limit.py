from typing import Mapping, Optional

from peercat.models.common import RateLimitInfo

LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"
RETRY_AFTER_HEADER = "retry-after"


def _parse_uint(value: Optional[str]) -> Optional[int]:
    # Невалидные значения считаются отсутствующими
    if value is None:
        return None
    value = value.strip()
    if not value.isdecimal():
        return None
    return int(value)


def parse_rate_limit_headers(headers: Mapping[str, str]) -> Optional[RateLimitInfo]:
    """
    Собирает RateLimitInfo из заголовков ответа (без учета регистра).
    None, если нет ни одного из четырех заголовков.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    names = (LIMIT_HEADER, REMAINING_HEADER, RESET_HEADER, RETRY_AFTER_HEADER)
    if not any(name in lowered for name in names):
        return None

    return RateLimitInfo(
        limit=_parse_uint(lowered.get(LIMIT_HEADER)),
        remaining=_parse_uint(lowered.get(REMAINING_HEADER)),
        reset=_parse_uint(lowered.get(RESET_HEADER)),
        retry_after=_parse_uint(lowered.get(RETRY_AFTER_HEADER)),
    )
