"""
Date string helpers.

`split_date` punctuates compact digit strings such as "20170224093015";
`get_last_months` lists the calendar months preceding today.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from src.domain.models import DatePattern
from src.utils.logging import get_logger

log = get_logger(__name__)

_SPLITTERS: Dict[DatePattern, Tuple[re.Pattern[str], str]] = {
    DatePattern.DATETIME: (
        re.compile(r"^(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})"),
        r"\1-\2-\3 \4:\5:\6",
    ),
    DatePattern.SLASHED_DATE: (re.compile(r"^(\d{4})(\d{2})(\d{2})"), r"\1/\2/\3"),
    DatePattern.DASHED_DATE: (re.compile(r"^(\d{4})(\d{2})(\d{2})"), r"\1-\2-\3"),
}


def split_date(
    value: str, pattern: Union[DatePattern, str] = DatePattern.DATETIME
) -> Optional[str]:
    """
    Punctuate a compact date or datetime string.

    Only the leading digits are rewritten; anything after them is kept and a
    string that does not start with enough digits is returned unchanged.
    An unknown pattern name yields None.

    >>> split_date("20170224093015")
    '2017-02-24 09:30:15'
    >>> split_date("20170224", "YYYY/MM/DD")
    '2017/02/24'
    """
    try:
        key = DatePattern(pattern)
    except ValueError:
        log.debug("Unknown date pattern", extra={"pattern": str(pattern)})
        return None
    regex, replacement = _SPLITTERS[key]
    return regex.sub(replacement, value, count=1)


def get_last_months(count: Optional[int] = 1, today: Optional[date] = None) -> List[str]:
    """
    Return the `count` months before the current one as "YYYYMM" strings.

    The current month is excluded and the most recent month comes first.
    A falsy `count` means one month.
    """
    n = count or 1
    current = today or date.today()
    year, month = current.year, current.month
    months: List[str] = []
    for _ in range(n):
        month -= 1
        if month == 0:
            year -= 1
            month = 12
        months.append(f"{year:04d}{month:02d}")
    return months


__all__ = ["get_last_months", "split_date"]
