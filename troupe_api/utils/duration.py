"""有效期字符串解析

支持 `24h`（小时）、`7d`（天）以及纯数字或 `s` 结尾的秒数。
"""

import re
from datetime import timedelta

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([hds]?)\s*$", re.IGNORECASE)

_UNIT_SECONDS = {
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "s": 1,
    "": 1,
}


def parse_duration(value) -> timedelta:
    """将有效期字符串转换为 timedelta，格式不合法时抛出 ValueError"""
    if isinstance(value, int):
        return timedelta(seconds=value)
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"invalid duration: {value!r} (expected e.g. '24h', '7d' or seconds)")
    amount, unit = match.groups()
    seconds = int(amount) * _UNIT_SECONDS[unit.lower()]
    if seconds <= 0:
        raise ValueError(f"duration must be positive: {value!r}")
    return timedelta(seconds=seconds)
