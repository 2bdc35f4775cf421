from datetime import datetime, timezone
from typing import Optional

import humanize


def utcnow() -> datetime:
    """数据库中的时间为 naive UTC"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def humanize_time(value: Optional[datetime], now: Optional[datetime] = None) -> str:
    """转换为相对时间, 例如 "3 minutes ago" """
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    now = now or utcnow()
    return humanize.naturaltime(now - value)
