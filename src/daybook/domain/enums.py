from __future__ import annotations

from enum import Enum


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
