"""Domain value objects for the UniFriend API.

Universities carry a free-form course list in their document:
``courses: [{name, trades: [{name, fees}]}]``. The types here read that
shape defensively (documents are written by several clients) and resolve
the fee quoted to a student at submission time.
"""

from dataclasses import dataclass, field
from typing import Any

FEES_NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Trade:
    """A specialisation offered under a course, with its fee as stored."""

    name: str
    fees: Any = None

    @classmethod
    def from_document(cls, raw: Any) -> "Trade | None":
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            return None
        return cls(name=raw["name"], fees=raw.get("fees"))


@dataclass(frozen=True)
class Course:
    """A course listed by a university."""

    name: str
    trades: tuple[Trade, ...] = field(default_factory=tuple)

    @classmethod
    def from_document(cls, raw: Any) -> "Course | None":
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            return None
        raw_trades = raw.get("trades")
        trades: tuple[Trade, ...] = ()
        if isinstance(raw_trades, list):
            trades = tuple(
                t for t in (Trade.from_document(x) for x in raw_trades) if t is not None
            )
        return cls(name=raw["name"], trades=trades)

    def find_trade(self, trade_name: str) -> Trade | None:
        for trade in self.trades:
            if trade.name == trade_name:
                return trade
        return None


def parse_courses(raw: Any) -> list[Course]:
    """Parse a university's ``courses`` field, skipping malformed entries."""
    if not isinstance(raw, list):
        return []
    return [c for c in (Course.from_document(x) for x in raw) if c is not None]


def resolve_trade_fees(
    courses: Any, course_name: str, trade_name: str | None
) -> Any:
    """Return the fee for course_name/trade_name, or FEES_NOT_AVAILABLE.

    Names match exactly (first match wins). A trade with no fee, a missing
    trade name, or a course without trades all resolve to FEES_NOT_AVAILABLE.
    """
    if not trade_name:
        return FEES_NOT_AVAILABLE
    for course in parse_courses(courses):
        if course.name != course_name:
            continue
        trade = course.find_trade(trade_name)
        if trade is None or trade.fees in (None, ""):
            return FEES_NOT_AVAILABLE
        return trade.fees
    return FEES_NOT_AVAILABLE
