"""Summary of the current day's browsing, built from the history feature."""

from collections import Counter
from datetime import datetime, timezone, tzinfo
from typing import Callable, Dict, List, Optional, Set, Tuple

from .features import HistoryManager
from .utils import as_utc, day_label, extract_domain


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DaySummary:
    """
    Sites visited today, session length and the most visited sites.

    The session starts when the summary is created, which the host does
    once at start-up. ``tz`` must be the time zone the store labels days
    in, otherwise today's bucket is never found.
    """

    def __init__(
        self,
        history_manager: HistoryManager,
        now: Callable[[], datetime] = _utc_now,
        tz: Optional[tzinfo] = None,
        top_n: int = 3,
    ):
        self.history_manager = history_manager
        self._now = now
        self._tz = tz
        self.top_n = top_n
        self.session_start = as_utc(now())

    @property
    def today(self):
        return as_utc(self._now()).astimezone(self._tz).date()

    def todays_history(self) -> List[str]:
        """URLs visited today, most recent first"""
        label = day_label(self._now(), self._tz)
        return list(self.history_manager.get_history_by_day().get(label, []))

    def unique_sites(self, history: List[str] = None) -> Set[str]:
        if history is None:
            history = self.todays_history()
        return {extract_domain(url) for url in history}

    def top_sites(self, n: int = None, history: List[str] = None) -> List[Tuple[str, int]]:
        """Most visited domains with visit counts; ties keep first-seen order"""
        if history is None:
            history = self.todays_history()
        return Counter(extract_domain(url) for url in history).most_common(self.top_n if n is None else n)

    def browsing_time(self) -> Tuple[int, int]:
        """Hours and minutes since the session started"""
        elapsed = int((as_utc(self._now()) - self.session_start).total_seconds())
        elapsed = max(elapsed, 0)
        return elapsed // 3600, (elapsed % 3600) // 60

    def as_dict(self) -> Dict:
        history = self.todays_history()
        hours, minutes = self.browsing_time()
        return {
            "date": self.today.isoformat(),
            "day": day_label(self._now(), self._tz),
            "sites_visited": len(self.unique_sites(history)),
            "browsing_time": {"hours": hours, "minutes": minutes},
            "top_sites": [
                {"site": site, "visits": visits}
                for site, visits in self.top_sites(history=history)
            ],
        }

    def to_text(self) -> str:
        """Plain text report, one fact per line"""
        history = self.todays_history()
        hours, minutes = self.browsing_time()
        lines = [
            "=== Day Summary ===",
            f"Date: {self.today.isoformat()}",
            f"Sites Visited: {len(self.unique_sites(history))}",
            f"Browsing Time: {hours}h {minutes}m",
            "Top Sites:",
        ]
        top = self.top_sites(history=history)
        for rank, (site, visits) in enumerate(top, start=1):
            lines.append(f"{rank}. {site} ({visits} visits)")
        if not top:
            lines.append("No browsing history available")
        return "\n".join(lines) + "\n"
