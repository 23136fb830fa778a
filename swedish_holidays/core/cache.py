"""
Result cache for computed holiday lists and per-year holiday date sets.
"""

import logging
import threading
from datetime import date
from typing import Dict, FrozenSet, Optional, Tuple

from swedish_holidays.data.schemas import Holiday, Language

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Two-level cache: year -> language -> holidays, and year -> holiday dates.

    Entries never expire; the whole cache is dropped by invalidate_all().
    Each invalidation bumps a generation counter. Writers pass the generation
    they observed before computing, and a write from an older generation is
    discarded so results computed before an invalidation never survive it.
    """

    def __init__(self):
        """Initialize an empty cache."""
        self._lock = threading.Lock()
        self._lists: Dict[int, Dict[Language, Tuple[Holiday, ...]]] = {}
        self._date_sets: Dict[int, FrozenSet[date]] = {}
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of invalidations so far."""
        return self._generation

    def get(self, year: int, language: Language) -> Optional[Tuple[Holiday, ...]]:
        """Return the cached holidays for (year, language), if any."""
        with self._lock:
            per_language = self._lists.get(year)
            return per_language.get(language) if per_language else None

    def put_if_absent(
        self,
        year: int,
        language: Language,
        holidays: Tuple[Holiday, ...],
        generation: int,
    ) -> Tuple[Holiday, ...]:
        """
        Store holidays for (year, language) unless an entry already exists.

        Args:
            year: Calendar year.
            language: Language of the holidays.
            holidays: Sorted holidays to store.
            generation: Cache generation observed before computing holidays.

        Returns:
            The cached entry if one exists, otherwise holidays.
        """
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale holidays for {year}/{language.value}")
                return holidays
            per_language = self._lists.setdefault(year, {})
            return per_language.setdefault(language, holidays)

    def get_date_set(self, year: int) -> Optional[FrozenSet[date]]:
        """Return the cached holiday dates for a year, if any."""
        with self._lock:
            return self._date_sets.get(year)

    def put_date_set_if_absent(
        self, year: int, dates: FrozenSet[date], generation: int
    ) -> FrozenSet[date]:
        """
        Store the holiday dates of a year unless already present.

        Args:
            year: Calendar year.
            dates: Holiday dates in the year.
            generation: Cache generation observed before computing dates.

        Returns:
            The cached set if one exists, otherwise dates.
        """
        with self._lock:
            if generation != self._generation:
                return dates
            return self._date_sets.setdefault(year, dates)

    def invalidate_all(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._lists = {}
            self._date_sets = {}
            self._generation += 1
        logger.debug(f"Holiday cache invalidated (generation {self._generation})")

    def __len__(self) -> int:
        """Number of cached (year, language) entries."""
        with self._lock:
            return sum(len(per_language) for per_language in self._lists.values())
