"""
Thread-safe registry of holiday customizations.

Every mutation replaces the current CustomizationSnapshot with a new one under
a lock, so readers always see a complete, immutable snapshot. Listeners are
notified after each change that actually modified the state.
"""

import logging
import threading
from typing import Any, Callable, List

from swedish_holidays.core.temporal import to_reference_date
from swedish_holidays.data.schemas import CustomizationSnapshot, Holiday, HolidayRule
from swedish_holidays.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class CustomizationStore:
    """Holds custom fixed holidays, standard holiday removals and rules."""

    def __init__(self):
        """Initialize an empty store."""
        self._lock = threading.Lock()
        self._snapshot = CustomizationSnapshot()
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, listener: Callable[[], None]) -> None:
        """
        Register a callback invoked after every effective change.

        Args:
            listener: Zero-argument callable, typically a cache invalidator.
        """
        with self._lock:
            self._listeners.append(listener)

    def snapshot(self) -> CustomizationSnapshot:
        """Return the customizations currently in effect."""
        return self._snapshot

    def add_fixed_holiday(self, holiday_date: Any, name: str, description: str) -> None:
        """
        Add a custom holiday on a specific date.

        The holiday only applies to the year of holiday_date and is reported
        with the given name and description regardless of language.

        Args:
            holiday_date: Date of the custom holiday, or any value
                accepted by to_reference_date.
            name: Display name.
            description: Description of the holiday.

        Raises:
            InvalidArgumentError: If any argument is None.
            TemporalResolutionError: If holiday_date cannot be resolved to a date.
        """
        if holiday_date is None or name is None or description is None:
            raise InvalidArgumentError("Date, name and description are required")

        holiday = Holiday(date=to_reference_date(holiday_date), name=name, description=description)
        with self._lock:
            self._replace(fixed_additions=self._snapshot.fixed_additions + (holiday,))
        logger.debug(f"Added custom holiday {holiday.date.isoformat()} ({name})")
        self._notify()

    def remove_standard_holiday(self, holiday_date: Any) -> None:
        """
        Exclude any standard holiday falling on a date.

        Removing the same date twice has no further effect.

        Args:
            holiday_date: Exact date to exclude, or any value accepted by
                to_reference_date.

        Raises:
            InvalidArgumentError: If holiday_date is None.
            TemporalResolutionError: If holiday_date cannot be resolved to a date.
        """
        holiday_date = to_reference_date(holiday_date)

        with self._lock:
            if holiday_date in self._snapshot.standard_removals:
                return
            self._replace(standard_removals=self._snapshot.standard_removals | {holiday_date})
        logger.debug(f"Removed standard holiday on {holiday_date.isoformat()}")
        self._notify()

    def add_rule(self, rule: HolidayRule) -> None:
        """
        Register a rule evaluated for every queried year and language.

        Args:
            rule: Callable (year, language) -> Holiday or None.

        Raises:
            InvalidArgumentError: If rule is None or not callable.
        """
        if rule is None or not callable(rule):
            raise InvalidArgumentError("Rule must be a callable")

        with self._lock:
            self._replace(rules=self._snapshot.rules + (rule,))
        logger.debug(f"Added custom holiday rule {getattr(rule, '__name__', rule)!r}")
        self._notify()

    def clear_fixed_additions(self) -> None:
        """Remove all custom fixed holidays."""
        self._clear(fixed_additions=())

    def clear_removals(self) -> None:
        """Restore all removed standard holidays."""
        self._clear(standard_removals=frozenset())

    def clear_rules(self) -> None:
        """Remove all custom rules."""
        self._clear(rules=())

    def clear_all(self) -> None:
        """Remove every customization."""
        self._clear(fixed_additions=(), standard_removals=frozenset(), rules=())

    def _clear(self, **empty) -> None:
        with self._lock:
            changed = any(getattr(self._snapshot, field) for field in empty)
            if changed:
                self._replace(**empty)
        if changed:
            logger.debug(f"Cleared customizations: {', '.join(empty)}")
            self._notify()

    def _replace(self, **changes) -> None:
        # Caller holds the lock
        changes["version"] = self._snapshot.version + 1
        self._snapshot = self._snapshot.model_copy(update=changes)

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener()
