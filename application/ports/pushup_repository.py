"""
Pushup Record Repository Interface (Port).

This module defines the abstract interface for daily pushup record persistence.
Each record holds one user's cumulative count for one UTC day.
"""
from datetime import date
from typing import List, Optional, Protocol, Union

from domain.models import PushupRecord


class PushupRecordRepository(Protocol):
    """
    Abstract interface for the `pushup_records` table.

    Days are UTC calendar dates; a record belongs to the day its
    created_at falls on.
    """

    def get_for_day(self, user_id: str, day: date) -> Optional[PushupRecord]:
        """
        Get the user's record for a single day.

        Args:
            user_id: Owner id
            day: UTC calendar day

        Returns:
            The first record created on that day, or None
        """
        ...

    def list_between(self, user_id: str, start: date, end: date) -> List[PushupRecord]:
        """
        List records with start <= created_at < end.

        Args:
            user_id: Owner id
            start: First day included
            end: First day excluded

        Returns:
            Records ordered by created_at ascending
        """
        ...

    def insert(self, user_id: str, count: int) -> PushupRecord:
        """Create today's record; the data service stamps created_at."""
        ...

    def update_count(self, record_id: Union[int, str], count: int) -> PushupRecord:
        """Overwrite the count of an existing record."""
        ...

    def delete(self, record_id: Union[int, str]) -> bool:
        """Delete a record. Returns True if a row was removed."""
        ...
