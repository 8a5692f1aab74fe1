"""
Supabase Pushup Record Repository Implementation.

This module implements the PushupRecordRepository protocol using Supabase as the backend.
Rows live in the `pushup_records` table; row-level auth scopes them to their owner.

Read failures are logged and surfaced as absent data (no record, empty list),
so a screen still renders. Write failures raise DataServiceError.
"""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Union
from supabase import Client
import logging

from application.exceptions import DataServiceError
from domain.models import PushupRecord

logger = logging.getLogger(__name__)

TABLE = "pushup_records"


def _to_record(row: Dict[str, Any]) -> PushupRecord:
    return PushupRecord(
        id=row.get("id"),
        user_id=row.get("user_id"),
        count=row.get("count") or 0,
        created_at=row["created_at"],
    )


class SupabasePushupRecordRepository:
    """
    Supabase implementation of PushupRecordRepository.

    Day boundaries are sent to PostgREST as bare ISO dates, which Postgres
    reads as UTC midnight for timestamptz comparisons.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_for_day(self, user_id: str, day: date) -> Optional[PushupRecord]:
        """Get the first record created on the given UTC day."""
        try:
            result = self._client.table(TABLE) \
                .select("id, user_id, count, created_at") \
                .eq("user_id", user_id) \
                .gte("created_at", day.isoformat()) \
                .lt("created_at", (day + timedelta(days=1)).isoformat()) \
                .order("created_at") \
                .limit(1) \
                .execute()

            if result.data:
                return _to_record(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching pushup record for {user_id} on {day}: {e}")
            return None

    def list_between(self, user_id: str, start: date, end: date) -> List[PushupRecord]:
        """List records with start <= created_at < end, oldest first."""
        try:
            result = self._client.table(TABLE) \
                .select("id, user_id, count, created_at") \
                .eq("user_id", user_id) \
                .gte("created_at", start.isoformat()) \
                .lt("created_at", end.isoformat()) \
                .order("created_at") \
                .execute()

            return [_to_record(row) for row in result.data or []]

        except Exception as e:
            logger.error(f"Error listing pushup records for {user_id} in [{start}, {end}): {e}")
            return []

    def insert(self, user_id: str, count: int) -> PushupRecord:
        """Create a record; created_at is stamped by the data service."""
        try:
            result = self._client.table(TABLE) \
                .insert({"user_id": user_id, "count": count}) \
                .execute()
        except Exception as e:
            logger.error(f"Error inserting pushup record for {user_id}: {e}")
            raise DataServiceError(f"Failed to save pushups: {e}") from e

        if not result.data:
            raise DataServiceError("Insert returned no row")
        return _to_record(result.data[0])

    def update_count(self, record_id: Union[int, str], count: int) -> PushupRecord:
        """Overwrite the count of an existing record."""
        try:
            result = self._client.table(TABLE) \
                .update({"count": count}) \
                .eq("id", record_id) \
                .execute()
        except Exception as e:
            logger.error(f"Error updating pushup record {record_id}: {e}")
            raise DataServiceError(f"Failed to update pushups: {e}") from e

        if not result.data:
            raise DataServiceError(f"Pushup record {record_id} not found for update")
        return _to_record(result.data[0])

    def delete(self, record_id: Union[int, str]) -> bool:
        """Delete a record by id."""
        try:
            result = self._client.table(TABLE) \
                .delete() \
                .eq("id", record_id) \
                .execute()
        except Exception as e:
            logger.error(f"Error deleting pushup record {record_id}: {e}")
            raise DataServiceError(f"Failed to reset pushups: {e}") from e

        return len(result.data) > 0 if result.data else False
