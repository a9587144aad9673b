"""
Supabase Stats Repository Implementation.

Thin wrapper over the calculate_streak and calculate_force_grade stored
procedures. Both recompute the stored aggregate and return it.
"""
import logging
from typing import Any, Optional

from supabase import Client

from application.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SupabaseStatsRepository:
    """Supabase implementation of StatsRepository."""

    def __init__(self, client: Client):
        self._client = client

    def calculate_streak(self, user_id: str) -> Optional[int]:
        data = self._call("calculate_streak", user_id)
        if data is None:
            return None
        return int(data)

    def calculate_force_grade(self, user_id: str) -> Optional[str]:
        data = self._call("calculate_force_grade", user_id)
        return str(data) if data else None

    def _call(self, procedure: str, user_id: str) -> Any:
        try:
            response = self._client.rpc(procedure, {"p_user_id": user_id}).execute()
        except Exception as e:
            logger.exception(f"RPC {procedure} failed for user {user_id}: {e}")
            raise PersistenceError(f"{procedure} failed: {e}", operation=procedure) from e

        data = response.data
        # Scalar functions may come back wrapped in a single-row list
        if isinstance(data, list):
            data = data[0] if data else None
        if isinstance(data, dict):
            data = data.get(procedure)
        return data
