"""
Repository Interfaces (Ports) for the Pushup Tracker.

This package defines abstract interfaces that decouple domain logic from
infrastructure (the hosted data service). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import PushupRecordRepository, GoalRepository

    class DashboardService:
        def __init__(self, records: PushupRecordRepository, goals: GoalRepository):
            self._records = records
            self._goals = goals
"""

# Daily pushup records
from application.ports.pushup_repository import PushupRecordRepository

# Per-user goal
from application.ports.goal_repository import GoalRepository

__all__ = [
    "PushupRecordRepository",
    "GoalRepository",
]
