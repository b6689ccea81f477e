"""Audit logging for bibsort runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: one structured event
"""

from bibsort.audit.helpers import generate_run_id
from bibsort.audit.logger import AuditLogger
from bibsort.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
