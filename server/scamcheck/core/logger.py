from collections import deque
from datetime import datetime, timezone
from typing import Deque, List

MAX_LOG_ENTRIES = 1000

logs: Deque[str] = deque(maxlen=MAX_LOG_ENTRIES)


def add_log(message: str):
    """Add a timestamped log entry in UTC."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    log_entry = f"[{timestamp}] {message}"
    logs.append(log_entry)
    print(log_entry)  # Also print to console


def get_logs() -> List[str]:
    """Get all buffered logs, oldest first."""
    return list(logs)


def clear_logs():
    """Clear all logs."""
    logs.clear()
