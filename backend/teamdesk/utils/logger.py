import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from teamdesk.config import settings
from teamdesk.db import ACTIVITY_LOGS

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

async def log_event(
    db,
    action: str,
    details: Optional[Dict[str, Any]] = None,
):
    """
    Log an event to both the application logger and the activity_logs collection
    """
    log_message = f"Action: {action}"
    if details:
        log_message += f" | Details: {details}"

    logger.info(log_message)

    if not settings.ACTIVITY_LOG_ENABLED:
        return

    try:
        log_entry = {
            "action": action,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc),
        }

        await db[ACTIVITY_LOGS].insert_one(log_entry)

    except Exception as e:
        # Don't let logging errors break the application
        logger.error(f"Failed to log event: {e}")

def log_error(message: str, error: Exception):
    """
    Log an error with context, including the traceback when one is active
    """
    logger.error(f"Error: {message} | Exception: {error!r}", exc_info=error)

def log_warning(message: str):
    logger.warning(f"Warning: {message}")

# Event type constants for consistency
class EventTypes:
    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"

    TEAM_CREATED = "team_created"
    TEAM_DELETED = "team_deleted"
