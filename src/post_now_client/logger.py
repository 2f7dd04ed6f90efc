import json
import logging
from datetime import datetime, timezone


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    clients_updated: int | None = None,
) -> None:
    """Log one registry action as a JSON line.

    Handlers and levels are left to the application.
    """
    logger.info(
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": "INFO",
                "module": module,
                "action": action,
                "clients_updated": clients_updated,
                "outcome": outcome,
            }
        )
    )
