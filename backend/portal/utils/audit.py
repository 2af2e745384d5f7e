import logging
from typing import Optional

logger = logging.getLogger(__name__)


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: dict | None = None
):
    logger.info(
        "audit action=%s entity=%s:%s actor=%s payload=%s",
        action,
        entity_type,
        entity_id,
        actor_id or "-",
        payload or {},
    )
