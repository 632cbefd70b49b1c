"""
Background Tasks for Metrics Write-back
Recomputes scores and caches them in the user_metrics table
"""

import logging
from typing import Dict, Any

from app import app, analyzer
from celery_config import make_celery
from exceptions import UpstreamFetchFailure
from models import db, UserSkill

logger = logging.getLogger(__name__)

celery = make_celery(app)


@celery.task(bind=True, name='tasks.refresh_user_metrics', max_retries=3, default_retry_delay=30)
def refresh_user_metrics(self, user_id: str) -> Dict[str, Any]:
    """
    Recompute one user's scores and persist them

    Args:
        user_id: Profile owner id

    Returns:
        The computed scores plus whether they were persisted
    """
    try:
        result = analyzer.refresh_metrics(user_id)
    except UpstreamFetchFailure as e:
        logger.warning(f"Metrics refresh for user {user_id} failed, retrying: {e}")
        raise self.retry(exc=e)

    logger.info(f"Refreshed metrics for user {user_id}: {result}")
    return result


@celery.task(name='tasks.refresh_all_metrics')
def refresh_all_metrics() -> Dict[str, Any]:
    """Queue a metrics refresh for every user with at least one skill"""
    user_ids = [row[0] for row in db.session.query(UserSkill.user_id).distinct().order_by(UserSkill.user_id)]
    for user_id in user_ids:
        refresh_user_metrics.delay(user_id)

    logger.info(f"Queued metrics refresh for {len(user_ids)} users")
    return {'queued': len(user_ids)}
