"""
Celery Configuration for Background Task Processing
Runs metrics recomputation outside the request cycle
"""

from celery import Celery
from datetime import timedelta


def make_celery(app):
    """Create Celery app with Flask app context"""

    # Redis URL for broker and backend
    redis_url = app.config.get('CELERY_BROKER_URL') or app.config.get('REDIS_URL', 'redis://localhost:6379/2')

    celery = Celery(
        app.import_name,
        backend=redis_url,
        broker=redis_url,
        include=['tasks']  # Import task modules
    )

    celery.conf.update(
        # Task settings
        task_serializer='json',
        accept_content=['json'],
        result_serializer='json',
        timezone='UTC',
        enable_utc=True,

        # Result backend settings
        result_expires=3600,  # 1 hour

        # Worker settings
        worker_prefetch_multiplier=1,
        task_acks_late=True,
        worker_max_tasks_per_child=1000,

        # Task routing
        task_routes={
            'tasks.refresh_user_metrics': {'queue': 'metrics'},
            'tasks.refresh_all_metrics': {'queue': 'metrics'},
        },

        # Beat schedule for periodic tasks
        beat_schedule={
            'refresh-all-metrics': {
                'task': 'tasks.refresh_all_metrics',
                'schedule': timedelta(hours=24),  # Nightly recomputation
            },
        }
    )

    class ContextTask(celery.Task):
        """Make celery tasks work with Flask app context"""
        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery.Task = ContextTask
    return celery
