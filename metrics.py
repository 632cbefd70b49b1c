"""
Prometheus Metrics Configuration
Application monitoring for the career analysis pipeline
"""

import sys
import time
import logging
from functools import wraps
from prometheus_flask_exporter import PrometheusMetrics
from prometheus_client import Counter, Histogram, Gauge, Info

logger = logging.getLogger(__name__)


class ApplicationMetrics:
    """
    Custom metrics collector for the Career Guidance Engine
    Business metrics beyond basic HTTP metrics
    """

    def __init__(self):
        """Initialize custom metrics"""

        self.analysis_duration = Histogram(
            'career_analysis_duration_seconds',
            'Time spent in each analysis stage',
            ['stage']
        )

        self.analysis_total = Counter(
            'career_analysis_total',
            'Career analysis requests by outcome',
            ['outcome']
        )

        self.career_scores = Histogram(
            'career_scores',
            'Distribution of computed scores',
            ['score_type'],
            buckets=[0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
        )

        self.job_matches = Histogram(
            'career_job_recommendations',
            'Number of job roles recommended per analysis',
            buckets=[0, 1, 2, 3, 5, 8, 13]
        )

        self.cache_operations_total = Counter(
            'career_cache_operations_total',
            'Total analysis cache operations',
            ['operation', 'status']
        )

        self.cache_hit_ratio = Gauge(
            'career_cache_hit_ratio',
            'Analysis cache hit ratio (0-1)'
        )

        self.errors_total = Counter(
            'career_errors_total',
            'Total application errors',
            ['error_type', 'component']
        )

        self.application_info = Info(
            'career_application',
            'Application version and build information'
        )
        self.application_info.info({
            'version': '1.0.0',
            'python_version': f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        })

        # Internal tracking
        self._cache_hits = 0
        self._cache_misses = 0

        logger.info("Application metrics initialized")

    def record_analysis(self, outcome: str, analysis=None):
        """Record one analysis request and, on success, its scores"""
        self.analysis_total.labels(outcome=outcome).inc()
        if analysis:
            self.career_scores.labels(score_type='resume').observe(analysis['resume_score'])
            self.career_scores.labels(score_type='interview').observe(analysis['interview_readiness'])
            self.job_matches.observe(len(analysis['job_recommendations']))

    def record_cache_operation(self, operation: str, hit: bool):
        """Record cache operation metrics"""
        status = 'hit' if hit else 'miss'
        self.cache_operations_total.labels(operation=operation, status=status).inc()

        if operation == 'get':
            if hit:
                self._cache_hits += 1
            else:
                self._cache_misses += 1

            total_ops = self._cache_hits + self._cache_misses
            if total_ops > 0:
                self.cache_hit_ratio.set(self._cache_hits / total_ops)

    def record_error(self, error_type: str, component: str):
        """Record application error"""
        self.errors_total.labels(error_type=error_type, component=component).inc()


# Global metrics instance
app_metrics = ApplicationMetrics()


def init_metrics(app):
    """Initialize Prometheus metrics for Flask app"""
    if not app.config.get('METRICS_ENABLED', True):
        logger.info("Prometheus endpoint disabled by configuration")
        return None

    try:
        metrics = PrometheusMetrics(app)
        metrics.info(
            'flask_app_info',
            'Application Information',
            version='1.0.0'
        )
        logger.info("Prometheus metrics initialized successfully")
        return metrics
    except ValueError as e:
        # Raised when collectors are already registered in this process
        logger.error(f"Failed to initialize Prometheus metrics: {e}")
        return None


def track_stage(stage: str, component: str = 'engine'):
    """
    Decorator recording the duration of an analysis stage

    Args:
        stage: Stage name used as the histogram label
        component: Component name for error tracking
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                app_metrics.record_error(error_type=type(e).__name__, component=component)
                raise
            finally:
                app_metrics.analysis_duration.labels(stage=stage).observe(time.time() - start_time)
        return wrapper
    return decorator
