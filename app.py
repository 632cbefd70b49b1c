from flask import Flask, request, jsonify
import os
import time
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_talisman import Talisman
from flask_migrate import Migrate
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Database imports
from models import db
from config import get_config
from logging_config import setup_logging
from cache_utils import cache
from metrics import init_metrics, app_metrics
from catalog_provider import get_catalog_provider
from career_engine import CareerAnalyzer, SCORE_SOURCES
from study_plan import generate_study_plan, save_study_plan, save_job_preference
from exceptions import UpstreamFetchFailure, RoleNotRecommended

INSUFFICIENT_DATA_MESSAGE = "Insufficient data to provide recommendations. Please add more skills to your profile."

# Initialize Flask app with configuration
app = Flask(__name__)
config = get_config()
app.config.from_object(config)

# Setup logging (must be done early)
app_logger = setup_logging(app)

# Security headers; HTTPS enforcement only in production
force_https = os.environ.get('FLASK_ENV') == 'production'
talisman = Talisman(
    app,
    force_https=force_https,
    strict_transport_security=True,
    content_security_policy={'default-src': "'self'"}
)

# Initialize database
db.init_app(app)

# Initialize Flask-Migrate for database migrations
migrate = Migrate(app, db)

# Initialize Redis analysis cache (no-op when disabled or unreachable)
cache.init_app(app)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[app.config.get('RATELIMIT_DEFAULT', '200 per hour')]
)
limiter.init_app(app)

prometheus_metrics = init_metrics(app)

analyzer = CareerAnalyzer(
    catalog=get_catalog_provider(app.config),
    cache_ttl=app.config.get('ANALYSIS_CACHE_TTL', 300)
)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _upstream_error(user_id, error):
    app_metrics.record_error(error_type=type(error).__name__, component='profile_store')
    app.logger.error(f"Profile store unavailable for user {user_id}: {error}")
    return jsonify({'error': 'Profile data is temporarily unavailable', 'message': str(error)}), 503


@app.route('/api/users/<user_id>/career-analysis')
def career_analysis(user_id):
    """Career analysis for a user; ?scores=cached reuses the last persisted scores"""
    score_source = request.args.get('scores', 'computed')
    if score_source not in SCORE_SOURCES:
        return jsonify({'error': f"scores must be one of {', '.join(SCORE_SOURCES)}"}), 400

    try:
        analysis = analyzer.analyze_user(user_id, score_source=score_source)
    except UpstreamFetchFailure as e:
        return _upstream_error(user_id, e)

    if analysis is None:
        # Expected for new users, not a failure of the service
        return jsonify({
            'success': False,
            'insufficient_data': True,
            'error': INSUFFICIENT_DATA_MESSAGE
        })

    return jsonify({'success': True, 'data': analysis})


@app.route('/api/users/<user_id>/scores')
def user_scores(user_id):
    """Resume and interview scores; ?source=cached returns the last persisted values"""
    source = request.args.get('source', 'computed')
    if source not in SCORE_SOURCES:
        return jsonify({'error': f"source must be one of {', '.join(SCORE_SOURCES)}"}), 400

    try:
        scores = analyzer.get_scores(user_id, source=source)
    except UpstreamFetchFailure as e:
        return _upstream_error(user_id, e)

    if scores is None:
        return jsonify({'error': 'No cached scores for this user'}), 404

    return jsonify(scores)


@app.route('/api/users/<user_id>/metrics/refresh', methods=['POST'])
@limiter.limit("30 per minute")
def refresh_metrics(user_id):
    """Recompute and persist a user's scores, in the background when enabled"""
    if app.config.get('ASYNC_PROCESSING'):
        from tasks import refresh_user_metrics
        task = refresh_user_metrics.delay(user_id)
        return jsonify({'status': 'queued', 'task_id': task.id}), 202

    try:
        result = analyzer.refresh_metrics(user_id)
    except UpstreamFetchFailure as e:
        return _upstream_error(user_id, e)

    return jsonify(result)


@app.route('/api/users/<user_id>/resume', methods=['POST'])
@limiter.limit("20 per minute")
def submit_resume(user_id):
    """Store a structured resume document and score it"""
    data = _json_body()
    if data is None or not isinstance(data.get('resume'), dict):
        return jsonify({'error': 'A structured resume object is required under "resume"'}), 400

    try:
        result = analyzer.score_resume_document(
            user_id,
            data['resume'],
            file_name=data.get('file_name'),
            file_type=data.get('file_type')
        )
    except SQLAlchemyError as e:
        app.logger.error(f"Failed to store resume for user {user_id}: {e}")
        return jsonify({'error': 'Failed to store resume'}), 500

    return jsonify(result), 201


@app.route('/api/users/<user_id>/preference', methods=['PUT'])
def job_preference(user_id):
    """Save the user's target job role"""
    data = _json_body()
    job_title = (data or {}).get('job_title')
    if not job_title or not isinstance(job_title, str):
        return jsonify({'error': 'job_title is required'}), 400

    try:
        preference = save_job_preference(user_id, job_title.strip())
    except SQLAlchemyError:
        return jsonify({'error': 'Failed to save job preference'}), 500

    return jsonify({'success': True, 'target_job_role': preference.target_job_role})


@app.route('/api/users/<user_id>/study-plan', methods=['POST'])
@limiter.limit("20 per minute")
def study_plan(user_id):
    """Generate and store a study plan for one of the user's recommended roles"""
    data = _json_body()
    job_title = (data or {}).get('job_title')
    if not job_title or not isinstance(job_title, str):
        return jsonify({'error': 'job_title is required'}), 400

    try:
        analysis = analyzer.analyze_user(user_id)
    except UpstreamFetchFailure as e:
        return _upstream_error(user_id, e)

    if analysis is None:
        return jsonify({
            'success': False,
            'insufficient_data': True,
            'error': INSUFFICIENT_DATA_MESSAGE
        })

    try:
        plan = generate_study_plan(analysis, job_title)
    except RoleNotRecommended as e:
        return jsonify({'error': str(e)}), 404

    try:
        save_study_plan(user_id, plan)
    except SQLAlchemyError:
        return jsonify({'error': 'Failed to save study plan'}), 500

    return jsonify({'success': True, 'data': plan}), 201


@app.route('/api/catalog/demand-skills')
def catalog_demand_skills():
    return jsonify({'demand_skills': analyzer.catalog.demand_skills()})


@app.route('/api/catalog/roles')
def catalog_roles():
    return jsonify({'job_roles': analyzer.catalog.job_roles()})


@app.route('/api/catalog/courses')
def catalog_courses():
    return jsonify({'courses': analyzer.catalog.courses()})


@app.route('/health')
@limiter.exempt
def health():
    """Health check endpoint for monitoring and load balancers"""
    health_checks = {}
    overall_healthy = True

    # Database connectivity check
    try:
        start_time = time.time()
        db.session.execute(text('SELECT 1')).scalar()
        db_time = time.time() - start_time

        health_checks['database'] = {
            'status': 'healthy',
            'response_time_ms': round(db_time * 1000, 2),
            'details': 'Database connection successful'
        }
    except SQLAlchemyError as e:
        health_checks['database'] = {
            'status': 'unhealthy',
            'error': str(e),
            'details': 'Database connection failed'
        }
        overall_healthy = False
        app.logger.error(f"Database health check failed: {str(e)}")

    # Redis is optional; the analysis cache degrades to recomputation
    health_checks['redis'] = {
        'status': 'healthy' if cache.connected else 'degraded',
        'details': 'Redis connection successful' if cache.connected else 'Redis not available - caching disabled'
    }

    return jsonify({
        'status': 'healthy' if overall_healthy else 'unhealthy',
        'checks': health_checks
    }), 200 if overall_healthy else 503


if __name__ == '__main__':
    # Development server only - use wsgi.py for production
    app.logger.info("Starting Career Guidance API (development mode) at http://localhost:5000")

    env = os.environ.get('FLASK_ENV', 'development')
    debug_mode = env == 'development'

    app.run(debug=debug_mode, host='0.0.0.0', port=5000)
