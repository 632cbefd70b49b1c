"""
Career Analysis Engine
Composes profile aggregation, gap analysis, recommendations and scoring into
a CareerAnalysis for one user
"""

import logging
from collections import OrderedDict
from datetime import datetime
from typing import Dict, List, Any, Optional

from sqlalchemy.exc import SQLAlchemyError

from cache_utils import cache as default_cache, analysis_cache_key, analysis_user_pattern
from career_schemas import Skill, CareerAnalysis, ProfileSnapshot, Scores
from career_scorer import scorer, compute_scores, get_cached_scores, persist_scores
from catalog_provider import CatalogProvider, StaticCatalogProvider
from metrics import app_metrics, track_stage
from models import db, UserResume
from profile_aggregator import ProfileAggregator
from recommendation_engine import generate_job_recommendations, generate_course_recommendations
from skill_gap_analyzer import analyze_skill_gaps

logger = logging.getLogger(__name__)

TOP_SKILLS_LIMIT = 5

SCORE_SOURCES = ('computed', 'cached')


def average_level_by_category(skills: List[Skill]) -> Dict[str, float]:
    """Mean proficiency per category, in order of first appearance"""
    totals = OrderedDict()
    for skill in skills:
        total, count = totals.get(skill['category'], (0, 0))
        totals[skill['category']] = (total + skill['level'], count + 1)
    return {category: round(total / count, 2) for category, (total, count) in totals.items()}


def select_top_skills(skills: List[Skill], limit: int = TOP_SKILLS_LIMIT) -> List[Dict[str, Any]]:
    """Highest proficiency first; equal levels keep profile order"""
    ranked = sorted(skills, key=lambda skill: skill['level'], reverse=True)
    return [{'name': skill['name'], 'level': skill['level']} for skill in ranked[:limit]]


def resolve_scores(snapshot: ProfileSnapshot,
                   cached_scores: Optional[Dict[str, Optional[int]]] = None) -> Scores:
    """
    Scores for an analysis.

    Without cached_scores this is a fresh computation. With them, each cached
    value that is present is returned as-is and only the missing ones are
    computed.
    """
    fresh = compute_scores(snapshot)
    if not cached_scores:
        return fresh

    resume_score = cached_scores.get('resume_score')
    interview_score = cached_scores.get('interview_score')
    if resume_score is None and interview_score is None:
        return fresh

    return {
        'resume_score': resume_score if resume_score is not None else fresh['resume_score'],
        'interview_readiness': interview_score if interview_score is not None else fresh['interview_readiness'],
        'source': 'cached',
    }


def build_career_analysis(snapshot: ProfileSnapshot, catalog: CatalogProvider,
                          cached_scores: Optional[Dict[str, Optional[int]]] = None) -> Optional[CareerAnalysis]:
    """
    Run the analysis pipeline over a profile snapshot.

    Returns None when the profile has no skills: there is nothing to analyze
    yet and the user needs to add skills first. Pure and deterministic for a
    given snapshot and catalog.
    """
    skills = snapshot.get('skills') or []
    if not skills:
        return None

    skill_gaps = analyze_skill_gaps(skills, catalog.demand_skills())
    job_recommendations = generate_job_recommendations(skills, skill_gaps, catalog)
    course_recommendations = generate_course_recommendations(skill_gaps, catalog.courses())
    scores = resolve_scores(snapshot, cached_scores)

    return {
        'current_skill_level': average_level_by_category(skills),
        'top_skills': select_top_skills(skills),
        'skill_gaps': skill_gaps,
        'job_recommendations': job_recommendations,
        'course_recommendations': course_recommendations,
        'resume_score': scores['resume_score'],
        'interview_readiness': scores['interview_readiness'],
    }


class CareerAnalyzer:
    """User-level entry points backed by the profile store"""

    def __init__(self, catalog: Optional[CatalogProvider] = None, cache_backend=None, cache_ttl: int = 300):
        self.catalog = catalog or StaticCatalogProvider()
        self.aggregator = ProfileAggregator(self.catalog)
        self.cache = cache_backend if cache_backend is not None else default_cache
        self.cache_ttl = cache_ttl

    @track_stage('aggregate')
    def fetch_snapshot(self, user_id: str) -> ProfileSnapshot:
        return self.aggregator.fetch_snapshot(user_id)

    def analyze_user(self, user_id: str, score_source: str = 'computed') -> Optional[CareerAnalysis]:
        """
        Full career analysis for a user.

        score_source="computed" always scores the current profile.
        score_source="cached" returns the last persisted scores where present.
        Returns None when the user has no skills on record; raises
        UpstreamFetchFailure when the skills cannot be read.
        """
        if score_source not in SCORE_SOURCES:
            raise ValueError(f"Unknown score source: {score_source}")

        snapshot = self.fetch_snapshot(user_id)
        if not snapshot['skills']:
            logger.info(f"No skills on record for user {user_id}; analysis skipped")
            app_metrics.record_analysis('insufficient_data')
            return None

        cache_key = analysis_cache_key(user_id, snapshot, score_source)
        cached_analysis = self.cache.get(cache_key)
        app_metrics.record_cache_operation('get', cached_analysis is not None)
        if cached_analysis is not None:
            logger.debug(f"Analysis cache hit for user {user_id}")
            app_metrics.record_analysis('cache_hit', cached_analysis)
            return cached_analysis

        # Reusing stored metrics is opt-in; the default path recomputes them
        cached_scores = snapshot.get('prior_metrics') if score_source == 'cached' else None
        analysis = self._build(snapshot, cached_scores)

        self.cache.set(cache_key, analysis, ttl=self.cache_ttl)
        app_metrics.record_analysis('success', analysis)
        logger.info(
            f"Analysis for user {user_id}: {len(analysis['skill_gaps'])} gaps, "
            f"{len(analysis['job_recommendations'])} roles, resume={analysis['resume_score']}, "
            f"interview={analysis['interview_readiness']}"
        )
        return analysis

    @track_stage('analyze')
    def _build(self, snapshot, cached_scores):
        return build_career_analysis(snapshot, self.catalog, cached_scores)

    def get_scores(self, user_id: str, source: str = 'computed') -> Optional[Scores]:
        """
        Scores for a user.

        source="computed" scores the current profile; source="cached" reads the
        last persisted metrics and returns None when there are none.
        """
        if source not in SCORE_SOURCES:
            raise ValueError(f"Unknown score source: {source}")

        if source == 'cached':
            cached = get_cached_scores(user_id)
            if cached is None:
                return None
            return {
                'resume_score': cached['resume_score'],
                'interview_readiness': cached['interview_score'],
                'source': 'cached',
            }

        return compute_scores(self.fetch_snapshot(user_id))

    def refresh_metrics(self, user_id: str) -> Dict[str, Any]:
        """Recompute a user's scores and write them back to the metrics table"""
        scores = compute_scores(self.fetch_snapshot(user_id))
        persisted = persist_scores(
            user_id,
            resume_score=scores['resume_score'],
            interview_score=scores['interview_readiness'],
        )
        if persisted:
            self.cache.flush_pattern(analysis_user_pattern(user_id))
        return dict(scores, persisted=persisted)

    def score_resume_document(self, user_id: str, document: Dict[str, Any],
                              file_name: Optional[str] = None, file_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Store a structured resume document and record its score.

        The document is the resume parser's output; it becomes the user's
        latest resume and its full score is written back as the resume metric.
        """
        resume_score = scorer.score_resume_document(document)

        try:
            resume = UserResume(
                user_id=user_id,
                file_name=file_name,
                file_type=file_type,
                status='processed',
                parsed_data=document,
                uploaded_at=datetime.utcnow(),
            )
            db.session.add(resume)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

        persisted = persist_scores(user_id, resume_score=resume_score)
        if persisted:
            self.cache.flush_pattern(analysis_user_pattern(user_id))

        logger.info(f"Stored resume document {resume.id} for user {user_id} with score {resume_score}")
        return {
            'resume_id': resume.id,
            'resume_score': resume_score,
            'persisted': persisted,
        }
