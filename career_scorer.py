"""
Career Scoring
Resume completeness score and interview readiness score
"""

import logging
from datetime import datetime
from typing import Dict, List, Any, Optional

from sqlalchemy.exc import SQLAlchemyError

from career_schemas import Skill, ProfileSnapshot, Scores
from models import db, UserMetrics

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100

# Skill categories that count toward interview readiness
TECHNICAL_CATEGORIES = (
    'Programming Languages',
    'Frameworks & Libraries',
    'Databases',
    'Computer Science',
)


def clamp_score(score) -> int:
    return int(max(SCORE_MIN, min(score, SCORE_MAX)))


def _count(items) -> int:
    """Number of entries in a list section; anything else counts as empty"""
    return len(items) if isinstance(items, (list, tuple)) else 0


def _bullet_count(description) -> int:
    """Description bullets; a plain string counts its non-empty lines"""
    if isinstance(description, str):
        return len([line for line in description.splitlines() if line.strip()])
    if isinstance(description, (list, tuple)):
        return len([item for item in description if item])
    return 0


class CareerScorer:
    """Additive resume and interview readiness scoring with per-section caps"""

    def __init__(self):
        # Section caps (total = 100)
        self.RESUME_CAPS = {
            'contact_info': 10,
            'summary': 5,
            'education': 15,
            'experience': 30,
            'skills': 15,
            'certifications': 10,
            'projects': 10,
            'languages': 5,
        }

        self.CONTACT_FIELDS = ('name', 'email', 'phone', 'location', 'linkedin')
        self.CONTACT_FIELD_POINTS = 2
        self.SUMMARY_MIN_LENGTH = 50

        # Fallback path when no structured resume document exists
        self.FALLBACK_BASE = 50
        self.FALLBACK_EDUCATION_POINTS = 5
        self.FALLBACK_EDUCATION_CAP = 15
        self.FALLBACK_EXPERIENCE_POINTS = 7
        self.FALLBACK_EXPERIENCE_CAP = 25

        self.INTERVIEW_BASE = 40
        self.INTERVIEW_EDUCATION_BONUS = 5
        self.INTERVIEW_EXPERIENCE_POINTS = 3

    def score_resume_document(self, document: Dict[str, Any]) -> int:
        """
        Score a structured resume document for completeness and quality.

        Total over any JSON object: sections of the wrong type score nothing.
        """
        if not isinstance(document, dict):
            document = {}

        score = (
            self._score_contact_info(document.get('contact_info')) +
            self._score_summary(document.get('summary')) +
            min(_count(document.get('education')) * 5, self.RESUME_CAPS['education']) +
            self._score_experience(document.get('experience')) +
            min(_count(document.get('skills')), self.RESUME_CAPS['skills']) +
            min(_count(document.get('certifications')) * 5, self.RESUME_CAPS['certifications']) +
            min(_count(document.get('projects')) * 5, self.RESUME_CAPS['projects']) +
            min(_count(document.get('languages')) * 2, self.RESUME_CAPS['languages'])
        )

        # Section caps sum to 100
        return clamp_score(score)

    def score_resume_fallback(self, education: List[Dict[str, Any]],
                              experience: List[Dict[str, Any]]) -> int:
        """Coarse resume score from education and experience counts only"""
        score = self.FALLBACK_BASE
        score += min(_count(education) * self.FALLBACK_EDUCATION_POINTS, self.FALLBACK_EDUCATION_CAP)
        score += min(_count(experience) * self.FALLBACK_EXPERIENCE_POINTS, self.FALLBACK_EXPERIENCE_CAP)
        return clamp_score(score)

    def score_resume(self, snapshot: ProfileSnapshot) -> int:
        """Full document score when a parsed resume exists, fallback otherwise"""
        document = snapshot.get('resume_document')
        if document:
            return self.score_resume_document(document)
        return self.score_resume_fallback(snapshot.get('education') or [], snapshot.get('experience') or [])

    def score_interview_readiness(self, skills: List[Skill], education: List[Dict[str, Any]],
                                  experience: List[Dict[str, Any]]) -> int:
        """
        Interview readiness from technical skill levels, education and experience.

        Technical skill levels are summed without a per-skill cap before the
        final clamp, so profiles with many technical skills saturate at 100.
        """
        score = self.INTERVIEW_BASE
        score += sum(skill['level'] for skill in skills or [] if skill['category'] in TECHNICAL_CATEGORIES)

        if education:
            score += self.INTERVIEW_EDUCATION_BONUS

        score += _count(experience) * self.INTERVIEW_EXPERIENCE_POINTS

        return clamp_score(score)

    def _score_contact_info(self, contact_info: Optional[Dict[str, Any]]) -> int:
        if not isinstance(contact_info, dict):
            return 0
        score = sum(self.CONTACT_FIELD_POINTS for field in self.CONTACT_FIELDS if contact_info.get(field))
        return min(score, self.RESUME_CAPS['contact_info'])

    def _score_summary(self, summary: Optional[str]) -> int:
        if isinstance(summary, str) and len(summary) > self.SUMMARY_MIN_LENGTH:
            return self.RESUME_CAPS['summary']
        return 0

    def _score_experience(self, experience: Optional[List[Dict[str, Any]]]) -> int:
        if not isinstance(experience, (list, tuple)):
            return 0

        points = 0
        for entry in experience:
            entry_points = 3  # Base points for each experience

            # A bare string entry has no description or technologies to credit
            if isinstance(entry, str):
                points += entry_points if entry.strip() else 0
                continue
            if not isinstance(entry, dict):
                continue

            # Detailed descriptions
            if _bullet_count(entry.get('description')) >= 3:
                entry_points += 2

            # Technologies listed
            if entry.get('technologies'):
                entry_points += 1

            points += entry_points

        return min(points, self.RESUME_CAPS['experience'])


scorer = CareerScorer()


def compute_scores(snapshot: ProfileSnapshot) -> Scores:
    """Fresh scores for a profile snapshot. Pure: never reads cached metrics."""
    return {
        'resume_score': scorer.score_resume(snapshot),
        'interview_readiness': scorer.score_interview_readiness(
            snapshot.get('skills') or [],
            snapshot.get('education') or [],
            snapshot.get('experience') or [],
        ),
        'source': 'computed',
    }


# =============================================================================
# METRICS STORE
# =============================================================================

def get_cached_scores(user_id: str) -> Optional[Dict[str, Optional[int]]]:
    """Last persisted scores for a user, or None when nothing was stored"""
    metrics = UserMetrics.query.filter_by(user_id=user_id).first()
    if metrics is None:
        return None
    return {
        'resume_score': metrics.resume_score,
        'interview_score': metrics.interview_score,
    }


def persist_scores(user_id: str, resume_score: Optional[int] = None,
                   interview_score: Optional[int] = None) -> bool:
    """
    Upsert the user's metrics row. Concurrent writers race; last write wins.

    Only the scores passed in are overwritten.
    """
    try:
        metrics = UserMetrics.query.filter_by(user_id=user_id).first()
        if metrics is None:
            metrics = UserMetrics(user_id=user_id)
            db.session.add(metrics)

        if resume_score is not None:
            metrics.resume_score = clamp_score(resume_score)
        if interview_score is not None:
            metrics.interview_score = clamp_score(interview_score)
        metrics.last_updated = datetime.utcnow()

        db.session.commit()
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to persist metrics for user {user_id}: {e}")
        return False
