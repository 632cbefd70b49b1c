"""
Profile Aggregator
Reads one user's profile from the profile store and normalizes it into a
snapshot for the analysis pipeline
"""

import logging
from typing import Dict, List, Any, Optional, Iterable, Tuple

from sqlalchemy.exc import SQLAlchemyError

from career_schemas import Skill, ProfileSnapshot
from catalog_provider import CatalogProvider
from career_scorer import get_cached_scores
from exceptions import UpstreamFetchFailure, OptionalFetchFailure
from models import db, Skill as SkillRecord, UserSkill, UserEducation, UserExperience, UserResume

logger = logging.getLogger(__name__)

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5


def normalize_skills(rows: Iterable[Tuple[Any, Any, Any]], catalog: CatalogProvider) -> List[Skill]:
    """
    Normalize (name, category, level) rows into Skill records.

    Blank names are dropped, levels are clamped to 1..5, a missing category is
    looked up in the catalog, and only the first record per case-insensitive
    name is kept.
    """
    skills = []
    seen = set()

    for name, category, level in rows:
        name = (name or '').strip()
        if not name:
            continue

        key = name.lower()
        if key in seen:
            logger.debug(f"Ignoring duplicate skill record for {name}")
            continue
        seen.add(key)

        try:
            level = int(level)
        except (TypeError, ValueError):
            level = MIN_SKILL_LEVEL

        skills.append({
            'name': name,
            'category': (category or '').strip() or catalog.category_for_skill(name),
            'level': max(MIN_SKILL_LEVEL, min(level, MAX_SKILL_LEVEL)),
        })

    return skills


class ProfileAggregator:
    """Builds ProfileSnapshots from the profile store"""

    def __init__(self, catalog: CatalogProvider):
        self.catalog = catalog

    def fetch_snapshot(self, user_id: str) -> ProfileSnapshot:
        """
        Read everything the pipeline needs about a user.

        Raises UpstreamFetchFailure when skills cannot be read. Failures on any
        other table are logged and the field falls back to empty or None.
        """
        skills = normalize_skills(self._fetch_skill_rows(user_id), self.catalog)

        return {
            'user_id': user_id,
            'skills': skills,
            'education': self._optional(user_id, 'education', self._fetch_education, []),
            'experience': self._optional(user_id, 'experience', self._fetch_experience, []),
            'resume_document': self._optional(user_id, 'resume', self._fetch_resume_document, None),
            'prior_metrics': self._optional(user_id, 'metrics', get_cached_scores, None),
        }

    def _optional(self, user_id, source, fetcher, default):
        try:
            return fetcher(user_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            failure = OptionalFetchFailure(user_id, source, f"Failed to fetch {source} for user {user_id}: {e}")
            logger.warning(f"{failure}; continuing without it")
            return default

    def _fetch_skill_rows(self, user_id: str) -> List[Tuple[str, str, int]]:
        try:
            rows = (
                db.session.query(SkillRecord.name, SkillRecord.category, UserSkill.proficiency_level)
                .join(UserSkill, UserSkill.skill_id == SkillRecord.id)
                .filter(UserSkill.user_id == user_id)
                .order_by(UserSkill.id)
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Skill fetch failed for user {user_id}: {e}")
            raise UpstreamFetchFailure(user_id, 'skills') from e
        return [tuple(row) for row in rows]

    def _fetch_education(self, user_id: str) -> List[Dict[str, Any]]:
        rows = UserEducation.query.filter_by(user_id=user_id).order_by(UserEducation.id).all()
        return [row.to_dict() for row in rows]

    def _fetch_experience(self, user_id: str) -> List[Dict[str, Any]]:
        rows = UserExperience.query.filter_by(user_id=user_id).order_by(UserExperience.id).all()
        return [row.to_dict() for row in rows]

    def _fetch_resume_document(self, user_id: str) -> Optional[Dict[str, Any]]:
        resume = (
            UserResume.query.filter_by(user_id=user_id)
            .order_by(UserResume.uploaded_at.desc(), UserResume.id.desc())
            .first()
        )
        if resume is None or not resume.parsed_data:
            return None
        return resume.parsed_data
