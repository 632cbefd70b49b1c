"""
Skill Gap Analysis
Compares a user's skills against the market demand catalog
"""

import logging
from typing import Dict, List, Optional

from career_schemas import Skill, SkillGap, DemandSkill

logger = logging.getLogger(__name__)


def index_skills_by_name(skills: List[Skill]) -> Dict[str, Skill]:
    """Map lowercased skill name -> skill, first record wins"""
    index = {}
    for skill in skills:
        key = skill['name'].strip().lower()
        if key not in index:
            index[key] = skill
    return index


def find_skill_gap(demand: DemandSkill, user_skill: Optional[Skill]) -> Optional[SkillGap]:
    """Gap for one demand entry, or None when the user already meets it"""
    if user_skill is None:
        # Missing entirely: no current level recorded
        return {
            'skill_name': demand['name'],
            'category': demand['category'],
            'importance': demand['importance'],
            'recommended_level': demand['recommended_level'],
        }

    if user_skill['level'] < demand['recommended_level']:
        return {
            'skill_name': demand['name'],
            'category': demand['category'],
            'importance': demand['importance'],
            'current_level': user_skill['level'],
            'recommended_level': demand['recommended_level'],
        }

    return None


def analyze_skill_gaps(skills: List[Skill], demand_catalog: List[DemandSkill]) -> List[SkillGap]:
    """
    Identify skill gaps against the demand catalog.

    Catalog entries are matched case-insensitively by exact name. Gaps are
    ordered by importance descending; equal importance keeps catalog order.
    """
    user_skills = index_skills_by_name(skills)

    gaps = []
    for demand in demand_catalog:
        gap = find_skill_gap(demand, user_skills.get(demand['name'].strip().lower()))
        if gap is not None:
            gaps.append(gap)

    # sorted() is stable, so catalog order breaks ties
    gaps = sorted(gaps, key=lambda gap: gap['importance'], reverse=True)

    logger.debug(f"Found {len(gaps)} skill gaps across {len(demand_catalog)} demand entries")
    return gaps
