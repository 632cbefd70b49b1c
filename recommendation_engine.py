"""
Recommendation Engine
Job role matching and course recommendations derived from skill gaps
"""

import math
import logging
from typing import List, Optional, Set

from career_schemas import Skill, SkillGap, JobRole, JobRecommendation, CourseRecommendation
from catalog_provider import CatalogProvider

logger = logging.getLogger(__name__)

# Roles at or below this match score are not recommended
MIN_MATCH_SCORE = 40

# Defaults for a required skill that has no demand-catalog gap
DEFAULT_GAP_IMPORTANCE = 4
DEFAULT_GAP_RECOMMENDED_LEVEL = 3

MAX_COURSE_RECOMMENDATIONS = 5


def _skill_names(skills: List[Skill]) -> Set[str]:
    return {skill['name'].strip().lower() for skill in skills}


def calculate_match_score(required_skills: List[str], user_skill_names: Set[str]) -> int:
    """
    Percentage of required skills the user holds, rounded half up.

    Presence only: proficiency level does not affect the match. A role
    without required skills scores 0.
    """
    if not required_skills:
        return 0

    matching = sum(1 for skill in required_skills if skill.strip().lower() in user_skill_names)
    score = int(math.floor(100 * matching / len(required_skills) + 0.5))
    return max(0, min(score, 100))


def _missing_skill_gap(skill_name: str, skill_gaps: List[SkillGap],
                       catalog: CatalogProvider) -> SkillGap:
    key = skill_name.strip().lower()
    for gap in skill_gaps:
        if gap['skill_name'].strip().lower() == key:
            return gap

    return {
        'skill_name': skill_name,
        'category': catalog.category_for_skill(skill_name),
        'importance': DEFAULT_GAP_IMPORTANCE,
        'recommended_level': DEFAULT_GAP_RECOMMENDED_LEVEL,
    }


def score_job_role(role: JobRole, user_skill_names: Set[str], skill_gaps: List[SkillGap],
                   catalog: CatalogProvider) -> JobRecommendation:
    """Score a single role and list the required skills the user is missing"""
    required_skills = list(role.get('required_skills') or [])
    missing_skills = [
        _missing_skill_gap(skill, skill_gaps, catalog)
        for skill in required_skills
        if skill.strip().lower() not in user_skill_names
    ]

    return {
        'title': role['title'],
        'match_score': calculate_match_score(required_skills, user_skill_names),
        'required_skills': required_skills,
        'missing_skills': missing_skills,
        'average_salary': role.get('average_salary'),
        'growth_outlook': role.get('growth_outlook'),
        'description': role.get('description', ''),
    }


def generate_job_recommendations(skills: List[Skill], skill_gaps: List[SkillGap],
                                 catalog: CatalogProvider,
                                 roles: Optional[List[JobRole]] = None) -> List[JobRecommendation]:
    """
    Rank catalog roles by match score.

    Only roles scoring above MIN_MATCH_SCORE are returned, highest first;
    equal scores keep catalog order.
    """
    user_skill_names = _skill_names(skills)
    roles = roles if roles is not None else catalog.job_roles()

    recommendations = []
    for role in roles:
        recommendation = score_job_role(role, user_skill_names, skill_gaps, catalog)
        if recommendation['match_score'] > MIN_MATCH_SCORE:
            recommendations.append(recommendation)

    recommendations = sorted(recommendations, key=lambda rec: rec['match_score'], reverse=True)

    logger.debug(f"Recommended {len(recommendations)} of {len(roles)} job roles")
    return recommendations


def generate_course_recommendations(skill_gaps: List[SkillGap],
                                    courses: List[CourseRecommendation]) -> List[CourseRecommendation]:
    """
    Pick one course per gap, in gap order.

    The first catalog course covering the gap's skill is taken. Duplicate
    titles are dropped keeping the first occurrence, then the list is cut to
    MAX_COURSE_RECOMMENDATIONS.
    """
    recommendations = []
    for gap in skill_gaps:
        key = gap['skill_name'].strip().lower()
        for course in courses:
            if any(skill.strip().lower() == key for skill in course.get('skills_covered', [])):
                recommendations.append(course)
                break

    unique = []
    seen_titles = set()
    for course in recommendations:
        if course['title'] in seen_titles:
            continue
        seen_titles.add(course['title'])
        unique.append(course)

    return unique[:MAX_COURSE_RECOMMENDATIONS]
