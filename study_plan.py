"""
Study Plan Generator
Turns a recommended job role's missing skills into a staged learning plan
"""

import logging
from datetime import datetime
from typing import Dict, List, Any

from sqlalchemy.exc import SQLAlchemyError

from career_schemas import CareerAnalysis, JobRecommendation, CourseRecommendation
from exceptions import RoleNotRecommended
from models import db, UserPreference, UserStudyPlan

logger = logging.getLogger(__name__)

# Missing skills at or above this importance go into the foundation milestone
FOUNDATION_IMPORTANCE = 4

DEFAULT_TIMEFRAME = "3-6 months"


def find_job_recommendation(analysis: CareerAnalysis, job_title: str) -> JobRecommendation:
    for job in analysis.get('job_recommendations', []):
        if job['title'] == job_title:
            return job
    raise RoleNotRecommended(job_title)


def courses_for_missing_skills(job: JobRecommendation,
                               courses: List[CourseRecommendation]) -> List[CourseRecommendation]:
    """Analysis courses covering at least one of the role's missing skills"""
    missing = {gap['skill_name'].strip().lower() for gap in job['missing_skills']}
    return [
        course for course in courses
        if any(skill.strip().lower() in missing for skill in course.get('skills_covered', []))
    ]


def generate_study_plan(analysis: CareerAnalysis, job_title: str) -> Dict[str, Any]:
    """
    Build a study plan for one of the analysis' recommended roles.

    Raises RoleNotRecommended when job_title is not among them.
    """
    job = find_job_recommendation(analysis, job_title)

    return {
        'job_title': job_title,
        'match_score': job['match_score'],
        'overview': (
            f"This study plan is designed to help you become a {job_title} "
            f"by focusing on the skills you need to develop."
        ),
        'timeframe': DEFAULT_TIMEFRAME,
        'skills_to_focus': [
            {
                'name': gap['skill_name'],
                'priority': gap['importance'],
                'current_level': gap.get('current_level', 0),
                'target_level': gap['recommended_level'],
            }
            for gap in job['missing_skills']
        ],
        'recommended_courses': courses_for_missing_skills(job, analysis.get('course_recommendations', [])),
        'milestones': [
            {
                'title': "Foundation Building",
                'description': "Master the fundamental skills required for the role",
                'duration': "4 weeks",
                'tasks': [
                    f"Learn {gap['skill_name']} basics"
                    for gap in job['missing_skills']
                    if gap['importance'] >= FOUNDATION_IMPORTANCE
                ],
            },
            {
                'title': "Skill Development",
                'description': "Deepen your knowledge in key areas",
                'duration': "8 weeks",
                'tasks': [
                    "Complete recommended courses",
                    "Build small projects to practice skills",
                    "Participate in coding challenges",
                ],
            },
            {
                'title': "Project Building",
                'description': "Apply your skills to real-world projects",
                'duration': "6 weeks",
                'tasks': [
                    "Build a portfolio project showcasing your skills",
                    "Contribute to open source projects",
                    "Document your learning journey",
                ],
            },
            {
                'title': "Interview Preparation",
                'description': "Prepare for technical interviews",
                'duration': "4 weeks",
                'tasks': [
                    "Practice technical interview questions",
                    "Prepare your resume and portfolio",
                    "Research companies and roles",
                ],
            },
        ],
    }


def save_study_plan(user_id: str, plan: Dict[str, Any]) -> UserStudyPlan:
    """Upsert the plan for (user, job title)"""
    try:
        record = UserStudyPlan.query.filter_by(user_id=user_id, job_title=plan['job_title']).first()
        if record is None:
            record = UserStudyPlan(user_id=user_id, job_title=plan['job_title'])
            db.session.add(record)
        record.plan_data = plan
        record.created_at = datetime.utcnow()
        db.session.commit()
        return record
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Failed to save study plan for user {user_id}")
        raise


def save_job_preference(user_id: str, job_title: str) -> UserPreference:
    """Upsert the user's target job role"""
    try:
        preference = UserPreference.query.filter_by(user_id=user_id).first()
        if preference is None:
            preference = UserPreference(user_id=user_id)
            db.session.add(preference)
        preference.target_job_role = job_title
        preference.updated_at = datetime.utcnow()
        db.session.commit()
        return preference
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Failed to save job preference for user {user_id}")
        raise
