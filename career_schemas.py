"""Data shapes exchanged by the career analysis pipeline."""
from typing import TypedDict, List, Optional, Dict, Any


class Skill(TypedDict):
    """Normalized user skill; level is an ordinal 1..5 rating."""
    name: str
    category: str
    level: int


class SkillGap(TypedDict, total=False):
    """Gap between a user's skill and its recommended level.

    ``current_level`` is omitted when the user has no record of the skill at all.
    """
    skill_name: str
    category: str
    importance: int  # 1-5 scale
    current_level: int
    recommended_level: int


class JobRecommendation(TypedDict, total=False):
    """Job role scored against the user's skills."""
    title: str
    match_score: int  # 0-100
    required_skills: List[str]
    missing_skills: List[SkillGap]
    average_salary: Optional[str]
    growth_outlook: Optional[str]
    description: str


class CourseRecommendation(TypedDict, total=False):
    """Course catalog entry."""
    title: str
    provider: str
    skills_covered: List[str]
    difficulty: str
    duration: str
    url: Optional[str]


class TopSkill(TypedDict):
    name: str
    level: int


class CareerAnalysis(TypedDict):
    """Aggregate output of one analysis request."""
    current_skill_level: Dict[str, float]  # category -> average level
    top_skills: List[TopSkill]
    skill_gaps: List[SkillGap]
    job_recommendations: List[JobRecommendation]
    course_recommendations: List[CourseRecommendation]
    resume_score: int
    interview_readiness: int


class PriorMetrics(TypedDict, total=False):
    resume_score: Optional[int]
    interview_score: Optional[int]


class ProfileSnapshot(TypedDict, total=False):
    """Everything the pipeline reads about one user."""
    user_id: str
    skills: List[Skill]
    education: List[Dict[str, Any]]  # [{institution, degree, field_of_study, ...}]
    experience: List[Dict[str, Any]]  # [{company, position, description: [bullets], technologies}]
    resume_document: Optional[Dict[str, Any]]  # structured output of the resume parser
    prior_metrics: Optional[PriorMetrics]


class Scores(TypedDict):
    resume_score: int
    interview_readiness: int
    source: str  # "computed" or "cached"


class DemandSkill(TypedDict):
    """Market-demand catalog entry."""
    name: str
    category: str
    recommended_level: int
    importance: int


class JobRole(TypedDict, total=False):
    """Role catalog entry."""
    title: str
    required_skills: List[str]
    description: str
    average_salary: Optional[str]
    growth_outlook: Optional[str]
