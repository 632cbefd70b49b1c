"""
Database models for the Career Guidance profile store
User profile records read by the analysis pipeline, plus the metrics,
preferences and study plans it writes back
"""

from flask_sqlalchemy import SQLAlchemy
from datetime import datetime
from sqlalchemy import JSON
from sqlalchemy import Index, UniqueConstraint
import uuid

db = SQLAlchemy()


def _new_id():
    return str(uuid.uuid4())


class User(db.Model):
    """Profile owner with contact details"""
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    full_name = db.Column(db.String(200))
    email = db.Column(db.String(255), unique=True)
    phone = db.Column(db.String(50))
    location = db.Column(db.String(200))
    linkedin_url = db.Column(db.String(500))
    website_url = db.Column(db.String(500))
    summary = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    skills = db.relationship('UserSkill', backref='user', cascade='all, delete-orphan')
    educations = db.relationship('UserEducation', backref='user', cascade='all, delete-orphan')
    experiences = db.relationship('UserExperience', backref='user', cascade='all, delete-orphan')
    metrics = db.relationship('UserMetrics', backref='user', uselist=False, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<User {self.full_name} - {self.email}>'


class Skill(db.Model):
    """Skill catalog entry; (name, category) is the natural key"""
    __tablename__ = 'skills'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=False, default='Other')

    __table_args__ = (
        UniqueConstraint('name', 'category', name='uq_skill_name_category'),
        Index('idx_skill_name', 'name'),
    )

    def __repr__(self):
        return f'<Skill {self.name} ({self.category})>'


class UserSkill(db.Model):
    """A user's proficiency in one catalog skill"""
    __tablename__ = 'user_skills'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    skill_id = db.Column(db.Integer, db.ForeignKey('skills.id'), nullable=False)
    proficiency_level = db.Column(db.Integer, nullable=False, default=3)  # 1-5

    skill = db.relationship('Skill')

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('user_id', 'skill_id', name='uq_user_skill'),
        Index('idx_user_skill_user', 'user_id'),
    )


class UserEducation(db.Model):
    """Education background"""
    __tablename__ = 'user_education'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)

    institution = db.Column(db.String(300), nullable=False)
    degree = db.Column(db.String(300))
    field_of_study = db.Column(db.String(200))
    start_date = db.Column(db.String(20))
    end_date = db.Column(db.String(20))
    gpa = db.Column(db.String(20))
    location = db.Column(db.String(200))
    achievements = db.Column(JSON)  # Array of achievement strings

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index('idx_education_user', 'user_id'),
    )

    def to_dict(self):
        return {
            'institution': self.institution,
            'degree': self.degree,
            'field_of_study': self.field_of_study,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'gpa': self.gpa,
            'location': self.location,
            'achievements': self.achievements or [],
        }


class UserExperience(db.Model):
    """Work experience entries"""
    __tablename__ = 'user_experience'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)

    company = db.Column(db.String(300), nullable=False)
    position = db.Column(db.String(300), nullable=False)
    start_date = db.Column(db.String(20))
    end_date = db.Column(db.String(20))  # NULL for current position
    location = db.Column(db.String(200))
    description = db.Column(JSON)  # Array of bullet strings
    technologies = db.Column(JSON)  # Array of technologies

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index('idx_experience_user', 'user_id'),
    )

    def to_dict(self):
        return {
            'company': self.company,
            'position': self.position,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'location': self.location,
            'description': self.description or [],
            'technologies': self.technologies or [],
        }


class UserResume(db.Model):
    """Structured resume document produced by the external resume parser"""
    __tablename__ = 'user_resumes'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)

    file_name = db.Column(db.String(255))
    file_type = db.Column(db.String(20))
    status = db.Column(db.String(50), default='processed')
    parsed_data = db.Column(JSON)
    uploaded_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index('idx_resume_user_uploaded', 'user_id', 'uploaded_at'),
    )


class UserMetrics(db.Model):
    """Last computed scores; a disposable cache of derived values"""
    __tablename__ = 'user_metrics'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, unique=True)

    resume_score = db.Column(db.Integer)  # 0-100
    interview_score = db.Column(db.Integer)  # 0-100
    last_updated = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<UserMetrics {self.user_id} resume={self.resume_score} interview={self.interview_score}>'


class UserPreference(db.Model):
    """Target job role chosen by the user"""
    __tablename__ = 'user_preferences'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, unique=True)

    target_job_role = db.Column(db.String(300))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)


class UserStudyPlan(db.Model):
    """Study plan generated for one target role"""
    __tablename__ = 'user_study_plans'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)

    job_title = db.Column(db.String(300), nullable=False)
    plan_data = db.Column(JSON)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('user_id', 'job_title', name='uq_study_plan_user_job'),
    )
