"""
Shared pytest fixtures: in-memory profile store and profile builders
"""

import os
import re

# The app module reads its configuration at import time
os.environ['FLASK_ENV'] = 'testing'

import pytest  # noqa: E402

from app import app as flask_app  # noqa: E402
from catalog_provider import StaticCatalogProvider  # noqa: E402
from models import db, User, Skill, UserSkill, UserEducation, UserExperience  # noqa: E402


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog():
    return StaticCatalogProvider()


class FakeCache:
    """Dict-backed stand-in for RedisCache"""

    def __init__(self):
        self.store = {}
        self.flushed = []

    def get(self, key, prefix="career"):
        return self.store.get(f"{prefix}:{key}")

    def set(self, key, value, ttl=300, prefix="career"):
        self.store[f"{prefix}:{key}"] = value
        return True

    def flush_pattern(self, pattern, prefix="career"):
        self.flushed.append(pattern)
        # Only trailing-wildcard patterns are issued; escaped characters match literally
        literal = re.sub(r"\\(.)", r"\1", pattern[:-1] if pattern.endswith("*") else pattern)
        user_prefix = f"{prefix}:{literal}"
        doomed = [key for key in self.store if key.startswith(user_prefix)]
        for key in doomed:
            del self.store[key]
        return len(doomed)


@pytest.fixture
def fake_cache():
    return FakeCache()


@pytest.fixture
def make_profile(app, catalog):
    """Insert a user with (name, level) skills plus optional education/experience"""

    def _make(user_id='user-1', skills=(), education=0, experience=(), **user_fields):
        db.session.add(User(id=user_id, **user_fields))

        for name, level in skills:
            category = catalog.category_for_skill(name)
            skill = Skill.query.filter_by(name=name, category=category).first()
            if skill is None:
                skill = Skill(name=name, category=category)
                db.session.add(skill)
                db.session.flush()
            db.session.add(UserSkill(user_id=user_id, skill_id=skill.id, proficiency_level=level))

        for index in range(education):
            db.session.add(UserEducation(user_id=user_id, institution=f"School {index}"))

        for entry in experience:
            db.session.add(UserExperience(
                user_id=user_id,
                company=entry.get('company', 'Acme'),
                position=entry.get('position', 'Engineer'),
                description=entry.get('description'),
                technologies=entry.get('technologies'),
            ))

        db.session.commit()
        return user_id

    return _make
