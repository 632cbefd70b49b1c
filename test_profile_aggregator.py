import pytest
from sqlalchemy.exc import OperationalError

import profile_aggregator
from career_scorer import persist_scores
from exceptions import UpstreamFetchFailure
from models import db, UserResume
from profile_aggregator import ProfileAggregator, normalize_skills


def test_normalize_skills(catalog):
    rows = [
        ('React', 'Frameworks & Libraries', 7),
        ('  ', 'Other', 3),
        ('react', 'Frameworks & Libraries', 2),
        ('Kubernetes', None, 0),
        ('COBOL', '', 'three'),
    ]

    assert normalize_skills(rows, catalog) == [
        {'name': 'React', 'category': 'Frameworks & Libraries', 'level': 5},
        {'name': 'Kubernetes', 'category': 'DevOps', 'level': 1},
        {'name': 'COBOL', 'category': 'Other', 'level': 1},
    ]


def test_snapshot_reads_profile(app, make_profile, catalog):
    make_profile(
        skills=[('React', 4), ('SQL', 2)],
        education=2,
        experience=[{'description': ['Shipped things'], 'technologies': ['React']}],
        full_name='Ada Lovelace',
        email='ada@example.com',
        summary='Analyst',
    )

    snapshot = ProfileAggregator(catalog).fetch_snapshot('user-1')

    assert [skill['name'] for skill in snapshot['skills']] == ['React', 'SQL']
    assert snapshot['skills'][1]['category'] == 'Databases'
    assert len(snapshot['education']) == 2
    assert snapshot['experience'][0]['technologies'] == ['React']
    assert snapshot['resume_document'] is None
    assert snapshot['prior_metrics'] is None


def test_unknown_user_has_empty_snapshot(app, catalog):
    snapshot = ProfileAggregator(catalog).fetch_snapshot('nobody')

    assert snapshot['skills'] == []
    assert snapshot['resume_document'] is None
    assert set(snapshot) == {'user_id', 'skills', 'education', 'experience', 'resume_document', 'prior_metrics'}


def test_latest_resume_document_is_used(app, make_profile, catalog):
    from datetime import datetime, timedelta

    make_profile(skills=[('React', 4)])
    now = datetime.utcnow()
    db.session.add(UserResume(user_id='user-1', parsed_data={'skills': ['old']}, uploaded_at=now - timedelta(days=1)))
    db.session.add(UserResume(user_id='user-1', parsed_data={'skills': ['new']}, uploaded_at=now))
    db.session.commit()

    snapshot = ProfileAggregator(catalog).fetch_snapshot('user-1')

    assert snapshot['resume_document'] == {'skills': ['new']}


def test_optional_fetch_failure_falls_back_to_default(app, make_profile, catalog, monkeypatch):
    make_profile(skills=[('React', 4)], education=1)
    aggregator = ProfileAggregator(catalog)

    def broken(user_id):
        raise OperationalError('SELECT', {}, Exception('experience table unavailable'))

    monkeypatch.setattr(aggregator, '_fetch_experience', broken)

    snapshot = aggregator.fetch_snapshot('user-1')

    assert snapshot['experience'] == []
    assert len(snapshot['education']) == 1
    assert snapshot['skills'][0]['name'] == 'React'


def test_skill_fetch_failure_raises(app, catalog):
    # Missing tables fail the same way an unreachable store does
    db.drop_all()

    with pytest.raises(UpstreamFetchFailure) as excinfo:
        ProfileAggregator(catalog).fetch_snapshot('user-1')

    assert excinfo.value.user_id == 'user-1'
    assert excinfo.value.source == 'skills'


def test_prior_metrics_come_from_the_metrics_store(app, make_profile, catalog):
    make_profile(skills=[('React', 4)])
    persist_scores('user-1', resume_score=72, interview_score=48)

    snapshot = ProfileAggregator(catalog).fetch_snapshot('user-1')

    assert snapshot['prior_metrics'] == {'resume_score': 72, 'interview_score': 48}


def test_metrics_read_failure_leaves_prior_metrics_empty(app, make_profile, catalog, monkeypatch):
    make_profile(skills=[('React', 4)])
    persist_scores('user-1', resume_score=72)

    def broken(user_id):
        raise OperationalError('SELECT', {}, Exception('metrics table unavailable'))

    monkeypatch.setattr(profile_aggregator, 'get_cached_scores', broken)

    snapshot = ProfileAggregator(catalog).fetch_snapshot('user-1')

    assert snapshot['prior_metrics'] is None
    assert snapshot['skills'][0]['name'] == 'React'
