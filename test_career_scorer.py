import pytest

from career_scorer import (
    clamp_score,
    compute_scores,
    get_cached_scores,
    persist_scores,
    scorer,
)


def experience_entries():
    return [
        {'company': 'Acme', 'description': ['a', 'b', 'c'], 'technologies': ['React']},
        {'company': 'Initech', 'description': [], 'technologies': []},
    ]


def test_fallback_resume_score():
    snapshot = {
        'skills': [],
        'education': [{}, {}, {}],
        'experience': experience_entries(),
        'resume_document': None,
    }

    assert scorer.score_resume(snapshot) == 79


def test_fallback_caps_education_and_experience():
    assert scorer.score_resume_fallback([], []) == 50
    assert scorer.score_resume_fallback([{}] * 10, [{}] * 10) == 90


def test_full_resume_document_score():
    document = {
        'contact_info': {
            'name': 'Ada', 'email': 'ada@example.com', 'phone': '555',
            'location': 'London', 'linkedin': 'linkedin.com/in/ada',
        },
        'summary': 'Engineer with a decade of experience building analytical engines and tooling.',
        'education': [{}, {}],
        'experience': experience_entries(),
        'skills': ['skill'] * 20,
        'certifications': [{}],
        'projects': [{}, {}, {}],
        'languages': [{}],
    }

    # 10 + 5 + 10 + 9 + 15 + 5 + 10 + 2
    assert scorer.score_resume_document(document) == 66


def test_resume_document_sections_are_capped():
    document = {
        'contact_info': {'name': 'x', 'email': 'x', 'phone': 'x', 'location': 'x', 'linkedin': 'x'},
        'summary': 's' * 60,
        'education': [{}] * 5,
        'experience': [{'description': 'one\ntwo\nthree', 'technologies': ['Go']}] * 10,
        'skills': ['s'] * 30,
        'certifications': [{}] * 5,
        'projects': [{}] * 5,
        'languages': [{}] * 5,
    }

    assert scorer.score_resume_document(document) == 100


def test_short_summary_and_empty_document():
    assert scorer.score_resume_document({'summary': 'Too short'}) == 0
    assert scorer.score_resume_document({}) == 0


def test_resume_document_takes_precedence_over_fallback():
    snapshot = {
        'education': [{}, {}, {}],
        'experience': [],
        'resume_document': {'skills': ['a', 'b']},
    }

    assert scorer.score_resume(snapshot) == 2


def test_interview_readiness_counts_technical_skills_only():
    skills = [
        {'name': 'React', 'category': 'Frameworks & Libraries', 'level': 4},
        {'name': 'TypeScript', 'category': 'Programming Languages', 'level': 2},
        {'name': 'Docker', 'category': 'DevOps', 'level': 5},
    ]

    assert scorer.score_interview_readiness(skills, [{}], [{}, {}]) == 40 + 6 + 5 + 6
    assert scorer.score_interview_readiness([], [], []) == 40


def test_interview_readiness_saturates_at_100():
    skills = [{'name': f'Lang {i}', 'category': 'Programming Languages', 'level': 5} for i in range(20)]

    assert scorer.score_interview_readiness(skills, [], []) == 100


@pytest.mark.parametrize('raw, expected', [(-5, 0), (0, 0), (55, 55), (100, 100), (140, 100)])
def test_clamp_score(raw, expected):
    assert clamp_score(raw) == expected


def test_compute_scores_is_fresh():
    snapshot = {
        'skills': [{'name': 'SQL', 'category': 'Databases', 'level': 3}],
        'education': [],
        'experience': [],
        'prior_metrics': {'resume_score': 1, 'interview_score': 1},
    }

    assert compute_scores(snapshot) == {
        'resume_score': 50,
        'interview_readiness': 43,
        'source': 'computed',
    }


def test_persist_and_read_cached_scores(app):
    assert get_cached_scores('user-1') is None

    assert persist_scores('user-1', resume_score=70, interview_score=55) is True
    assert get_cached_scores('user-1') == {'resume_score': 70, 'interview_score': 55}

    # Only the scores passed in are overwritten
    assert persist_scores('user-1', resume_score=150) is True
    assert get_cached_scores('user-1') == {'resume_score': 100, 'interview_score': 55}


def test_resume_document_tolerates_wrong_section_types():
    document = {
        'contact_info': ['ada@example.com'],
        'summary': 12345,
        'education': 'B.Sc.',
        'experience': ['Engineer at Acme', None, {'description': {'bullets': 3}}],
        'projects': {'name': 'Engine'},
    }

    # Only the string and dict experience entries count, at base points
    assert scorer.score_resume_document(document) == 6
    assert scorer.score_resume_document({'experience': 'Engineer at Acme'}) == 0
    assert scorer.score_resume_document(['not', 'a', 'document']) == 0
