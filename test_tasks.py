import tasks
from career_scorer import get_cached_scores


def test_refresh_user_metrics_task(app, make_profile):
    make_profile(skills=[('SQL', 3)], education=1)

    result = tasks.refresh_user_metrics.apply(args=['user-1']).get()

    assert result['resume_score'] == 55
    assert result['interview_readiness'] == 48
    assert get_cached_scores('user-1') == {'resume_score': 55, 'interview_score': 48}


def test_refresh_all_metrics_queues_users_with_skills(app, make_profile, monkeypatch):
    make_profile('user-b', skills=[('SQL', 3)])
    make_profile('user-a', skills=[('React', 2)])
    make_profile('user-c')

    queued = []
    monkeypatch.setattr(tasks.refresh_user_metrics, 'delay', queued.append)

    result = tasks.refresh_all_metrics.apply().get()

    assert result == {'queued': 2}
    assert queued == ['user-a', 'user-b']
