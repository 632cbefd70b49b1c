"""
API tests for the career guidance endpoints
"""

from models import db


def test_career_analysis(client, make_profile):
    make_profile(skills=[('React', 4), ('TypeScript', 2)])

    response = client.get('/api/users/user-1/career-analysis')

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['data']['skill_gaps'][0]['skill_name'] == 'TypeScript'
    assert body['data']['resume_score'] == 50
    assert body['data']['interview_readiness'] == 46


def test_career_analysis_insufficient_data(client, make_profile):
    make_profile('new-user')

    response = client.get('/api/users/new-user/career-analysis')

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is False
    assert body['insufficient_data'] is True


def test_career_analysis_rejects_unknown_score_source(client):
    response = client.get('/api/users/user-1/career-analysis?scores=stale')

    assert response.status_code == 400


def test_profile_store_failure_is_503(client):
    db.drop_all()

    response = client.get('/api/users/user-1/career-analysis')

    assert response.status_code == 503
    assert 'error' in response.get_json()


def test_scores_and_metrics_refresh(client, make_profile):
    make_profile(skills=[('React', 4), ('TypeScript', 2)], education=1)

    assert client.get('/api/users/user-1/scores?source=cached').status_code == 404

    computed = client.get('/api/users/user-1/scores').get_json()
    assert computed == {'resume_score': 55, 'interview_readiness': 51, 'source': 'computed'}

    refreshed = client.post('/api/users/user-1/metrics/refresh')
    assert refreshed.status_code == 200
    assert refreshed.get_json()['persisted'] is True

    cached = client.get('/api/users/user-1/scores?source=cached').get_json()
    assert cached == {'resume_score': 55, 'interview_readiness': 51, 'source': 'cached'}


def test_metrics_refresh_queues_task_when_async(client, app, monkeypatch):
    import tasks

    class QueuedTask:
        id = 'task-123'

    queued = []

    def fake_delay(user_id):
        queued.append(user_id)
        return QueuedTask()

    monkeypatch.setattr(tasks.refresh_user_metrics, 'delay', fake_delay)
    monkeypatch.setitem(app.config, 'ASYNC_PROCESSING', True)

    response = client.post('/api/users/user-1/metrics/refresh')

    assert response.status_code == 202
    assert response.get_json() == {'status': 'queued', 'task_id': 'task-123'}
    assert queued == ['user-1']


def test_submit_resume(client, make_profile):
    make_profile(skills=[('React', 4)])
    document = {
        'contact_info': {'name': 'Ada', 'email': 'ada@example.com'},
        'skills': ['React', 'SQL'],
        'projects': [{'name': 'Engine'}],
    }

    response = client.post('/api/users/user-1/resume', json={'resume': document, 'file_name': 'cv.pdf'})

    assert response.status_code == 201
    assert response.get_json()['resume_score'] == 4 + 2 + 5

    analysis = client.get('/api/users/user-1/career-analysis').get_json()
    assert analysis['data']['resume_score'] == 11


def test_submit_resume_requires_document(client):
    assert client.post('/api/users/user-1/resume', json={'resume': 'text'}).status_code == 400
    assert client.post('/api/users/user-1/resume', data='nope').status_code == 400


def test_job_preference(client):
    response = client.put('/api/users/user-1/preference', json={'job_title': ' Frontend Developer '})

    assert response.status_code == 200
    assert response.get_json()['target_job_role'] == 'Frontend Developer'
    assert client.put('/api/users/user-1/preference', json={}).status_code == 400


def test_study_plan(client, make_profile):
    make_profile(skills=[('JavaScript', 4), ('React', 3), ('TypeScript', 2)])

    response = client.post('/api/users/user-1/study-plan', json={'job_title': 'Frontend Developer'})

    assert response.status_code == 201
    assert response.get_json()['data']['match_score'] == 60

    missing = client.post('/api/users/user-1/study-plan', json={'job_title': 'DevOps Engineer'})
    assert missing.status_code == 404


def test_catalog_endpoints(client):
    assert len(client.get('/api/catalog/demand-skills').get_json()['demand_skills']) == 11
    assert len(client.get('/api/catalog/roles').get_json()['job_roles']) == 5
    assert len(client.get('/api/catalog/courses').get_json()['courses']) == 10


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['checks']['database']['status'] == 'healthy'
    assert body['checks']['redis']['status'] == 'degraded'


def test_submit_resume_with_loosely_typed_sections(client, make_profile):
    make_profile(skills=[('React', 4)])
    document = {
        'contact_info': 'Ada Lovelace, ada@example.com',
        'summary': ['not', 'a', 'string'],
        'experience': ['Engineer at Acme', {'description': 'one\ntwo\nthree', 'technologies': ['Go']}],
        'skills': 'React, SQL',
    }

    response = client.post('/api/users/user-1/resume', json={'resume': document})

    assert response.status_code == 201
    # 3 for the bare string entry, 6 for the detailed one; other sections score nothing
    assert response.get_json()['resume_score'] == 9
