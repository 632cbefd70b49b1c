import redis

import cache_utils
from cache_utils import RedisCache, analysis_cache_key, analysis_user_pattern, escape_glob, get_profile_fingerprint


class UnreachableRedis:
    def ping(self):
        raise redis.ConnectionError('connection refused')


def test_disconnected_cache_is_a_no_op():
    cache = RedisCache()

    assert cache.get('key') is None
    assert cache.set('key', {'a': 1}) is False
    assert cache.delete('key') is False
    assert cache.flush_pattern('analysis:*') == 0


def test_failed_connection_disables_cache(monkeypatch):
    monkeypatch.setattr(cache_utils.redis, 'from_url', lambda url, **kwargs: UnreachableRedis())

    cache = RedisCache('redis://localhost:6379/0')

    assert cache.connected is False
    assert cache.redis_client is None


def test_init_app_respects_cache_flag(app):
    cache = RedisCache()
    cache.init_app(app)

    assert app.config['CACHE_ENABLED'] is False
    assert cache.connected is False


def test_fingerprint_ignores_key_order():
    first = {'skills': [{'name': 'SQL', 'level': 3}], 'education': []}
    second = {'education': [], 'skills': [{'level': 3, 'name': 'SQL'}]}

    assert get_profile_fingerprint(first) == get_profile_fingerprint(second)
    assert get_profile_fingerprint(first) != get_profile_fingerprint({'skills': [], 'education': []})


def test_analysis_cache_key():
    snapshot = {'skills': []}

    key = analysis_cache_key('user-1', snapshot, 'cached')

    assert key == f"analysis:user-1:cached:{get_profile_fingerprint(snapshot)}"


class RecordingRedis:
    def __init__(self, keys):
        self.keys = keys
        self.matches = []
        self.deleted = []

    def scan_iter(self, match):
        self.matches.append(match)
        return iter(self.keys)

    def delete(self, *keys):
        self.deleted.extend(keys)
        return len(keys)


def test_escape_glob():
    assert escape_glob('user-1') == 'user-1'
    assert escape_glob('*') == '\\*'
    assert escape_glob('a?[b]\\c') == 'a\\?\\[b\\]\\\\c'


def test_user_pattern_cannot_widen_to_other_users():
    assert analysis_user_pattern('user-1') == 'analysis:user-1:*'
    assert analysis_user_pattern('*') == 'analysis:\\*:*'
    assert analysis_user_pattern('u?[1]') == 'analysis:u\\?\\[1\\]:*'


def test_flush_pattern_scans_with_prefix():
    client = RecordingRedis([b'career:analysis:\\*:computed:abc'])
    cache = RedisCache()
    cache.redis_client = client
    cache.connected = True

    assert cache.flush_pattern(analysis_user_pattern('*')) == 1
    assert client.matches == ['career:analysis:\\*:*']
    assert client.deleted == [b'career:analysis:\\*:computed:abc']
