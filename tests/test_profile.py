import json

import pytest

from rdio_auth.errors import ProfileParseError, ProviderError
from rdio_auth.profile import Profile, parse_profile


def test_current_user_is_normalized(current_user):
    body = json.dumps(current_user)

    profile = parse_profile(body)

    assert profile.to_dict() == {
        'provider': u'rdio',
        'id': u'u1',
        'username': u'ada',
        'emails': [u'ada@example.com'],
        'displayName': u'Ada Lovelace',
        'name': {'givenName': u'Ada', 'familyName': u'Lovelace'},
    }
    assert profile.raw == body
    assert profile.json == current_user


def test_raw_and_json_are_exported_on_request(current_user):
    d = parse_profile(json.dumps(current_user)).to_dict(include_raw=True)

    assert d['_json'] == current_user
    assert json.loads(d['_raw']) == current_user


def test_vanity_name_stands_in_for_username(current_user):
    del current_user['result']['username']
    current_user['result']['vanityName'] = u'countess'

    assert parse_profile(json.dumps(current_user)).username == u'countess'


def test_missing_email_gives_no_emails(current_user):
    del current_user['result']['email']

    assert parse_profile(json.dumps(current_user)).emails == []


def test_provider_error():
    body = json.dumps({'status': u'error', 'message': u'Invalid token'})

    with pytest.raises(ProviderError) as excinfo:
        parse_profile(body)

    assert excinfo.value.message == u'Invalid token'
    assert excinfo.value.response['status'] == u'error'


@pytest.mark.parametrize('body', [
    u'<html>Service Unavailable</html>',
    u'[1, 2, 3]',
    u'{"status": "ok"}',
    u'{"status": "ok", "result": {"firstName": "Ada"}}',
])
def test_unusable_bodies(body):
    with pytest.raises(ProfileParseError):
        parse_profile(body)


def test_profiles_compare_by_content(current_user):
    body = json.dumps(current_user)

    assert parse_profile(body) == parse_profile(body)
    assert parse_profile(body) != Profile(u'rdio', u'u2')
