import pytest

from rdio_auth.config import (AUTHORIZATION_URL, PROFILE_URL, TOKEN_URL,
                              StrategyOptions)
from rdio_auth.errors import ConfigurationError


def test_defaults():
    options = StrategyOptions(client_id=u'cid', client_secret=u'secret')

    assert options.name == u'rdio'
    assert options.authorization_url == AUTHORIZATION_URL
    assert options.token_url == TOKEN_URL
    assert options.profile_url == PROFILE_URL
    assert options.profile_extras == u'email, vanityName'
    assert options.custom_headers == {}
    assert options.scope is None
    assert options.state is False
    assert options.timeout is None


def test_aliases():
    options = StrategyOptions(consumerKey=u'cid',
                              consumer_secret=u'secret',
                              callbackURL=u'https://example.net/cb',
                              userProfileURL=u'https://example.net/api/')

    assert options.client_id == u'cid'
    assert options.client_secret == u'secret'
    assert options.callback_url == u'https://example.net/cb'
    assert options.profile_url == u'https://example.net/api/'


@pytest.mark.parametrize('options', [
    {},
    {'client_id': u'cid'},
    {'client_secret': u'secret'},
    {'client_id': u'', 'client_secret': u'secret'},
])
def test_credentials_are_required(options):
    with pytest.raises(ConfigurationError):
        StrategyOptions(**options)


def test_unknown_option():
    with pytest.raises(ConfigurationError):
        StrategyOptions(client_id=u'cid', client_secret=u'secret',
                        clientSecrets=u'typo')


def test_conflicting_aliases():
    with pytest.raises(ConfigurationError):
        StrategyOptions(client_id=u'cid', consumer_key=u'other',
                        client_secret=u'secret')


def test_scope_and_flags_are_normalized():
    options = StrategyOptions(client_id=u'cid', client_secret=u'secret',
                              scope=u'read, write', state=u'yes',
                              skip_user_profile=u'0', timeout=u'2.5')

    assert options.scope == [u'read', u'write']
    assert options.state is True
    assert options.skip_user_profile is False
    assert options.timeout == 2.5


def test_bad_boolean():
    with pytest.raises(ConfigurationError):
        StrategyOptions(client_id=u'cid', client_secret=u'secret',
                        state=u'maybe')


def test_from_file(tmp_path):
    path = tmp_path / 'rdio.ini'
    path.write_text(u'[rdio]\n'
                    u'consumerKey = cid\n'
                    u'client_secret = secret\n'
                    u'callback_url = https://example.net/cb\n'
                    u'state = true\n')

    options = StrategyOptions.from_file(str(path),
                                        client_secret=u'override',
                                        scope=None)

    assert options.client_id == u'cid'
    assert options.client_secret == u'override'
    assert options.callback_url == u'https://example.net/cb'
    assert options.state is True


def test_from_file_without_section(tmp_path):
    path = tmp_path / 'rdio.ini'
    path.write_text(u'[other]\nclient_id = cid\n')

    with pytest.raises(ConfigurationError):
        StrategyOptions.from_file(str(path))


def test_from_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        StrategyOptions.from_file(str(tmp_path / 'nope.ini'))


@pytest.mark.parametrize('options', [
    {'timeout': u'soon'},
    {'timeout': [1]},
    {'custom_headers': u'X-Client: rdio-auth'},
])
def test_bad_values_are_configuration_errors(options):
    with pytest.raises(ConfigurationError):
        StrategyOptions(client_id=u'cid', client_secret=u'secret', **options)


def test_bad_timeout_in_file(tmp_path):
    path = tmp_path / 'rdio.ini'
    path.write_text(u'[rdio]\nclient_id = cid\nclient_secret = secret\n'
                    u'timeout = soon\n')

    with pytest.raises(ConfigurationError):
        StrategyOptions.from_file(str(path))
