from collections.abc import Mapping
from configparser import ConfigParser
from os.path import expanduser

from .errors import ConfigurationError


AUTHORIZATION_URL = u'https://www.rdio.com/oauth2/authorize'
TOKEN_URL = u'https://services.rdio.com/oauth2/token'
PROFILE_URL = u'https://services.rdio.com/api/1/'
PROFILE_EXTRAS = u'email, vanityName'

DEFAULTS = {
    'name': u'rdio',
    'client_id': None,
    'client_secret': None,
    'callback_url': None,
    'scope': None,
    'authorization_url': AUTHORIZATION_URL,
    'token_url': TOKEN_URL,
    'profile_url': PROFILE_URL,
    'profile_extras': PROFILE_EXTRAS,
    'custom_headers': None,
    'skip_user_profile': False,
    'state': False,
    'timeout': None,
}

ALIASES = {
    'consumer_key': 'client_id',
    'clientID': 'client_id',
    'consumerKey': 'client_id',
    'consumer_secret': 'client_secret',
    'clientSecret': 'client_secret',
    'consumerSecret': 'client_secret',
    'callbackURL': 'callback_url',
    'redirect_uri': 'callback_url',
    'user_profile_url': 'profile_url',
    'profileURL': 'profile_url',
    'userProfileURL': 'profile_url',
    'authorizationURL': 'authorization_url',
    'tokenURL': 'token_url',
    'customHeaders': 'custom_headers',
    'skipUserProfile': 'skip_user_profile',
}

REQUIRED = ('client_id', 'client_secret')

BOOLEANS = ('skip_user_profile', 'state')


def canonical_name(key):
    return ALIASES.get(key, key)


class StrategyOptions(object):
    """Validated strategy options.

    Accepts the option names listed in :data:`DEFAULTS` and their
    :data:`ALIASES`. Unknown names and missing credentials raise
    :class:`ConfigurationError` right away.
    """

    def __init__(self, **options):
        values = dict(DEFAULTS)
        given = {}

        for key, value in options.items():
            name = canonical_name(key)

            if name not in DEFAULTS:
                raise ConfigurationError(u'Unknown option: {0}'.format(key))

            if name in given and value != values[name]:
                raise ConfigurationError(
                    u'Options {0} and {1} are mutually exclusive'
                    .format(given[name], key))

            given[name] = key
            values[name] = value

        for name in REQUIRED:
            if not values[name]:
                raise ConfigurationError(
                    u'Rdio strategy requires a {0} option'.format(name))

        values['scope'] = normalize_scope(values['scope'])
        values['custom_headers'] = as_headers(values['custom_headers'])

        for name in BOOLEANS:
            values[name] = as_bool(values[name])

        values['timeout'] = as_timeout(values['timeout'])

        self.__dict__.update(values)

    def as_dict(self):
        return dict((name, getattr(self, name)) for name in DEFAULTS)

    @classmethod
    def from_file(cls, path, section=u'rdio', **overrides):
        """Read options from the *section* of an INI file at *path*.

        Keyword arguments that aren't ``None`` take precedence over the file.
        """
        parser = ConfigParser(interpolation=None)
        # keep camelCase aliases intact
        parser.optionxform = str

        if not parser.read(expanduser(path)):
            raise ConfigurationError(u'Unable to read {0}'.format(path))

        if not parser.has_section(section):
            raise ConfigurationError(
                u'No [{0}] section in {1}'.format(section, path))

        options = dict((canonical_name(k), v)
                       for k, v in parser.items(section))

        options.update((canonical_name(k), v)
                       for k, v in overrides.items() if v is not None)

        return cls(**options)


def normalize_scope(scope):
    if not scope:
        return None

    if isinstance(scope, str):
        scope = scope.replace(u',', u' ').split()

    return list(scope) or None


def as_bool(value):
    if isinstance(value, str):
        value = value.strip().lower()
        if value in (u'1', u'yes', u'true', u'on'):
            return True
        if value in (u'', u'0', u'no', u'false', u'off'):
            return False
        raise ConfigurationError(u'Not a boolean: {0}'.format(value))
    return bool(value)


def as_headers(value):
    if not value:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            u'custom_headers must be a mapping, not {0!r}'.format(value))
    return dict(value)


def as_timeout(value):
    if value is None or value == u'':
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(u'Not a timeout: {0!r}'.format(value))
