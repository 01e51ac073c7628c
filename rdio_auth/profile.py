import json

from .errors import ProfileParseError, ProviderError


PROVIDER = u'rdio'


class Profile(object):
    """A user profile in the common cross-provider shape.

    ``raw`` is the response body as received and ``json`` its parsed form,
    so fields that aren't mapped here are still reachable.
    """

    def __init__(self, provider, id, username=None, display_name=None,
                 given_name=None, family_name=None, emails=None,
                 raw=None, json=None):
        self.provider = provider
        self.id = id
        self.username = username
        self.display_name = display_name
        self.given_name = given_name
        self.family_name = family_name
        self.emails = list(emails or [])
        self.raw = raw
        self.json = json

    @property
    def name(self):
        return {'givenName': self.given_name, 'familyName': self.family_name}

    def to_dict(self, include_raw=False):
        d = {
            'provider': self.provider,
            'id': self.id,
            'username': self.username,
            'displayName': self.display_name,
            'name': self.name,
            'emails': list(self.emails),
        }

        if include_raw:
            d['_raw'] = self.raw
            d['_json'] = self.json

        return d

    def __eq__(self, other):
        if not isinstance(other, Profile):
            return NotImplemented
        return self.to_dict(include_raw=True) == other.to_dict(include_raw=True)

    def __repr__(self):
        return '<Profile {0}:{1}>'.format(self.provider, self.id)


def display_name(first_name, last_name):
    return u' '.join(n for n in (first_name, last_name) if n)


def parse_profile(body):
    """Build a :class:`Profile` from the body of a ``currentUser`` call.

    Raises :class:`ProviderError` when Rdio says ``status: error`` and
    :class:`ProfileParseError` when the body can't be turned into a profile.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        raise ProfileParseError(u'Failed to parse user profile')

    if not isinstance(payload, dict):
        raise ProfileParseError(u'Failed to parse user profile')

    if payload.get('status') == u'error':
        raise ProviderError(payload.get('message') or u'Unknown error',
                            response=payload)

    result = payload.get('result')

    if not isinstance(result, dict) or not result.get('key'):
        raise ProfileParseError(u'Failed to parse user profile')

    first_name = result.get('firstName')
    last_name = result.get('lastName')
    email = result.get('email')

    return Profile(
        PROVIDER,
        result['key'],
        username=result.get('username') or result.get('vanityName'),
        display_name=display_name(first_name, last_name),
        given_name=first_name,
        family_name=last_name,
        emails=[email] if email else [],
        raw=body,
        json=payload,
    )
