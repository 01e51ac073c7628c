"""
The Rdio OAuth 2.0 strategy.

Rdio wants the client credentials in an ``Authorization: Basic`` header when
exchanging tokens, and its web service API is called with form-encoded POSTs
rather than GETs. Everything else is plain OAuth 2.0.

::

    def verify(access_token, refresh_token, profile):
        return User.find_or_create(rdio_id=profile.id)

    rdio = RdioStrategy(verify,
                        client_id='123-456-789',
                        client_secret='shhh-its-a-secret',
                        callback_url='https://www.example.net/auth/rdio/callback')

    url, state = rdio.authorization_url()
    ...
    user = rdio.handle_callback(request.args, expected_state=state)
"""
import logging

import requests
from oauthlib.oauth2 import OAuth2Error

from .config import StrategyOptions, canonical_name
from .errors import ProfileFetchError
from .oauth import BasicAuthTokenExchange, OAuth2Client, RdioOAuth2Session
from .profile import parse_profile
from .strategy import AuthStrategy


logger = logging.getLogger(__name__)


class RdioStrategy(AuthStrategy):

    def __init__(self, verify, options=None, **kwargs):
        super(RdioStrategy, self).__init__(verify)

        if options is None:
            options = StrategyOptions(**kwargs)
        elif kwargs:
            overrides = dict((canonical_name(k), v) for k, v in kwargs.items())
            options = StrategyOptions(**dict(options.as_dict(), **overrides))

        self.options = options
        self.name = options.name
        self.profile_url = options.profile_url
        self.profile_extras = options.profile_extras
        self.skip_user_profile = options.skip_user_profile
        self.state = options.state

        self.client = OAuth2Client(options.client_id,
                                   options.client_secret,
                                   options.authorization_url,
                                   options.token_url,
                                   redirect_uri=options.callback_url,
                                   scope=options.scope,
                                   custom_headers=options.custom_headers,
                                   timeout=options.timeout,
                                   token_exchange=BasicAuthTokenExchange(),
                                   session_class=RdioOAuth2Session)

    def authorization_url(self, state=None, **params):
        """Return ``(url, state)`` for sending the user to Rdio.

        A state is generated when the ``state`` option is on and none is
        given.
        """
        if state is None and self.state:
            state = self.client.new_state()
        return self.client.authorization_url(state=state, **params), state

    def token_params(self):
        params = super(RdioStrategy, self).token_params()
        if self.options.callback_url:
            params['redirect_uri'] = self.options.callback_url
        return params

    def exchange_token(self, code, params=None):
        return self.client.exchange_token(code, params)

    def fetch_profile(self, access_token):
        try:
            with self.client.session(access_token,
                                     api_url=self.profile_url) as session:
                resp = session.api_post(u'currentUser',
                                        {'extras': self.profile_extras},
                                        timeout=self.client.timeout)
            resp.raise_for_status()
        except (requests.RequestException, OAuth2Error) as exc:
            raise ProfileFetchError(u'Failed to fetch user profile',
                                    exc) from exc

        profile = parse_profile(resp.text)
        logger.debug(u'Fetched %s user profile', self.name)
        return profile
