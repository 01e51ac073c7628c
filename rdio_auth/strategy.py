import json
import logging

import requests
from oauthlib.oauth2 import OAuth2Error

from .errors import (AuthorizationError, ConfigurationError, StateMismatchError,
                     TokenError, TokenExchangeError, VerificationFailed)


logger = logging.getLogger(__name__)


class AuthStrategy(object):
    """Base class for authentication strategies.

    Subclasses provide :meth:`authorization_url`, :meth:`exchange_token` and
    :meth:`fetch_profile`; the login flow on top of them lives here.

    *verify* is called as ``verify(access_token, refresh_token, profile)``
    once both the token exchange and the profile fetch succeeded. It returns
    the application's user, or something falsy to reject the login.
    """

    name = None

    skip_user_profile = False

    state = False

    def __init__(self, verify):
        if verify is None or not callable(verify):
            raise ConfigurationError(
                u'{0} strategy requires a verify callback'.format(
                    self.__class__.__name__))
        self.verify = verify

    def authorization_url(self, state=None, **params):
        raise NotImplementedError

    def exchange_token(self, code, params=None):
        raise NotImplementedError

    def fetch_profile(self, access_token):
        raise NotImplementedError

    def token_params(self):
        return {'grant_type': 'authorization_code'}

    def refresh(self, refresh_token, **params):
        params['grant_type'] = 'refresh_token'
        return self.exchange_token(refresh_token, params)

    def authenticate(self, code):
        try:
            token = self.exchange_token(code, self.token_params())
        except requests.HTTPError as exc:
            raise token_error(exc)
        except OAuth2Error as exc:
            raise TokenError(exc.description or exc.error, code=exc.error,
                             uri=exc.uri, status=exc.status_code) from exc
        except requests.RequestException as exc:
            raise TokenExchangeError(u'Failed to obtain access token',
                                     exc) from exc

        if not token.access_token:
            raise TokenExchangeError(u'Failed to obtain access token')

        if self.skip_user_profile:
            profile = None
        else:
            profile = self.fetch_profile(token.access_token)

        user = self.verify(token.access_token, token.refresh_token, profile)

        if not user:
            raise VerificationFailed()

        logger.debug(u'%s login verified', self.name)

        return user

    def handle_callback(self, query, expected_state=None):
        """Finish a login from the *query* parameters of the redirect back.

        When the strategy uses state, or *expected_state* is given, the
        ``state`` parameter has to match *expected_state*.
        """
        if query.get('error'):
            raise AuthorizationError(
                query.get('error_description') or query['error'],
                code=query['error'],
                uri=query.get('error_uri'))

        if self.state or expected_state is not None:
            if expected_state is None or query.get('state') != expected_state:
                raise StateMismatchError()

        code = query.get('code')

        if not code:
            raise AuthorizationError(u'Missing authorization code',
                                     code=u'invalid_request')

        return self.authenticate(code)


def token_error(exc):
    """Turn an ``HTTPError`` from the token endpoint into the right error.

    OAuth 2.0 error bodies (``{"error": ...}``) become :class:`TokenError`,
    anything else a :class:`TokenExchangeError`.
    """
    resp = exc.response

    try:
        body = json.loads(resp.text) if resp is not None else None
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get('error'):
        err = TokenError(body.get('error_description') or body['error'],
                         code=body['error'],
                         uri=body.get('error_uri'),
                         status=resp.status_code)
    else:
        err = TokenExchangeError(u'Failed to obtain access token', exc)

    err.__cause__ = exc
    return err
