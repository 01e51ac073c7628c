import logging
from collections import namedtuple
from urllib.parse import urlencode

from oauthlib.common import generate_token
from oauthlib.oauth2 import WebApplicationClient
from requests_oauthlib import OAuth2Session

from .config import PROFILE_URL
from .utils import basic_auth_header, merge, parse_body


logger = logging.getLogger(__name__)


TokenResult = namedtuple('TokenResult', 'access_token refresh_token params')


def token_result(fields):
    """Split token endpoint *fields* into a :class:`TokenResult`.

    ``refresh_token`` is removed from the residual params so it is only
    reported once.
    """
    params = dict(fields)
    access_token = params.get('access_token')
    refresh_token = params.pop('refresh_token', None)
    return TokenResult(access_token, refresh_token, params)


class DefaultTokenExchange(object):
    """What ``requests_oauthlib`` does out of the box: client credentials
    in the request body, response validated by ``oauthlib``.
    """

    def __call__(self, client, code, params=None):
        params = dict(params or {})
        grant_type = params.pop('grant_type', None)

        # the session already knows these
        params.pop('redirect_uri', None)
        params.pop('client_id', None)

        with client.session() as session:
            if grant_type == 'refresh_token':
                token = session.refresh_token(client.token_url,
                                              refresh_token=code,
                                              timeout=client.timeout,
                                              client_id=client.client_id,
                                              client_secret=client.client_secret,
                                              **params)
            else:
                token = session.fetch_token(client.token_url,
                                            code=code,
                                            client_secret=client.client_secret,
                                            include_client_id=True,
                                            timeout=client.timeout,
                                            **params)

        return token_result(token)


class BasicAuthTokenExchange(object):
    """Token exchange for servers that want the client credentials in an
    ``Authorization: Basic`` header and the grant as a form-encoded POST
    body.

    Transport errors, including the ``HTTPError`` raised for a non-2xx
    answer, are not caught here.
    """

    def __call__(self, client, code, params=None):
        params = dict(params or {})

        if params.get('grant_type') == 'refresh_token':
            params['refresh_token'] = code
        else:
            params['code'] = code

        headers = {
            'Authorization': basic_auth_header(client.client_id,
                                               client.client_secret),
            'Content-Type': 'application/x-www-form-urlencoded',
        }

        with client.session() as session:
            resp = session.post(client.token_url,
                                data=urlencode(params),
                                headers=headers,
                                withhold_token=True,
                                timeout=client.timeout)

        resp.raise_for_status()

        body = parse_body(resp.text)
        logger.debug(u'Token response from %s decoded as %s',
                     client.token_url, body.format)

        return token_result(body.fields)


class OAuth2Client(object):
    """The generic OAuth 2.0 capability a strategy is built on.

    It knows the endpoints and client credentials, builds authorization
    URLs, performs token exchanges through the injected *token_exchange*
    callable and issues requests authenticated with an access token.

    Nothing on the client changes after construction; every call gets its
    own session.
    """

    session_class = OAuth2Session

    def __init__(self, client_id, client_secret, authorize_url, token_url,
                 redirect_uri=None, scope=None, custom_headers=None,
                 timeout=None, token_exchange=None, session_class=None):
        self.client_id = client_id
        self.client_secret = client_secret
        self.authorize_url = authorize_url
        self.token_url = token_url
        self.redirect_uri = redirect_uri
        self.scope = scope
        self.custom_headers = dict(custom_headers or {})
        self.timeout = timeout
        self.token_exchange = token_exchange or DefaultTokenExchange()
        self.session_class = session_class or self.session_class

    def authorization_url(self, state=None, **params):
        client = WebApplicationClient(self.client_id)
        return client.prepare_request_uri(self.authorize_url,
                                          redirect_uri=self.redirect_uri,
                                          scope=self.scope,
                                          state=state,
                                          **params)

    @staticmethod
    def new_state():
        return generate_token()

    def session(self, token=None, **kwargs):
        if token is not None and not isinstance(token, dict):
            token = {'access_token': token, 'token_type': 'Bearer'}

        session = self.session_class(self.client_id,
                                     token=token,
                                     redirect_uri=self.redirect_uri,
                                     scope=self.scope,
                                     **kwargs)
        session.headers.update(self.custom_headers)
        return session

    def exchange_token(self, code, params=None):
        logger.debug(u'Requesting access token from %s', self.token_url)
        return self.token_exchange(self, code, params)


class RdioOAuth2Session(OAuth2Session):

    api_url = PROFILE_URL

    def __init__(self, *args, **kwargs):
        self.api_url = kwargs.pop('api_url', self.api_url)
        super(RdioOAuth2Session, self).__init__(*args, **kwargs)

    def api_post(self, method, params=None, **kwargs):
        params = merge({'method': method}, params)
        return self.post(self.api_url, data=params, **kwargs)
