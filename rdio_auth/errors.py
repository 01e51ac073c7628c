class RdioAuthError(Exception):
    pass


class ConfigurationError(RdioAuthError):
    pass


class InternalOAuthError(RdioAuthError):
    """Wraps a failure of the underlying HTTP/OAuth machinery.

    The original exception is kept on :attr:`cause` (and is also the
    ``__cause__`` when raised with ``raise ... from``).
    """

    def __init__(self, message, cause=None):
        super(InternalOAuthError, self).__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.message
        return u'{0}: {1}'.format(self.message, self.cause)


class TokenExchangeError(InternalOAuthError):
    pass


class ProfileFetchError(InternalOAuthError):
    pass


class TokenError(RdioAuthError):
    """The token endpoint answered with an OAuth 2.0 error response."""

    def __init__(self, message, code=u'invalid_request', uri=None, status=None):
        super(TokenError, self).__init__(message)
        self.message = message
        self.code = code
        self.uri = uri
        self.status = status


class ProfileParseError(RdioAuthError):
    pass


class ProviderError(RdioAuthError):
    """Rdio accepted the request but reported ``status: error``."""

    def __init__(self, message, response=None):
        super(ProviderError, self).__init__(message)
        self.message = message
        self.response = response


class AuthorizationError(RdioAuthError):
    """The user (or Rdio) refused the authorization request."""

    def __init__(self, message, code=u'server_error', uri=None):
        super(AuthorizationError, self).__init__(message)
        self.message = message
        self.code = code
        self.uri = uri


class StateMismatchError(AuthorizationError):
    def __init__(self, message=u'Invalid authorization request state.'):
        super(StateMismatchError, self).__init__(message, code=u'invalid_state')


class VerificationFailed(RdioAuthError):
    def __init__(self, message=u'User verification failed'):
        super(VerificationFailed, self).__init__(message)
