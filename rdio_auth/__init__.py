from .errors import (AuthorizationError, ConfigurationError, InternalOAuthError,
                     ProfileFetchError, ProfileParseError, ProviderError,
                     RdioAuthError, StateMismatchError, TokenError,
                     TokenExchangeError, VerificationFailed)
from .profile import Profile
from .rdio import RdioStrategy
from .strategy import AuthStrategy

__version__ = '0.2.0'


def main():
    from .cli import main as _main
    _main()
