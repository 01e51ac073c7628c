# -*- coding: utf-8 -*-
import json
import logging
from urllib.parse import parse_qsl, urlparse

import click
import requests

from .config import StrategyOptions
from .errors import ConfigurationError, RdioAuthError
from .rdio import RdioStrategy


def load_options(config, section, **overrides):
    if config:
        return StrategyOptions.from_file(config, section, **overrides)
    return StrategyOptions(**dict((k, v) for k, v in overrides.items()
                                  if v is not None))


def callback_query(redirected):
    """Take either the URL Rdio redirected to or a bare code."""
    redirected = redirected.strip()
    if u'://' in redirected or redirected.startswith(u'?'):
        return dict(parse_qsl(urlparse(redirected).query))
    return {'code': redirected}


def collect(access_token, refresh_token, profile):
    return {
        'access_token': access_token,
        'refresh_token': refresh_token,
        'profile': profile,
    }


def make_strategy(ctx):
    try:
        options = load_options(**ctx.obj)
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    return RdioStrategy(collect, options)


def dump(data):
    click.echo(json.dumps(data, indent=2, sort_keys=True))


@click.group()
@click.option(u'-c', u'--config', type=click.Path(dir_okay=False),
              help=u'An INI file holding the strategy options.')
@click.option(u'--section', default=u'rdio',
              help=u'The INI section to read. Default is rdio.')
@click.option(u'--client-id', envvar=u'RDIO_CLIENT_ID',
              help=u'Your Rdio application client ID.')
@click.option(u'--client-secret', envvar=u'RDIO_CLIENT_SECRET',
              help=u'Your Rdio application client secret.')
@click.option(u'--callback-url', envvar=u'RDIO_CALLBACK_URL',
              help=u'The redirect URI registered with Rdio.')
@click.option(u'--scope', help=u'Requested scope, space separated.')
@click.option(u'-v', u'--verbose', 'verbose', flag_value=True, default=False)
@click.pass_context
def main(ctx, config, section, client_id, client_secret, callback_url, scope,
         verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    ctx.obj = {
        'config': config,
        'section': section,
        'client_id': client_id,
        'client_secret': client_secret,
        'callback_url': callback_url,
        'scope': scope,
    }


@main.command(u'authorize-url')
@click.option(u'--state', help=u'An explicit state value to send.')
@click.pass_context
def authorize_url(ctx, state):
    """Print the Rdio authorization URL."""
    url, state = make_strategy(ctx).authorization_url(state=state)
    click.echo(url)
    if state:
        click.echo(u'state: {0}'.format(state), err=True)


@main.command()
@click.option(u'--show-tokens', flag_value=True, default=False,
              help=u'Also print the access and refresh tokens.')
@click.pass_context
def login(ctx, show_tokens):
    """Run the whole login flow and print the user profile."""
    rdio = make_strategy(ctx)

    url, state = rdio.authorization_url()

    click.echo(u'Open this URL in your browser and approve the application:')
    click.echo(url)

    query = callback_query(click.prompt(u'Redirected URL or code'))

    try:
        result = rdio.handle_callback(query, expected_state=state)
    except RdioAuthError as e:
        raise click.ClickException(str(e))

    output = {'profile': result['profile'].to_dict()
              if result['profile'] is not None else None}

    if show_tokens:
        output['access_token'] = result['access_token']
        output['refresh_token'] = result['refresh_token']

    dump(output)


@main.command()
@click.argument(u'refresh_token')
@click.pass_context
def refresh(ctx, refresh_token):
    """Trade REFRESH_TOKEN for a new access token."""
    try:
        token = make_strategy(ctx).refresh(refresh_token)
    except (RdioAuthError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    output = dict(token.params)
    output['access_token'] = token.access_token
    output['refresh_token'] = token.refresh_token

    dump(output)
