import json
import base64
from collections import namedtuple
from urllib.parse import parse_qsl


ParsedBody = namedtuple('ParsedBody', 'fields format')


def merge(*args):
    """Merges the given dicts in reverse order. ``None`` is skipped.

    ::

        >>> a = {'foo': 'bar'}
        >>> b = {'foo': 'BAR', 'ham': 'SPAM'}
        >>> merge(a, b)
        ... {'foo': 'bar', 'ham': 'SPAM'}
    """
    r = {}
    for d in reversed(args):
        if d:
            r.update(d)
    return r


def basic_auth_header(client_id, client_secret):
    credentials = u'{0}:{1}'.format(client_id, client_secret)
    token = base64.b64encode(credentials.encode('utf-8')).decode('ascii')
    return u'Basic ' + token


def _json_object(body):
    try:
        fields = json.loads(body)
    except ValueError:
        return None
    return fields if isinstance(fields, dict) else None


def parse_body(body):
    """Parse a token endpoint response *body*.

    JSON is tried first. Some servers answer with form-encoded data (and
    the wrong content type), so anything that isn't a JSON object is
    form-decoded instead. The returned :class:`ParsedBody` tells which of
    the two (``'json'`` or ``'form'``) was used.
    """
    fields = _json_object(body)

    if fields is not None:
        return ParsedBody(fields, u'json')

    return ParsedBody(dict(parse_qsl(body, keep_blank_values=True)), u'form')
