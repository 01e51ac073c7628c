import json
from unittest import mock

import pytest
import requests
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict

from rdio_auth import RdioStrategy


class FakeHTTP(object):
    """Stands in for the network: answers requests with queued responses
    and keeps every prepared request it was asked to send."""

    def __init__(self):
        self.responses = []
        self.requests = []

    def add(self, body=u'', status=200, content_type=u'application/json'):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        self.responses.append((body, status, content_type))

    def fail(self, exc):
        self.responses.append(exc)

    def send(self, adapter, request, **kwargs):
        self.requests.append(request)

        answer = self.responses.pop(0)

        if isinstance(answer, Exception):
            raise answer

        body, status, content_type = answer

        resp = requests.Response()
        resp.status_code = status
        resp.reason = u'OK' if status < 400 else u'Error'
        resp._content = body.encode('utf-8')
        resp.encoding = 'utf-8'
        resp.headers = CaseInsensitiveDict({'Content-Type': content_type})
        resp.url = request.url
        resp.request = request
        return resp

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def http():
    fake = FakeHTTP()
    with mock.patch.object(HTTPAdapter, 'send', autospec=True,
                           side_effect=fake.send):
        yield fake


@pytest.fixture
def verify():
    return mock.Mock(return_value={'user': u'ada'})


@pytest.fixture
def rdio(verify):
    return RdioStrategy(verify,
                        client_id=u'cid',
                        client_secret=u'secret',
                        callback_url=u'https://www.example.net/auth/rdio/callback')


@pytest.fixture
def current_user():
    return {
        'status': u'ok',
        'result': {
            'key': u'u1',
            'firstName': u'Ada',
            'lastName': u'Lovelace',
            'username': u'ada',
            'email': u'ada@example.com',
        },
    }
