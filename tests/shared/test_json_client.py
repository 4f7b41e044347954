"""
Tests for the JSON HTTP client.
"""
import json
from unittest import mock

import pytest
import requests

from shared.domain.exceptions import ExternalServiceError, ExternalServiceTimeoutError
from shared.infrastructure.http import JsonHttpClient


def make_response(status_code=200, body=None, url='http://service.test/resource'):
    response = requests.Response()
    response.status_code = status_code
    response.reason = 'Reason'
    response.url = url
    response._content = b'' if body is None else json.dumps(body).encode()
    return response


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def client(session):
    return JsonHttpClient('catalog', 'http://service.test/', timeout=(1, 2), session=session)


def test_request_uses_bounded_timeout(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(body={'ok': True})) as request:
        response = client.get('/resource', params={'q': 1})

    request.assert_called_once_with('GET', 'http://service.test/resource', timeout=(1, 2), params={'q': 1})
    assert client.json(response) == {'ok': True}


def test_json_headers_are_set(client, session):
    assert session.headers['Accept'] == 'application/json'


def test_timeout_raises_retryable_timeout_error(client, session):
    with mock.patch.object(session, 'request', side_effect=requests.ReadTimeout('slow')):
        with pytest.raises(ExternalServiceTimeoutError) as exc_info:
            client.post('/resource')

    assert exc_info.value.retryable is True
    assert exc_info.value.service == 'catalog'
    assert exc_info.value.timeout == 2


def test_connection_error_raises_external_error(client, session):
    with mock.patch.object(session, 'request', side_effect=requests.ConnectionError('refused')):
        with pytest.raises(ExternalServiceError) as exc_info:
            client.get('/resource')

    assert not isinstance(exc_info.value, ExternalServiceTimeoutError)
    assert exc_info.value.code == 'EXTERNAL_SERVICE_ERROR'


@pytest.mark.parametrize('status_code', [500, 503, 400])
def test_unexpected_status_raises_external_error(client, session, status_code):
    with mock.patch.object(session, 'request', return_value=make_response(status_code)):
        with pytest.raises(ExternalServiceError):
            client.get('/resource')


def test_accepted_status_is_returned(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(404)):
        response = client.get('/resource', accept_statuses=(404,))
    assert response.status_code == 404


def test_invalid_json_is_an_external_error(client):
    response = make_response(200)
    response._content = b'<html>'
    with pytest.raises(ExternalServiceError):
        client.json(response)
