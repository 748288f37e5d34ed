"""
Tests for response classification
"""

import json
import os

import pytest

from meeteeor_sdk.api_response import ApiResponse, ResponseKind, classify_response, decode_body
from meeteeor_sdk.exceptions import ApiException, VersioningException
from meeteeor_sdk.http import HttpResponse
from meeteeor_sdk.serializer import ObjectSerializer

URL = 'https://api.example.com/api/transaction/read?spaceId=1&id=2'
RESOURCE_PATH = '/transaction/read'


def response(status, body=b'', headers=None):
    return HttpResponse.create(status, headers or {'content-type': 'application/json'}, body)


class TestSuccess:
    """2xx responses"""

    def test_json_decoded(self):
        result = classify_response(response(200, b'{"id": 2, "state": "PENDING"}'), URL, RESOURCE_PATH)

        assert isinstance(result, ApiResponse)
        assert result.status_code == 200
        assert result.data == {'id': 2, 'state': 'PENDING'}
        assert result.headers == {'content-type': 'application/json'}

    def test_not_json_returns_text(self):
        result = classify_response(response(200, b'not-json'), URL, RESOURCE_PATH)
        assert result.data == 'not-json'

    def test_empty_body_returns_empty_text(self):
        assert classify_response(response(204), URL, RESOURCE_PATH).data == ''

    def test_upper_boundary(self):
        assert classify_response(response(299, b'1'), URL, RESOURCE_PATH).data == 1

    def test_string_kind_is_unparsed(self):
        result = classify_response(response(200, b'{"a": 1}'), URL, RESOURCE_PATH, ResponseKind.STRING)
        assert result.data == '{"a": 1}'

    def test_bytes_kind(self):
        result = classify_response(response(200, b'\x00\x01'), URL, RESOURCE_PATH, ResponseKind.BYTES)
        assert result.data == b'\x00\x01'

    def test_file_kind_uses_content_disposition(self, tmp_path):
        pdf = response(200, b'%PDF-1.4', {'Content-Disposition': 'attachment; filename="refund-7.pdf"'})

        result = classify_response(pdf, URL, RESOURCE_PATH, ResponseKind.FILE, ObjectSerializer(str(tmp_path)))
        with result.data as handle:
            assert handle.read() == b'%PDF-1.4'
            assert handle.name == str(tmp_path / 'refund-7.pdf')

    def test_file_kind_without_filename(self, tmp_path):
        result = classify_response(
            response(200, b'data', {}), URL, RESOURCE_PATH, ResponseKind.FILE, ObjectSerializer(str(tmp_path))
        )
        with result.data as handle:
            assert handle.read() == b'data'
            assert handle.name.startswith(str(tmp_path))

    def test_file_kind_with_directory_name(self, tmp_path):
        dotdot = response(200, b'%PDF-1.4', {'Content-Disposition': 'attachment; filename=".."'})

        result = classify_response(dotdot, URL, RESOURCE_PATH, ResponseKind.FILE, ObjectSerializer(str(tmp_path)))
        with result.data as handle:
            assert handle.read() == b'%PDF-1.4'
            assert os.path.dirname(handle.name) == str(tmp_path)

    def test_classification_is_repeatable(self):
        ok = response(200, b'{"id": 1}')
        assert classify_response(ok, URL, RESOURCE_PATH) == classify_response(ok, URL, RESOURCE_PATH)


class TestVersionConflict:
    """409 responses"""

    @pytest.mark.parametrize('body', [b'', b'{"message": "conflict"}', b'<html>'])
    def test_conflict_regardless_of_body(self, body):
        with pytest.raises(VersioningException) as exc_info:
            classify_response(response(409, body), URL, RESOURCE_PATH)

        assert exc_info.value.resource_path == RESOURCE_PATH
        assert exc_info.value.error_code == 'VERSION_CONFLICT'
        assert RESOURCE_PATH in exc_info.value.message

    def test_conflict_is_not_api_exception(self):
        with pytest.raises(VersioningException):
            try:
                classify_response(response(409), URL, RESOURCE_PATH)
            except ApiException:
                pytest.fail("409 must not raise ApiException")


class TestFailure:
    """Any other non-2xx response"""

    def test_server_error_with_json_body(self):
        with pytest.raises(ApiException) as exc_info:
            classify_response(response(500, b'{"error":"bad"}'), URL, RESOURCE_PATH)

        error = exc_info.value
        assert error.status_code == 500
        assert error.response_body == {'error': 'bad'}
        assert error.headers == {'content-type': 'application/json'}
        assert URL in error.message
        assert error.message == f'Error 500 connecting to the API ({URL}) : {{"error":"bad"}}'

    def test_lower_boundary(self):
        with pytest.raises(ApiException) as exc_info:
            classify_response(response(300), URL, RESOURCE_PATH)
        assert exc_info.value.status_code == 300

    @pytest.mark.parametrize('status', [199, 400, 401, 404, 442, 503])
    def test_non_success_statuses(self, status):
        with pytest.raises(ApiException) as exc_info:
            classify_response(response(status, b'oops'), URL, RESOURCE_PATH)
        assert exc_info.value.status_code == status
        assert exc_info.value.response_body == 'oops'


class TestDecodeBody:

    def test_decode_json(self):
        assert decode_body(response(200, json.dumps([1, 2]).encode())) == [1, 2]

    def test_decode_invalid_utf8(self):
        assert decode_body(response(200, b'\xff')) == '�'
