"""
tests/test_loader.py
Response unwrapping, schema inference and HTTP error mapping.
No network access: the HTTP session is a MagicMock.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from fireforce.data.errors import DecodeError, FetchError, HttpStatusError, TransportError
from fireforce.data.loader import extract_records, fetch_payload, fetch_records
from fireforce.data.schema import infer_schema
from fireforce.ui.components.formatting import describe_schema

URL = "https://example.invalid/GetData"


def _session(status_code: int = 200, payload=None, json_error: Exception | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = MagicMock()
    session.get.return_value = response
    return session


def _real_response(status_code: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    return response


class TestExtractRecords:
    def test_bare_array(self):
        rows = [{"id": 1}, {"id": 2}]
        assert extract_records(rows) == rows

    @pytest.mark.parametrize("key", ["data", "records", "Items"])
    def test_wrapped_array(self, key):
        assert extract_records({key: [{"id": 1}]}) == [{"id": 1}]

    def test_priority_order(self):
        payload = {"Items": [{"src": "items"}], "records": [{"src": "records"}], "data": [{"src": "data"}]}
        assert extract_records(payload) == [{"src": "data"}]

    def test_non_array_wrapper_is_skipped(self):
        payload = {"data": "oops", "records": [{"src": "records"}]}
        assert extract_records(payload) == [{"src": "records"}]

    def test_empty_wrapper_array(self):
        assert extract_records({"data": [], "records": [{"id": 1}]}) == []

    @pytest.mark.parametrize("payload", [{"items": [{"id": 1}]}, {}, "text", 42, None])
    def test_shape_mismatch_is_empty(self, payload):
        assert extract_records(payload) == []

    def test_non_object_rows_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fireforce.data.loader"):
            records = extract_records([1, {"id": 1}, "x"])
        assert records == [{"id": 1}]
        assert "Dropped 2 non-object rows" in caplog.text


class TestInferSchema:
    def test_first_record_key_order(self):
        records = [{"b": 1, "a": 2, "c": 3}, {"z": 1}]
        assert infer_schema(records) == ["b", "a", "c"]

    def test_later_fields_not_unioned(self):
        records = [{"id": 1}, {"id": 2, "extra": True}]
        assert infer_schema(records) == ["id"]

    def test_empty(self):
        assert infer_schema([]) == []

    def test_empty_first_record(self):
        assert infer_schema([{}, {"id": 1}]) == []

    def test_describe_schema(self):
        assert describe_schema(["device_id", "GPS-lat"]) == [(1, "Device Id"), (2, "Gps Lat")]

    def test_describe_empty_schema(self):
        assert describe_schema([]) == []


class TestFetchPayload:
    def test_success_returns_json(self):
        session = _session(payload={"data": []})
        assert fetch_payload(URL, timeout=5, session=session) == {"data": []}
        session.get.assert_called_once_with(URL, timeout=5)

    def test_http_status_error(self):
        with pytest.raises(HttpStatusError) as excinfo:
            fetch_payload(URL, session=_session(status_code=500))
        assert excinfo.value.status_code == 500
        assert str(excinfo.value) == "HTTP error! status: 500"

    def test_not_found_is_fetch_error(self):
        with pytest.raises(FetchError, match="status: 404"):
            fetch_payload(URL, session=_session(status_code=404))

    def test_transport_error_keeps_message(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("Connection refused")
        with pytest.raises(TransportError) as excinfo:
            fetch_payload(URL, session=session)
        assert str(excinfo.value) == "Connection refused"

    def test_timeout_is_transport_error(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")
        with pytest.raises(TransportError, match="read timed out"):
            fetch_payload(URL, session=session)

    def test_decode_error_keeps_decoder_message(self):
        session = _session(json_error=ValueError("Expecting value: line 1 column 1 (char 0)"))
        with pytest.raises(DecodeError) as excinfo:
            fetch_payload(URL, session=session)
        assert str(excinfo.value) == "Expecting value: line 1 column 1 (char 0)"

    @pytest.mark.parametrize("status_code", [300, 304])
    def test_redirect_status_is_http_error(self, status_code):
        session = MagicMock()
        session.get.return_value = _real_response(status_code, b'[{"id": 1}]')
        with pytest.raises(HttpStatusError, match=f"status: {status_code}"):
            fetch_payload(URL, session=session)

    def test_no_content_success_is_decode_error(self):
        session = MagicMock()
        session.get.return_value = _real_response(204, b"")
        with pytest.raises(DecodeError):
            fetch_payload(URL, session=session)

    def test_deeply_nested_json_is_decode_error(self):
        session = MagicMock()
        session.get.return_value = _real_response(200, b"[" * 100000 + b"]" * 100000)
        with pytest.raises(DecodeError):
            fetch_payload(URL, session=session)

    def test_defaults_to_requests_get(self):
        response = MagicMock(status_code=200)
        response.json.return_value = [{"id": 1}]
        with patch("fireforce.data.loader.requests.get", return_value=response) as mock_get:
            assert fetch_records(URL, timeout=7) == [{"id": 1}]
        mock_get.assert_called_once_with(URL, timeout=7)


class TestFetchRecords:
    def test_unwraps_records_key(self):
        session = _session(payload={"records": [{"id": 1, "status": "ok"}]})
        assert fetch_records(URL, session=session) == [{"id": 1, "status": "ok"}]

    def test_unexpected_shape_is_empty_not_error(self):
        session = _session(payload={"message": "hello"})
        assert fetch_records(URL, session=session) == []
