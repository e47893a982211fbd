import base64
import json

import pytest

from pdf_preview.exceptions import MalformedRequestError
from pdf_preview.request.schemas import PdfRequest, parse_request_body


def test_parse_valid_body():
    request = parse_request_body({"body": json.dumps({"url": "https://example.com/docs/file.pdf"})})

    assert isinstance(request, PdfRequest)
    assert str(request.url) == "https://example.com/docs/file.pdf"


def test_parse_ignores_unknown_fields():
    request = parse_request_body({"body": json.dumps({"url": "http://example.com/a.pdf", "dpi": 300})})

    assert str(request.url) == "http://example.com/a.pdf"
    assert not hasattr(request, "dpi")


def test_parse_base64_encoded_body():
    body = base64.b64encode(json.dumps({"url": "http://example.com/a.pdf"}).encode("utf-8")).decode("ascii")

    request = parse_request_body({"body": body, "isBase64Encoded": True})

    assert str(request.url) == "http://example.com/a.pdf"


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"body": None},
        {"body": "not json"},
        {"body": "{}"},
        {"body": "[]"},
        {"body": '"https://example.com/a.pdf"'},
        {"body": json.dumps({"url": None})},
        {"body": json.dumps({"url": ""})},
        {"body": json.dumps({"url": "not a url"})},
        {"body": json.dumps({"url": "ftp://example.com/a.pdf"})},
        {"body": "%%%", "isBase64Encoded": True},
    ],
)
def test_parse_rejects_malformed_bodies(event):
    with pytest.raises(MalformedRequestError):
        parse_request_body(event)


def test_parse_accepts_url_longer_than_2083_characters():
    url = "https://bucket.s3.sa-east-1.amazonaws.com/doc.pdf?X-Amz-Security-Token=" + "A" * 2100

    request = parse_request_body({"body": json.dumps({"url": url})})

    assert len(url) > 2083
    assert str(request.url) == url
