"""Pydantic schema for the inbound preview request and event body parsing."""

import base64
import binascii
from typing import Annotated, Any, Dict

from pydantic import AnyUrl, BaseModel, ConfigDict, UrlConstraints, ValidationError

from pdf_preview.exceptions import MalformedRequestError

# Absolute http(s) URL with a host; no length limit, unlike HttpUrl (2083).
PdfUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]


class PdfRequest(BaseModel):
    """The caller's request: the location of the PDF to preview.

    Only ``url`` is recognised; any other field in the body is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: PdfUrl


def _event_body(event: Dict[str, Any]) -> str:
    body = event.get("body")
    if body is None:
        raise MalformedRequestError("Request body is missing.")

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedRequestError(f"Request body is not valid base64-encoded UTF-8: {e}") from e
    return body


def parse_request_body(event: Dict[str, Any]) -> PdfRequest:
    """Builds a PdfRequest from an API Gateway proxy event.

    Args:
        event (dict): The invocation event. Its ``body`` holds the JSON document, base64-encoded
            when ``isBase64Encoded`` is true.

    Raises:
        MalformedRequestError: If the body is missing, is not valid JSON, is not a JSON object,
            or lacks an absolute http(s) ``url``.

    Returns:
        PdfRequest: The parsed request.
    """
    body = _event_body(event)
    try:
        return PdfRequest.model_validate_json(body)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in e.errors())
        raise MalformedRequestError(f"Invalid request body: {errors}") from e
