"""
Helpers shared by the route modules.

Every endpoint answers any HTTP method and renders its body through
`json_response`, which downgrades a serialization failure to a logged
plain-text 500 instead of letting the exception escape the handler.
"""

import logging

from fastapi import Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# OPTIONS never reaches a route: the CORS middleware answers it.
ANY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]

JSON_MEDIA_TYPE = "application/json"


def json_response(payload: BaseModel, name: str) -> Response:
    """
    Serializes a response model into a JSON `Response`.

    Args:
        payload: The model to encode.
        name: Short name of the response, used in the error log line.

    Returns:
        A 200 JSON response, or a 500 plain-text response if encoding fails.
    """
    try:
        body = payload.model_dump_json()
    except (TypeError, ValueError) as e:
        logger.error(f"Error encoding {name} response: {e}")
        return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(content=body, status_code=status.HTTP_200_OK, media_type=JSON_MEDIA_TYPE)
