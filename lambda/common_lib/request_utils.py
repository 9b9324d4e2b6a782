import base64
import binascii
import json

from exceptions import MalformedRequestError


def get_http_method(event):
    """Return the upper-cased HTTP method, or None for direct invocations"""
    if not isinstance(event, dict):
        raise MalformedRequestError("Request event must be an object")
    method = event.get('httpMethod')
    if not method:
        method = ((event.get('requestContext') or {}).get('http') or {}).get('method')
    return method.upper() if isinstance(method, str) and method else None


def get_json_object_body(event):
    """
    Decode the request body as a JSON object

    Args:
        event (dict): API Gateway proxy event

    Returns:
        dict: Parsed body

    Raises:
        MalformedRequestError: If the body is missing, undecodable, or not an object
    """
    if not isinstance(event, dict):
        raise MalformedRequestError("Request event must be an object")

    body = event.get('body')
    if body is None or body == '':
        raise MalformedRequestError("Request body is required")

    if isinstance(body, dict):
        # Direct invocation with an already-parsed payload
        return body

    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError, TypeError):
            raise MalformedRequestError("Request body is not valid base64")

    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError:
            raise MalformedRequestError("Request body is not valid UTF-8")

    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        raise MalformedRequestError()

    if not isinstance(parsed, dict):
        raise MalformedRequestError()

    return parsed
