import json
import logging

logger = logging.getLogger(__name__)

response_headers = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "POST,OPTIONS"
}

def safe_json_dumps(data):
    """Serialize data to JSON, falling back to str() for unknown types"""
    return json.dumps(data, default=str)

def build_response(status_code, success, message, data=None):
    response_body = {
        "success": success,
        "message": message,
        **(data or {})
    }

    return {
        "statusCode": status_code,
        # Each response gets its own copy so callers cannot mutate the shared headers
        "headers": dict(response_headers),
        "body": safe_json_dumps(response_body)
    }

def error_response(message, status_code=400, data=None):
    logger.info(f"Error response: {message} (status: {status_code})")
    return build_response(status_code, False, message, data)

def success_response(message, data=None, status_code=200):
    logger.info(f"Success response: {message} (status: {status_code})")
    return build_response(status_code, True, message, data)

def preflight_response():
    return build_response(200, True, "OK")
