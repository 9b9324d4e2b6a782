import json
import logging

import response_utils as resp
from config_utils import InquiryConfig
from exceptions import ConfigurationError
from inquiry_manager import PROCESSING_ERROR_MESSAGE, InquiryManager

# Set up logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Built on first use and reused while the execution environment stays warm
_inquiry_manager = None


def get_inquiry_manager():
    """Factory function to get the InquiryManager for this environment"""
    global _inquiry_manager
    if _inquiry_manager is None:
        _inquiry_manager = InquiryManager(InquiryConfig.from_environment())
    return _inquiry_manager


def lambda_handler(event, context):
    """Accept a travel inquiry form submission"""
    logger.info(f"Received event: {json.dumps(event, default=str)}")

    try:
        manager = get_inquiry_manager()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        return resp.error_response(PROCESSING_ERROR_MESSAGE, e.status_code)
    except Exception as e:
        logger.error(f"Failed to initialise inquiry manager: {str(e)}", exc_info=True)
        return resp.error_response(PROCESSING_ERROR_MESSAGE, 500)

    return manager.handle_request(event)
