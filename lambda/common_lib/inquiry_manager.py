"""
Inquiry Intake Manager

Orchestrates one travel inquiry submission: parse, validate, build the
record, persist it, notify the customer and the business, and map the
outcome onto the shared response envelope.
"""

import logging

import request_utils as req
import response_utils as resp
from db_utils import SubmissionStore, build_submission_record
from email_utils import EmailSender, NotificationDispatcher
from exceptions import (
    BusinessLogicError, DeliveryError, MalformedRequestError,
    PersistenceError, SubmissionValidationError
)
from validation_utils import DataValidator

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Form submitted successfully"
PROCESSING_ERROR_MESSAGE = "Error processing submission"


class InquiryManager:
    """Handles travel inquiry submissions"""

    def __init__(self, config, store=None, dispatcher=None):
        self.config = config
        self.store = store or SubmissionStore(config.table_name)
        self.dispatcher = dispatcher or NotificationDispatcher(
            EmailSender(config.from_email), config.to_email
        )

    def handle_request(self, event):
        """
        Process an API Gateway proxy event

        Args:
            event (dict): Lambda event

        Returns:
            dict: API Gateway proxy response; never raises
        """
        try:
            method = req.get_http_method(event)
            if method == 'OPTIONS':
                return resp.preflight_response()
            if method not in (None, 'POST'):
                return resp.error_response(f"Method {method} not allowed", 405)

            record = self.submit(event)
        except SubmissionValidationError as e:
            logger.info(f"Submission rejected: {e.violations}")
            return resp.error_response(e.message, e.status_code, {'errors': e.violations})
        except MalformedRequestError as e:
            logger.info(f"Malformed request: {e.message}")
            return resp.error_response(e.message, e.status_code)
        except (PersistenceError, DeliveryError) as e:
            logger.error(f"Error processing submission: {e.message}", exc_info=True)
            return resp.error_response(PROCESSING_ERROR_MESSAGE, e.status_code)
        except BusinessLogicError as e:
            logger.error(f"BusinessLogicError processing submission: {e.message} (status: {e.status_code})", exc_info=True)
            return resp.error_response(PROCESSING_ERROR_MESSAGE, e.status_code)
        except Exception as e:
            logger.error(f"Unexpected error processing submission: {str(e)}", exc_info=True)
            return resp.error_response(PROCESSING_ERROR_MESSAGE, 500)

        return resp.success_response(SUCCESS_MESSAGE, {
            'submissionId': record['id'],
            'timestamp': record['submittedAt']
        })

    def submit(self, event):
        """
        Run the intake steps in order

        Returns:
            dict: The persisted submission record

        Raises:
            MalformedRequestError: Body is not a JSON object
            SubmissionValidationError: Required fields missing or malformed
            PersistenceError: Record could not be stored; nothing was sent
            DeliveryError: Record stored but a notification failed
        """
        submission_data = req.get_json_object_body(event)

        violations = DataValidator.validate_submission(submission_data)
        if violations:
            raise SubmissionValidationError(violations)

        record = build_submission_record(submission_data)
        self.store.put(record)

        # The record stays stored if delivery fails
        message_ids = self.dispatcher.dispatch(record)
        logger.info(f"Submission {record['id']} processed, notifications: {message_ids}")

        return record
