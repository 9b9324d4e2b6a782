import logging
import uuid
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from exceptions import PersistenceError
from validation_utils import OPTIONAL_FIELDS, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

RECORD_FIELDS = ['id'] + REQUIRED_FIELDS + OPTIONAL_FIELDS + ['submittedAt']

# ------------------  Submission Record Functions ------------------

def current_timestamp():
    """UTC wall-clock time as ISO-8601 with offset, e.g. 2026-10-19T08:15:30.123+00:00"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds')

def normalize_optional_value(value):
    """Return the value as text, or None when it was not provided"""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return None
    return text

def build_submission_record(submission_data, submission_id=None, submitted_at=None):
    """
    Build the persisted record for a validated submission

    Args:
        submission_data (dict): Validated request body
        submission_id (str): Identifier to use (a new UUID4 when omitted)
        submitted_at (str): Creation timestamp (current UTC time when omitted)

    Returns:
        dict: Record with name and email as received, every optional field present
              and set to None when not provided
    """
    record = {
        'id': submission_id or str(uuid.uuid4()),
        'name': submission_data['name'],
        'email': submission_data['email'],
    }
    for field in OPTIONAL_FIELDS:
        record[field] = normalize_optional_value(submission_data.get(field))
    record['submittedAt'] = submitted_at or current_timestamp()
    return record

def serialize_record(record):
    """Convert a submission record to DynamoDB attribute format"""
    item = {}
    for field in RECORD_FIELDS:
        value = record.get(field)
        item[field] = {'NULL': True} if value is None else {'S': value}
    return item

# ------------------  Submissions Table ------------------

class SubmissionStore:
    """Write-once storage of submission records in DynamoDB"""

    def __init__(self, table_name, client=None):
        self.table_name = table_name
        self.dynamodb = client or boto3.client('dynamodb')

    def put(self, record):
        """
        Insert a submission record, refusing to overwrite an existing id

        Raises:
            PersistenceError: If DynamoDB rejects the write or is unreachable
        """
        try:
            self.dynamodb.put_item(
                TableName=self.table_name,
                Item=serialize_record(record),
                ConditionExpression='attribute_not_exists(id)'
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            logger.error(f"Failed to store submission {record['id']}: {error_code} - {error_message}")
            raise PersistenceError(f"Failed to store submission: {error_code}") from e
        except BotoCoreError as e:
            logger.error(f"Failed to reach DynamoDB for submission {record['id']}: {str(e)}")
            raise PersistenceError("Failed to store submission: storage unavailable") from e

        logger.info(f"Submission {record['id']} stored in {self.table_name}")
