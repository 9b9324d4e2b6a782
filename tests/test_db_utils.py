from datetime import datetime

import boto3
import pytest
from botocore.stub import Stubber

from db_utils import SubmissionStore, build_submission_record, current_timestamp, serialize_record
from exceptions import PersistenceError


@pytest.fixture
def dynamodb_client():
    return boto3.client(
        'dynamodb',
        region_name='us-east-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )


def test_record_has_absent_markers_for_missing_optional_fields():
    record = build_submission_record({'name': 'Alice', 'email': 'alice@example.com'})

    assert record['name'] == 'Alice'
    assert record['email'] == 'alice@example.com'
    for field in ['phone', 'destination', 'travelDateStart', 'travelDateEnd', 'travelers', 'message']:
        assert field in record
        assert record[field] is None


def test_blank_optional_values_become_absent_and_numbers_become_text():
    record = build_submission_record({
        'name': ' Alice ',
        'email': 'alice@example.com',
        'phone': '',
        'message': '   ',
        'travelers': 4,
        'destination': 'Lisbon',
    })

    assert record['name'] == ' Alice '
    assert record['phone'] is None
    assert record['message'] is None
    assert record['travelers'] == '4'
    assert record['destination'] == 'Lisbon'


def test_name_and_email_are_stored_as_received():
    record = build_submission_record({'name': '  Alice ', 'email': ' alice@example.com'})

    assert record['name'] == '  Alice '
    assert record['email'] == ' alice@example.com'


def test_identical_submissions_get_distinct_ids():
    data = {'name': 'Alice', 'email': 'alice@example.com'}
    ids = {build_submission_record(data)['id'] for _ in range(50)}
    assert len(ids) == 50


def test_injected_id_and_timestamp_are_kept():
    record = build_submission_record(
        {'name': 'Alice', 'email': 'alice@example.com'},
        submission_id='ref-1',
        submitted_at='2026-10-19T08:15:30.123+00:00',
    )
    assert record['id'] == 'ref-1'
    assert record['submittedAt'] == '2026-10-19T08:15:30.123+00:00'


def test_timestamp_is_utc_iso8601_with_offset():
    stamp = current_timestamp()
    assert stamp.endswith('+00:00')
    assert datetime.fromisoformat(stamp).utcoffset().total_seconds() == 0


def test_serialize_record_uses_null_for_absent_values(minimal_record):
    item = serialize_record(minimal_record)
    assert item['id'] == {'S': minimal_record['id']}
    assert item['name'] == {'S': 'Bob'}
    assert item['message'] == {'NULL': True}
    assert item['submittedAt'] == {'S': minimal_record['submittedAt']}


def test_put_writes_one_conditional_item(dynamodb_client, record):
    store = SubmissionStore('travel-inquiries-test', client=dynamodb_client)
    with Stubber(dynamodb_client) as stubber:
        stubber.add_response('put_item', {}, {
            'TableName': 'travel-inquiries-test',
            'Item': serialize_record(record),
            'ConditionExpression': 'attribute_not_exists(id)',
        })
        store.put(record)
        stubber.assert_no_pending_responses()


def test_put_failure_raises_persistence_error(dynamodb_client, record):
    store = SubmissionStore('travel-inquiries-test', client=dynamodb_client)
    with Stubber(dynamodb_client) as stubber:
        stubber.add_client_error(
            'put_item',
            service_error_code='ResourceNotFoundException',
            service_message='Requested resource not found',
            http_status_code=400,
        )
        with pytest.raises(PersistenceError) as excinfo:
            store.put(record)

    assert excinfo.value.status_code == 500
    assert 'ResourceNotFoundException' in excinfo.value.message
