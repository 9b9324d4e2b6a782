import json
import os

import pytest

# Module-level boto3 clients need a region; credentials are never used by stubbed calls
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')

from config_utils import InquiryConfig
from email_utils import NotificationDispatcher
from exceptions import DeliveryError, PersistenceError
from inquiry_manager import InquiryManager


class FakeStore:
    def __init__(self, fail=False):
        self.fail = fail
        self.records = []

    def put(self, record):
        if self.fail:
            raise PersistenceError("Failed to store submission: ProvisionedThroughputExceededException")
        self.records.append(record)


class FakeSender:
    def __init__(self, fail_types=()):
        self.fail_types = set(fail_types)
        self.attempts = []

    def send(self, to_email, message, email_type=None):
        self.attempts.append({'to': to_email, 'type': email_type, 'message': message})
        if email_type in self.fail_types:
            raise DeliveryError(f"Failed to send {email_type}: MessageRejected")
        return f"msg-{len(self.attempts)}"


@pytest.fixture
def config():
    return InquiryConfig(
        table_name='travel-inquiries-test',
        from_email='noreply@travel.example.com',
        to_email='bookings@travel.example.com',
        environment='test',
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def make_manager(config):
    def _make(store=None, sender=None):
        store = store or FakeStore()
        sender = sender or FakeSender()
        dispatcher = NotificationDispatcher(sender, config.to_email)
        return InquiryManager(config, store=store, dispatcher=dispatcher)
    return _make


@pytest.fixture
def manager(make_manager, store, sender):
    return make_manager(store, sender)


@pytest.fixture
def failing_store():
    return FakeStore(fail=True)


@pytest.fixture
def make_sender():
    return FakeSender


@pytest.fixture
def make_event():
    def _make(body, method='POST'):
        if isinstance(body, dict):
            body = json.dumps(body)
        return {'httpMethod': method, 'headers': {'Content-Type': 'application/json'}, 'body': body}
    return _make


@pytest.fixture
def record():
    return {
        'id': '6f1c2f1e-8a55-4d2f-9a0e-3c7b9d2e4a10',
        'name': 'Alice',
        'email': 'alice@example.com',
        'phone': '+61 400 000 000',
        'destination': 'Kyoto',
        'travelDateStart': '2026-11-02',
        'travelDateEnd': '2026-11-16',
        'travelers': '2',
        'message': 'Looking for a ryokan stay.',
        'submittedAt': '2026-10-19T08:15:30.123+00:00',
    }


@pytest.fixture
def minimal_record():
    return {
        'id': '0b8e5a52-2f4d-4c8e-b1f3-7d9a6c5e2f01',
        'name': 'Bob',
        'email': 'bob@example.com',
        'phone': None,
        'destination': None,
        'travelDateStart': None,
        'travelDateEnd': None,
        'travelers': None,
        'message': None,
        'submittedAt': '2026-10-19T09:00:00.000+00:00',
    }


def parse_body(response):
    return json.loads(response['body'])


@pytest.fixture
def body_of():
    return parse_body
