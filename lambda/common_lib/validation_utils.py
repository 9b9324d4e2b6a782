"""
Validation utilities for travel inquiry submissions
Centralizes the field rules applied before any side effect
"""

import re

from exceptions import ValidationError

REQUIRED_FIELDS = ['name', 'email']
OPTIONAL_FIELDS = ['phone', 'destination', 'travelDateStart', 'travelDateEnd', 'travelers', 'message']

MISSING_FIELD = 'MissingField'
INVALID_FORMAT = 'InvalidFormat'

# Printable ASCII only: local-part "@" domain, the domain dotted with non-empty labels
LOCAL_PART_CHARS = r'[!-?A-~]'
DOMAIN_LABEL_CHARS = r'[!-\-/-?A-~]'
EMAIL_PATTERN = re.compile(
    rf'{LOCAL_PART_CHARS}+@{DOMAIN_LABEL_CHARS}+(\.{DOMAIN_LABEL_CHARS}+)+'
)


class DataValidator:
    """Field rules for travel inquiry submissions"""

    @staticmethod
    def is_valid_email(email):
        """
        Check an email address against the accepted format

        Args:
            email (str): Address to check, already trimmed

        Returns:
            bool: True if the address is ASCII, has no whitespace, exactly one '@'
                  and a dotted domain
        """
        if not isinstance(email, str) or not email.isascii():
            return False
        return EMAIL_PATTERN.fullmatch(email) is not None

    @staticmethod
    def validate_required_text(data, field_name):
        """
        Validate a mandatory text field

        Raises:
            ValidationError: If the field is absent, blank, or not a string
        """
        value = data.get(field_name)
        if value is None:
            raise ValidationError(f"{field_name} is required", field_name, MISSING_FIELD)
        if not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string", field_name, INVALID_FORMAT)
        if not value.strip():
            raise ValidationError(f"{field_name} is required", field_name, MISSING_FIELD)
        return value.strip()

    @staticmethod
    def validate_email(data, field_name='email'):
        email = DataValidator.validate_required_text(data, field_name)
        if not DataValidator.is_valid_email(email):
            raise ValidationError(f"{field_name} must be a valid email address", field_name, INVALID_FORMAT)
        return email

    @staticmethod
    def validate_optional_text(data, field_name):
        value = data.get(field_name)
        # bool is an int subclass, reject it before the numeric check
        if value is None or isinstance(value, str):
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"{field_name} must be text", field_name, INVALID_FORMAT)

    @staticmethod
    def validate_submission(data):
        """
        Collect every field violation in a submission payload

        Args:
            data (dict): Parsed request body

        Returns:
            list: Violation dicts ({'field', 'code', 'message'}), empty when valid
        """
        checks = [
            ('name', DataValidator.validate_required_text),
            ('email', DataValidator.validate_email),
        ] + [(field, DataValidator.validate_optional_text) for field in OPTIONAL_FIELDS]

        violations = []
        for field_name, check in checks:
            try:
                check(data, field_name)
            except ValidationError as e:
                violations.append(e.to_dict())

        return violations
