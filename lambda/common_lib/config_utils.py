"""
Configuration for the inquiry intake handler

Values come from the Lambda environment and are bundled into an explicit
object handed to the managers, so tests can build their own.
"""

import os

from exceptions import ConfigurationError


class InquiryConfig:
    """Storage and email settings for one deployment"""

    REQUIRED_VARIABLES = {
        'table_name': 'DYNAMODB_TABLE_NAME',
        'from_email': 'FROM_EMAIL_ADDRESS',
        'to_email': 'TO_EMAIL_ADDRESS',
    }

    def __init__(self, table_name, from_email, to_email, environment='production'):
        self.table_name = table_name
        self.from_email = from_email
        self.to_email = to_email
        self.environment = environment

    @classmethod
    def from_environment(cls, environ=None):
        """
        Build configuration from environment variables

        Args:
            environ (dict): Mapping to read from (defaults to os.environ)

        Returns:
            InquiryConfig: Populated configuration

        Raises:
            ConfigurationError: If a required variable is missing or empty
        """
        if environ is None:
            environ = os.environ

        values = {}
        missing = []
        for field, variable in cls.REQUIRED_VARIABLES.items():
            value = (environ.get(variable) or '').strip()
            if not value:
                missing.append(variable)
            values[field] = value

        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        return cls(environment=environ.get('ENVIRONMENT', 'production'), **values)

    def __repr__(self):
        return (f"InquiryConfig(table_name={self.table_name!r}, from_email={self.from_email!r}, "
                f"to_email={self.to_email!r}, environment={self.environment!r})")
