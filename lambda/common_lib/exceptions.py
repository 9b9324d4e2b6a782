"""
Common exceptions used across the inquiry intake handler
"""


class BusinessLogicError(Exception):
    """Custom exception for business logic errors"""
    def __init__(self, message, status_code=400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(BusinessLogicError):
    """Custom exception for a single field violation"""
    def __init__(self, message, field=None, code='InvalidFormat'):
        self.field = field
        self.code = code
        super().__init__(message, 400)

    def to_dict(self):
        return {
            'field': self.field,
            'code': self.code,
            'message': self.message
        }


class SubmissionValidationError(BusinessLogicError):
    """Raised when a submission has one or more field violations"""
    def __init__(self, violations):
        self.violations = list(violations)
        messages = '; '.join(v['message'] for v in self.violations)
        super().__init__(f"Invalid submission: {messages}", 400)


class MalformedRequestError(BusinessLogicError):
    """Request body could not be interpreted as a JSON object"""
    def __init__(self, message="Request body must be a valid JSON object"):
        super().__init__(message, 400)


class ConfigurationError(BusinessLogicError):
    """Required configuration is missing"""
    def __init__(self, message):
        super().__init__(message, 500)


class PersistenceError(BusinessLogicError):
    """Storage rejected or could not accept the submission record"""
    def __init__(self, message):
        super().__init__(message, 500)


class DeliveryError(BusinessLogicError):
    """One or more notification emails could not be sent"""
    def __init__(self, message, failures=None):
        self.failures = failures or []
        super().__init__(message, 500)
