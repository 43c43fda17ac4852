"""Custom exception classes for the application."""

class BaseReportingException(Exception):
    """Base exception for all application-specific errors."""
    pass

class DataLoadError(BaseReportingException):
    """Error reading or decoding one of the JSON data files."""
    pass

class RecordNotFoundError(BaseReportingException):
    """A referenced id (student, assessment, question) is not in the dataset."""
    def __init__(self, record_type: str, record_id: str):
        super().__init__(f"{record_type} not found: {record_id}")
        self.record_type = record_type
        self.record_id = record_id

class ValidationError(BaseReportingException):
    """Error raised when user input fails validation."""
    pass

class InvalidReportTypeError(BaseReportingException):
    """The requested report kind is not diagnostic, progress or feedback."""
    def __init__(self, report_type: object):
        super().__init__(f"Invalid report type: {report_type}. Report type must be 1, 2, or 3")
        self.report_type = report_type
