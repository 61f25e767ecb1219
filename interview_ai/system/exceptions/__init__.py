from interview_ai.system.exceptions.api_exception_handler import common_exception_handler
from interview_ai.system.exceptions.base_exception import (
    AnalysisNotFoundException,
    BaseHTTPException,
    MissingDocumentException,
)

__all__ = ["AnalysisNotFoundException", "BaseHTTPException", "MissingDocumentException", "common_exception_handler"]
