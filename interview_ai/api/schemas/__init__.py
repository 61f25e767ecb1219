from interview_ai.api.schemas.interview import (
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    ExtractInfoRequest,
    AnalyzeInterviewRequest,
    AnalyzeInterviewResponse,
    SetupInterviewRequest,
    SetupInterviewResponse,
    CompleteInterviewRequest,
    CompleteInterviewResponse,
    MetricsResponse,
    StoredReportRequest
)

__all__ = [
    "GenerateQuestionsRequest",
    "GenerateQuestionsResponse",
    "ExtractInfoRequest",
    "AnalyzeInterviewRequest",
    "AnalyzeInterviewResponse",
    "SetupInterviewRequest",
    "SetupInterviewResponse",
    "CompleteInterviewRequest",
    "CompleteInterviewResponse",
    "MetricsResponse",
    "StoredReportRequest"
]
