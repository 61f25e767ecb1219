from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from interview_ai.core.models import (
    AnalysisRecord,
    CamelModel,
    ExtractionRecord,
    InterviewDetails,
    InterviewQuestion,
    InterviewResponse,
    InterviewUpdate,
    PlannedQuestion,
    QuestionItem,
    TranscriptSegment,
)


class GenerateQuestionsRequest(CamelModel):
    resume: str = ""
    job_requirements: str = ""
    custom_questions: List[str] = []
    cover_letter: str | None = None


class GenerateQuestionsResponse(BaseModel):
    questions: List[QuestionItem]


class ExtractInfoRequest(CamelModel):
    resume: str = ""
    job_requirements: str = ""


class AnalyzeInterviewRequest(CamelModel):
    interview: InterviewDetails
    questions: List[InterviewQuestion] = []
    responses: List[InterviewResponse] = []
    transcript: str = ""


class AnalyzeInterviewResponse(BaseModel):
    analysis: AnalysisRecord


class SetupInterviewRequest(CamelModel):
    resume: str
    job_requirements: str
    cover_letter: str | None = None
    custom_questions: str = Field(default="", description="One custom question per line")
    title: str = ""
    candidate_name: str = ""
    position: str = ""


class SetupInterviewResponse(CamelModel):
    details: ExtractionRecord
    questions: List[QuestionItem]
    question_plan: List[PlannedQuestion]


class CompleteInterviewRequest(CamelModel):
    interview: InterviewDetails
    questions: List[InterviewQuestion] = []
    responses: List[InterviewResponse] = []
    transcripts: List[TranscriptSegment] = []
    transcript: str = ""
    end_time: datetime | None = None


class CompleteInterviewResponse(BaseModel):
    analysis: AnalysisRecord
    update: InterviewUpdate


class StoredReportRequest(BaseModel):
    interview: Dict[str, Any] = Field(description="Stored interview row with snake_case columns")


class MetricsResponse(BaseModel):
    metrics: Dict[str, Any]

