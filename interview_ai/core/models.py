from datetime import datetime
from typing import List, TypedDict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

QUESTION_CATEGORIES = ("technical", "behavioral", "experience", "cultural_fit", "general")
QUESTION_DIFFICULTIES = ("easy", "medium", "hard")
RECOMMENDATIONS = ("hire", "maybe", "no_hire")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuestionItem(CamelModel):
    question: str
    category: str = "general"
    difficulty: str = "medium"
    reasoning: str = "AI-generated question"


class ExtractionRecord(CamelModel):
    candidate_name: str = ""
    position: str = ""
    title: str = ""


class AnalysisRecord(CamelModel):
    overall_assessment: str
    strengths: List[str]
    weaknesses: List[str]
    skill_gaps: List[str]
    training_recommendations: List[str]
    cultural_fit: str
    recommendation: str = "maybe"
    confidence_score: float = 0.75


class CallConfig(BaseModel):
    model: str
    temperature: float
    max_tokens: int


class InterviewDetails(CamelModel):
    position: str = ""
    candidate_name: str = ""
    start_time: datetime | None = None


class InterviewQuestion(CamelModel):
    id: str
    question_text: str
    question_type: str = "generated"
    order_index: int = 0


class InterviewResponse(CamelModel):
    question_id: str
    answer_text: str | None = None
    score: float | None = Field(default=None, ge=0, le=10)
    notes: str | None = None


class TranscriptSegment(CamelModel):
    transcript_text: str
    speaker: str = "candidate"
    created_at: datetime


class PlannedQuestion(CamelModel):
    question_text: str
    question_type: str
    order_index: int


class InterviewUpdate(BaseModel):
    status: str = "completed"
    end_time: datetime
    duration_minutes: int | None = None
    overall_assessment: str
    strengths: str
    weaknesses: str
    gaps_analysis: str
    training_needs: str
    recommendation: str
    confidence_score: float
    final_score: float


class SetupState(TypedDict, total=False):
    resume: str
    job_requirements: str
    cover_letter: str | None
    custom_questions_text: str
    title: str
    candidate_name: str
    position: str
    extraction: ExtractionRecord
    custom_questions: List[str]
    generated_questions: List[QuestionItem]
    question_plan: List[PlannedQuestion]


class CompletionState(TypedDict, total=False):
    interview: InterviewDetails
    questions: List[InterviewQuestion]
    responses: List[InterviewResponse]
    segments: List[TranscriptSegment]
    transcript: str
    end_time: datetime
    analysis: AnalysisRecord
    update: InterviewUpdate
