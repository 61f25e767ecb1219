import logging

from fastapi import APIRouter

from interview_ai.api.deps import get_engine, get_use_case
from interview_ai.api.schemas import (
    AnalyzeInterviewRequest,
    AnalyzeInterviewResponse,
    CompleteInterviewRequest,
    CompleteInterviewResponse,
    ExtractInfoRequest,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    MetricsResponse,
    SetupInterviewRequest,
    SetupInterviewResponse,
    StoredReportRequest,
)
from interview_ai.core.models import ExtractionRecord
from interview_ai.system.exceptions import AnalysisNotFoundException, MissingDocumentException

logger = logging.getLogger(__name__)
interview_router = APIRouter()


@interview_router.get("/health")
async def health():
    return {"status": "ok"}


@interview_router.get("/metrics", response_model=MetricsResponse)
async def call_metrics():
    return MetricsResponse(metrics=get_engine().logger.get_log_data()["metrics"])


@interview_router.post("/generate-questions", response_model=GenerateQuestionsResponse, response_model_by_alias=True)
async def generate_questions(request: GenerateQuestionsRequest):
    logger.info(f"Generating questions ({len(request.custom_questions)} custom)")
    questions = await get_use_case().generate_questions(
        request.resume,
        request.job_requirements,
        request.custom_questions,
        request.cover_letter,
    )
    return GenerateQuestionsResponse(questions=questions)


@interview_router.post("/extract-info", response_model=ExtractionRecord, response_model_by_alias=True)
async def extract_info(request: ExtractInfoRequest):
    return await get_use_case().extract_info(request.resume, request.job_requirements)


@interview_router.post("/analyze", response_model=AnalyzeInterviewResponse, response_model_by_alias=True)
async def analyze_interview(request: AnalyzeInterviewRequest):
    logger.info(f"Analyzing interview for {request.interview.candidate_name or 'unknown candidate'}")
    analysis = await get_use_case().analyze_interview(
        request.interview,
        request.questions,
        request.responses,
        request.transcript,
    )
    return AnalyzeInterviewResponse(analysis=analysis)


@interview_router.post("/setup", response_model=SetupInterviewResponse, response_model_by_alias=True)
async def setup_interview(request: SetupInterviewRequest):
    if not request.resume.strip():
        raise MissingDocumentException("Resume text is required")
    if not request.job_requirements.strip():
        raise MissingDocumentException("Job requirements text is required")

    result = await get_use_case().setup_interview(
        request.resume,
        request.job_requirements,
        cover_letter=request.cover_letter,
        custom_questions_text=request.custom_questions,
        title=request.title,
        candidate_name=request.candidate_name,
        position=request.position,
    )
    return SetupInterviewResponse(
        details=result["extraction"],
        questions=result["generated_questions"],
        question_plan=result["question_plan"],
    )


@interview_router.post("/complete", response_model=CompleteInterviewResponse, response_model_by_alias=True)
async def complete_interview(request: CompleteInterviewRequest):
    result = await get_use_case().complete_interview(
        request.interview,
        request.questions,
        request.responses,
        segments=request.transcripts,
        transcript=request.transcript,
        end_time=request.end_time,
    )
    return CompleteInterviewResponse(analysis=result["analysis"], update=result["update"])


@interview_router.post("/report", response_model=AnalyzeInterviewResponse, response_model_by_alias=True)
async def stored_report(request: StoredReportRequest):
    analysis = get_use_case().stored_analysis(request.interview)
    if analysis is None:
        raise AnalysisNotFoundException()
    return AnalyzeInterviewResponse(analysis=analysis)
