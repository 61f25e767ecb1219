from datetime import datetime
from typing import Any, List, Mapping, Sequence

from interview_ai.core.engine import InterviewAIEngine
from interview_ai.core.interview_data import analysis_from_interview
from interview_ai.core.models import (
    AnalysisRecord,
    CompletionState,
    ExtractionRecord,
    InterviewDetails,
    InterviewQuestion,
    InterviewResponse,
    QuestionItem,
    SetupState,
    TranscriptSegment,
)
from interview_ai.core.workflow import InterviewWorkflow


class InterviewUseCase:
    def __init__(self, engine: InterviewAIEngine, workflow: InterviewWorkflow):
        self.engine = engine
        self.workflow = workflow

    async def generate_questions(
        self,
        resume: str,
        job_requirements: str,
        custom_questions: Sequence[str] = (),
        cover_letter: str | None = None,
    ) -> List[QuestionItem]:
        return await self.engine.generate_questions(resume, job_requirements, custom_questions, cover_letter)

    async def extract_info(self, resume: str, job_requirements: str) -> ExtractionRecord:
        return await self.engine.extract_info(resume, job_requirements)

    async def analyze_interview(
        self,
        interview: InterviewDetails,
        questions: Sequence[InterviewQuestion],
        responses: Sequence[InterviewResponse],
        transcript: str,
    ) -> AnalysisRecord:
        return await self.engine.analyze_interview(interview, questions, responses, transcript)

    async def setup_interview(
        self,
        resume: str,
        job_requirements: str,
        cover_letter: str | None = None,
        custom_questions_text: str = "",
        title: str = "",
        candidate_name: str = "",
        position: str = "",
    ) -> SetupState:
        state: SetupState = {
            "resume": resume,
            "job_requirements": job_requirements,
            "cover_letter": cover_letter,
            "custom_questions_text": custom_questions_text,
            "title": title,
            "candidate_name": candidate_name,
            "position": position,
        }
        return await self.workflow.setup_graph.ainvoke(state)

    async def complete_interview(
        self,
        interview: InterviewDetails,
        questions: Sequence[InterviewQuestion],
        responses: Sequence[InterviewResponse],
        segments: Sequence[TranscriptSegment] = (),
        transcript: str = "",
        end_time: datetime | None = None,
    ) -> CompletionState:
        state: CompletionState = {
            "interview": interview,
            "questions": list(questions),
            "responses": list(responses),
            "segments": list(segments),
            "transcript": transcript,
        }
        if end_time is not None:
            state["end_time"] = end_time
        return await self.workflow.completion_graph.ainvoke(state)

    def stored_analysis(self, row: Mapping[str, Any]) -> AnalysisRecord | None:
        return analysis_from_interview(row)
