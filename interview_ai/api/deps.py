from interview_ai.core.engine import InterviewAIEngine
from interview_ai.core.use_case import InterviewUseCase
from interview_ai.core.workflow import InterviewWorkflow

_engine: InterviewAIEngine | None = None
_use_case: InterviewUseCase | None = None


def get_engine() -> InterviewAIEngine:
    global _engine
    if _engine is None:
        _engine = InterviewAIEngine()
    return _engine


def get_use_case() -> InterviewUseCase:
    global _use_case
    if _use_case is None:
        engine = get_engine()
        _use_case = InterviewUseCase(engine, InterviewWorkflow(engine))
    return _use_case
