"""Helpers around the interview records that surround the model calls."""

from datetime import datetime, timezone
from typing import Any, List, Mapping, Sequence

from interview_ai.core.models import (
    AnalysisRecord,
    InterviewResponse,
    InterviewUpdate,
    PlannedQuestion,
    QuestionItem,
    TranscriptSegment,
)
from interview_ai.core.normalizer import ANALYSIS_DEFAULTS

LIST_SEPARATOR = ", "
_ANALYSIS_COLUMNS = ("overall_assessment", "strengths", "weaknesses", "gaps_analysis", "training_needs")


def parse_custom_questions(text: str | None) -> List[str]:
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def build_question_plan(generated: Sequence[QuestionItem], custom: Sequence[str]) -> List[PlannedQuestion]:
    """Generated questions come first, custom ones continue the ordering."""
    plan = [
        PlannedQuestion(question_text=q.question, question_type="generated", order_index=i)
        for i, q in enumerate(generated)
    ]
    plan.extend(
        PlannedQuestion(question_text=text, question_type="custom", order_index=len(generated) + i)
        for i, text in enumerate(custom)
    )
    return plan


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are stored in UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def format_transcript(segments: Sequence[TranscriptSegment]) -> str:
    ordered = sorted(segments, key=lambda s: _as_utc(s.created_at))
    return "\n".join(
        f"[{s.created_at.strftime('%H:%M:%S')}] {s.speaker.upper()}: {s.transcript_text}"
        for s in ordered
    )


def average_score(responses: Sequence[InterviewResponse]) -> float:
    scores = [r.score for r in responses if r.score is not None]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def duration_minutes(start_time: datetime | None, end_time: datetime) -> int | None:
    if start_time is None:
        return None
    if (start_time.tzinfo is None) != (end_time.tzinfo is None):
        start_time, end_time = _as_utc(start_time), _as_utc(end_time)
    return round((end_time - start_time).total_seconds() / 60)


def build_interview_update(
    analysis: AnalysisRecord,
    responses: Sequence[InterviewResponse],
    start_time: datetime | None,
    end_time: datetime,
) -> InterviewUpdate:
    return InterviewUpdate(
        end_time=end_time,
        duration_minutes=duration_minutes(start_time, end_time),
        overall_assessment=analysis.overall_assessment,
        strengths=LIST_SEPARATOR.join(analysis.strengths),
        weaknesses=LIST_SEPARATOR.join(analysis.weaknesses),
        gaps_analysis=LIST_SEPARATOR.join(analysis.skill_gaps),
        training_needs=LIST_SEPARATOR.join(analysis.training_recommendations),
        recommendation=analysis.recommendation,
        confidence_score=analysis.confidence_score,
        final_score=average_score(responses),
    )


def _split_column(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, str) and value:
        return value.split(LIST_SEPARATOR)
    return list(default)


def analysis_from_interview(row: Mapping[str, Any]) -> AnalysisRecord | None:
    """Rebuild a stored analysis from interview columns, None if never analysed."""
    if not any(row.get(column) for column in _ANALYSIS_COLUMNS):
        return None

    confidence = row.get("confidence_score")
    if not isinstance(confidence, (int, float)):
        final_score = row.get("final_score")
        confidence = final_score / 10 if isinstance(final_score, (int, float)) else ANALYSIS_DEFAULTS["confidence_score"]

    return AnalysisRecord(
        overall_assessment=row.get("overall_assessment") or "Analysis completed - view details below",
        strengths=_split_column(row.get("strengths"), ANALYSIS_DEFAULTS["strengths"]),
        weaknesses=_split_column(row.get("weaknesses"), ANALYSIS_DEFAULTS["weaknesses"]),
        skill_gaps=_split_column(row.get("gaps_analysis"), ANALYSIS_DEFAULTS["skill_gaps"]),
        training_recommendations=_split_column(row.get("training_needs"), ANALYSIS_DEFAULTS["training_recommendations"]),
        cultural_fit=ANALYSIS_DEFAULTS["cultural_fit"],
        recommendation=row.get("recommendation") or ANALYSIS_DEFAULTS["recommendation"],
        confidence_score=float(confidence),
    )
