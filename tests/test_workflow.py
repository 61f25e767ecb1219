"""Tests for the setup and completion graphs."""

import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_completion
from interview_ai.core.fallbacks import fallback_analysis, fallback_questions
from interview_ai.core.models import (
    ExtractionRecord,
    InterviewDetails,
    InterviewQuestion,
    InterviewResponse,
    TranscriptSegment,
)
from interview_ai.core.use_case import InterviewUseCase
from interview_ai.core.workflow import InterviewWorkflow

START = datetime(2024, 5, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def use_case(engine):
    return InterviewUseCase(engine, InterviewWorkflow(engine))


def test_setup_extracts_then_generates(use_case, mock_client, sample_resume, sample_job_requirements):
    mock_client.chat.complete.side_effect = [
        make_completion('{"candidateName": "Jane Doe", "position": "Staff Python Engineer", "title": "Staff Interview"}'),
        make_completion('[{"question": "How do you design idempotent consumers?", "category": "technical"}]'),
    ]

    result = asyncio.run(use_case.setup_interview(
        sample_resume,
        sample_job_requirements,
        custom_questions_text="Why us?\n\nNotice period?",
        title="Final round",
    ))

    assert mock_client.chat.complete.call_count == 2
    # form title wins, the rest comes from extraction
    assert result["extraction"] == ExtractionRecord(
        candidate_name="Jane Doe", position="Staff Python Engineer", title="Final round"
    )
    assert result["custom_questions"] == ["Why us?", "Notice period?"]
    assert [(p.question_text, p.question_type, p.order_index) for p in result["question_plan"]] == [
        ("How do you design idempotent consumers?", "generated", 0),
        ("Why us?", "custom", 1),
        ("Notice period?", "custom", 2),
    ]
    questions_prompt = mock_client.chat.complete.call_args_list[1].kwargs["messages"][1]["content"]
    assert "Custom Questions to Include: Why us?, Notice period?" in questions_prompt


def test_setup_skips_extraction_when_form_complete(use_case, mock_client):
    mock_client.chat.complete.return_value = make_completion('[{"question": "Q1"}]')

    result = asyncio.run(use_case.setup_interview(
        "resume", "requirements", title="T", candidate_name="Jane", position="Engineer"
    ))

    assert mock_client.chat.complete.call_count == 1
    assert result["extraction"] == ExtractionRecord(candidate_name="Jane", position="Engineer", title="T")
    assert [q.question for q in result["generated_questions"]] == ["Q1"]


def test_setup_survives_model_outage(use_case, mock_client):
    mock_client.chat.complete.side_effect = ConnectionError("down")

    result = asyncio.run(use_case.setup_interview("resume", "requirements"))

    assert result["extraction"] == ExtractionRecord()
    assert result["generated_questions"] == fallback_questions()
    assert len(result["question_plan"]) == 8


def _completion_inputs():
    interview = InterviewDetails(position="Engineer", candidate_name="Jane Doe", start_time=START)
    questions = [InterviewQuestion(id="q1", question_text="Tell me about yourself.")]
    responses = [
        InterviewResponse(question_id="q1", answer_text="Backend engineer.", score=7),
        InterviewResponse(question_id="q2", score=9),
    ]
    segments = [
        TranscriptSegment(transcript_text="Tell me about yourself.", speaker="interviewer", created_at=START),
        TranscriptSegment(transcript_text="I am a backend engineer.", speaker="candidate",
                          created_at=START + timedelta(seconds=20)),
    ]
    return interview, questions, responses, segments


def test_completion_analyzes_and_summarizes(use_case, mock_client):
    mock_client.chat.complete.return_value = make_completion(json.dumps({
        "overall_assessment": "Good",
        "strengths": ["Clear communication"],
        "weaknesses": ["Little cloud"],
        "skill_gaps": ["AWS"],
        "training_recommendations": ["AWS associate"],
        "cultural_fit": "Fits",
        "recommendation": "hire",
        "confidence_score": 0.8,
    }))
    interview, questions, responses, segments = _completion_inputs()

    result = asyncio.run(use_case.complete_interview(
        interview, questions, responses, segments=segments, end_time=START + timedelta(minutes=35)
    ))

    assert result["transcript"] == (
        "[09:00:00] INTERVIEWER: Tell me about yourself.\n"
        "[09:00:20] CANDIDATE: I am a backend engineer."
    )
    assert result["analysis"].recommendation == "hire"
    update = result["update"]
    assert update.duration_minutes == 35
    assert update.final_score == 8.0
    assert update.strengths == "Clear communication"
    prompt = mock_client.chat.complete.call_args.kwargs["messages"][1]["content"]
    assert "[09:00:20] CANDIDATE: I am a backend engineer." in prompt


def test_completion_prefers_supplied_transcript(use_case, mock_client):
    mock_client.chat.complete.return_value = make_completion("{}")
    interview, questions, responses, segments = _completion_inputs()

    result = asyncio.run(use_case.complete_interview(
        interview, questions, responses, segments=segments, transcript="live capture text"
    ))

    assert result["transcript"] == "live capture text"
    assert result["update"].end_time is not None


def test_completion_with_failed_analysis_still_returns_update(use_case, mock_client):
    mock_client.chat.complete.side_effect = RuntimeError("Status 500")
    interview, questions, responses, segments = _completion_inputs()

    result = asyncio.run(use_case.complete_interview(interview, questions, responses, segments=segments))

    assert result["analysis"] == fallback_analysis()
    assert result["update"].confidence_score == 0.5
    assert result["update"].recommendation == "maybe"
