from typing import Iterable, List, Sequence

from interview_ai.core.models import (
    QUESTION_CATEGORIES,
    QUESTION_DIFFICULTIES,
    RECOMMENDATIONS,
    InterviewDetails,
    InterviewQuestion,
    InterviewResponse,
)

QUESTIONS_PROMPT = f"""You are an expert interviewer. Generate relevant interview questions based on the candidate's resume, job requirements, and optional cover letter.

Return ONLY a JSON array of questions, without any text before or after it, with the following structure:
[
  {{
    "question": "Question text here",
    "category": "{'|'.join(QUESTION_CATEGORIES[:-1])}",
    "difficulty": "{'|'.join(QUESTION_DIFFICULTIES)}",
    "reasoning": "Why this question is relevant"
  }}
]

Generate 8-12 questions that cover:
- Technical skills matching the job requirements
- Behavioral questions based on experience
- Situational questions
- Questions about gaps or areas for growth
- If a cover letter is provided, questions about motivations and specific points mentioned

Make questions specific to the candidate's background and the role."""

EXTRACTION_PROMPT = """You are an expert at extracting key information from resumes and job descriptions.

Extract the following information and return ONLY a JSON object:
{
  "candidateName": "Full name of the candidate from the resume",
  "position": "Job title/position from the job requirements",
  "title": "A descriptive interview title combining the position and candidate name"
}

Guidelines:
- candidateName: the full name, usually found at the top of the resume
- position: the exact job title from the job requirements/description
- title: a professional interview title like "Senior Developer Interview - John Smith" or "Marketing Manager Interview"
- If information is not clearly available, return an empty string for that field
- Be conservative - only extract what you are confident about"""

ANALYSIS_PROMPT = f"""You are an expert interview analyst. Analyze the interview data and provide comprehensive insights.

Return ONLY a JSON object with the following structure:
{{
  "overall_assessment": "Overall performance summary",
  "strengths": ["List of candidate strengths"],
  "weaknesses": ["List of areas for improvement"],
  "skill_gaps": ["Specific skill gaps identified"],
  "training_recommendations": ["Specific training recommendations"],
  "cultural_fit": "Assessment of cultural fit",
  "recommendation": "{'|'.join(RECOMMENDATIONS)}",
  "confidence_score": 0.85
}}

confidence_score is a number between 0 and 1."""


def build_questions_message(
    resume: str,
    job_requirements: str,
    custom_questions: Iterable[str] = (),
    cover_letter: str | None = None,
) -> str:
    parts = [f"Resume: {resume}", f"Job Requirements: {job_requirements}"]
    if cover_letter:
        parts.append(f"Cover Letter: {cover_letter}")
    parts.append(f"Custom Questions to Include: {', '.join(custom_questions)}")
    return "\n\n".join(parts)


def build_extraction_message(resume: str, job_requirements: str) -> str:
    return f"Resume Content:\n{resume}\n\nJob Requirements:\n{job_requirements}"


def _format_score(score: float | None) -> str:
    if score is None:
        return "Not scored"
    return f"{score:g}"


def build_analysis_message(
    interview: InterviewDetails,
    questions: Sequence[InterviewQuestion],
    responses: Sequence[InterviewResponse],
    transcript: str,
) -> str:
    by_question = {r.question_id: r for r in responses}
    blocks: List[str] = []
    for i, question in enumerate(questions):
        response = by_question.get(question.id)
        answer = response.answer_text if response and response.answer_text else "No answer provided"
        notes = response.notes if response and response.notes else "No notes"
        score = response.score if response else None
        blocks.append(
            f"Q{i + 1}: {question.question_text}\n"
            f"Answer: {answer}\n"
            f"Score: {_format_score(score)}/10\n"
            f"Notes: {notes}"
        )

    qa_text = "\n\n".join(blocks) if blocks else "No questions recorded"
    return (
        f"Interview Details:\n"
        f"Position: {interview.position}\n"
        f"Candidate: {interview.candidate_name}\n\n"
        f"Questions and Responses:\n"
        f"{qa_text}\n\n"
        f"Full Transcript:\n"
        f"{transcript or 'No transcript recorded'}"
    )
