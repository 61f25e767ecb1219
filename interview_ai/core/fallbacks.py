"""Fixed payloads returned when the model output cannot be used."""

from typing import List

from interview_ai.core.models import AnalysisRecord, ExtractionRecord, QuestionItem

FALLBACK_QUESTIONS = (
    ("Walk me through your background and the experience most relevant to this role.", "experience", "easy"),
    ("Which technical skills from the job requirements do you feel strongest in, and how have you applied them?", "technical", "medium"),
    ("Describe the most technically challenging project you have worked on and your part in it.", "technical", "hard"),
    ("Tell me about a time you disagreed with a teammate. How did you resolve it?", "behavioral", "medium"),
    ("Describe a situation where you had to deliver under a tight deadline.", "behavioral", "medium"),
    ("What is an area you are actively working to improve, and what steps are you taking?", "behavioral", "medium"),
    ("What kind of team culture and working style helps you do your best work?", "cultural_fit", "easy"),
    ("Why are you interested in this position, and where do you see yourself growing here?", "cultural_fit", "easy"),
)
FALLBACK_REASONING = "Generic question used because tailored questions could not be generated"


def fallback_questions() -> List[QuestionItem]:
    return [
        QuestionItem(question=question, category=category, difficulty=difficulty, reasoning=FALLBACK_REASONING)
        for question, category, difficulty in FALLBACK_QUESTIONS
    ]


def empty_extraction() -> ExtractionRecord:
    return ExtractionRecord()


def fallback_analysis() -> AnalysisRecord:
    return AnalysisRecord(
        overall_assessment="Automatic analysis was unavailable. Review the responses and transcript manually.",
        strengths=["Review the candidate responses to identify strengths"],
        weaknesses=["Review the candidate responses to identify areas for improvement"],
        skill_gaps=["Skill gaps could not be determined automatically"],
        training_recommendations=["Define training needs after a manual review"],
        cultural_fit="Cultural fit could not be assessed automatically",
        recommendation="maybe",
        confidence_score=0.5,
    )
