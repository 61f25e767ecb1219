"""Field-level normalization of parsed model output into result records."""

from typing import Any, Dict, List

from interview_ai.core.models import AnalysisRecord, ExtractionRecord, QuestionItem

DEFAULT_CATEGORY = "general"
DEFAULT_DIFFICULTY = "medium"
DEFAULT_REASONING = "AI-generated question"

ANALYSIS_DEFAULTS: Dict[str, Any] = {
    "overall_assessment": "Analysis completed - detailed assessment unavailable",
    "strengths": ["Based on interview responses"],
    "weaknesses": ["Areas identified for improvement"],
    "skill_gaps": ["No specific skill gaps identified"],
    "training_recommendations": ["General professional development"],
    "cultural_fit": "Assessment based on interview",
    "recommendation": "maybe",
    "confidence_score": 0.75,
}

_ANALYSIS_KEYS = {
    "overall_assessment": "overallAssessment",
    "strengths": "strengths",
    "weaknesses": "weaknesses",
    "skill_gaps": "skillGaps",
    "training_recommendations": "trainingRecommendations",
    "cultural_fit": "culturalFit",
    "recommendation": "recommendation",
    "confidence_score": "confidenceScore",
}


def _lookup(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def string_field(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def string_list_field(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    return list(default)


def number_field(value: Any, default: float) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return default


def normalize_question(item: Any) -> QuestionItem | None:
    """Re-map one question entry; entries without question text are unusable."""
    if not isinstance(item, dict):
        return None
    text = item.get("question")
    if not isinstance(text, str) or not text.strip():
        return None
    return QuestionItem(
        question=text,
        category=string_field(item.get("category"), DEFAULT_CATEGORY),
        difficulty=string_field(item.get("difficulty"), DEFAULT_DIFFICULTY),
        reasoning=string_field(item.get("reasoning"), DEFAULT_REASONING),
    )


def normalize_question_list(value: Any) -> List[QuestionItem] | None:
    """
    Normalize a parsed question payload.

    Accepts a list of question objects, an object wrapping them under
    ``questions``, or a single question object. Returns ``None`` when no
    usable question survives so the caller can substitute the fallback list.
    """
    if isinstance(value, dict):
        if isinstance(value.get("questions"), list):
            value = value["questions"]
        elif "question" in value:
            value = [value]
    if not isinstance(value, list):
        return None

    questions = [q for q in (normalize_question(item) for item in value) if q is not None]
    return questions or None


def normalize_extraction(value: Any) -> ExtractionRecord:
    if not isinstance(value, dict):
        return ExtractionRecord()
    return ExtractionRecord(
        candidate_name=string_field(_lookup(value, "candidateName", "candidate_name"), ""),
        position=string_field(value.get("position"), ""),
        title=string_field(value.get("title"), ""),
    )


def normalize_analysis(value: Any) -> AnalysisRecord:
    data = value if isinstance(value, dict) else {}
    fields: Dict[str, Any] = {}
    for name, alias in _ANALYSIS_KEYS.items():
        raw = _lookup(data, name, alias)
        default = ANALYSIS_DEFAULTS[name]
        if isinstance(default, list):
            fields[name] = string_list_field(raw, default)
        elif isinstance(default, float):
            fields[name] = number_field(raw, default)
        else:
            fields[name] = string_field(raw, default)
    return AnalysisRecord(**fields)
