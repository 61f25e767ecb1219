import asyncio
import logging
import time
from typing import Any, Dict, List, Sequence

from mistralai import Mistral
from mistralai.utils import RetryConfig

from interview_ai.config.settings import settings
from interview_ai.core.extractor import extract_json
from interview_ai.core.fallbacks import empty_extraction, fallback_analysis, fallback_questions
from interview_ai.core.models import (
    AnalysisRecord,
    CallConfig,
    ExtractionRecord,
    InterviewDetails,
    InterviewQuestion,
    InterviewResponse,
    QuestionItem,
)
from interview_ai.core.normalizer import normalize_analysis, normalize_extraction, normalize_question_list
from interview_ai.core.prompts import (
    ANALYSIS_PROMPT,
    EXTRACTION_PROMPT,
    QUESTIONS_PROMPT,
    build_analysis_message,
    build_extraction_message,
    build_questions_message,
)
from interview_ai.utils.logger import InterviewAILogger

logger = logging.getLogger(__name__)


def build_client(api_key: str, http_client=None) -> Mistral:
    # single attempt per call, no SDK-level retries
    return Mistral(api_key=api_key, client=http_client, retry_config=RetryConfig("none", None, False))


def _message_text(content: Any) -> str | None:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        texts = [getattr(chunk, "text", None) for chunk in content]
        return "".join(t for t in texts if isinstance(t, str))
    return None


class InterviewAIEngine:
    """Question generation, candidate extraction and interview analysis.

    Each operation makes exactly one model call and always returns a
    well-formed record: transport failures, unexpected response shapes and
    unparseable completions all degrade to default payloads.
    """

    def __init__(self, client: Mistral | None = None, call_logger: InterviewAILogger | None = None):
        self.client = client or build_client(settings.MISTRAL_API_KEY)
        self.model = settings.MISTRAL_MODEL
        self.logger = call_logger or InterviewAILogger(settings.LOG_DIR if settings.SAVE_CALL_LOG else None)

    def default_config(self, stage: str) -> CallConfig:
        temperature, max_tokens = {
            "Questions": (settings.QUESTIONS_TEMPERATURE, settings.QUESTIONS_MAX_TOKENS),
            "Extraction": (settings.EXTRACTION_TEMPERATURE, settings.EXTRACTION_MAX_TOKENS),
            "Analysis": (settings.ANALYSIS_TEMPERATURE, settings.ANALYSIS_MAX_TOKENS),
        }[stage]
        return CallConfig(model=self.model, temperature=temperature, max_tokens=max_tokens)

    async def _complete(self, stage: str, system_prompt: str, prompt: str, config: CallConfig) -> str | None:
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]

        self.logger.log_call(stage, config.model)
        start_time = time.time()
        try:
            response = await asyncio.to_thread(
                self.client.chat.complete,
                model=config.model,
                messages=messages,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
            )
        except Exception as e:
            logger.error(f"{stage} model call failed: {e}", exc_info=True)
            self.logger.log_fallback(stage, f"model call failed: {e}")
            return None

        latency = (time.time() - start_time) * 1000
        self.logger.log_latency(latency)

        try:
            content = _message_text(response.choices[0].message.content)
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            self.logger.log_fallback(stage, f"unexpected response envelope: {e}")
            return None
        if content is None:
            self.logger.log_fallback(stage, "response carried no message text")
            return None

        usage = getattr(response, "usage", None)
        prompt_tokens = getattr(usage, "prompt_tokens", None)
        completion_tokens = getattr(usage, "completion_tokens", None)
        if isinstance(prompt_tokens, int) and isinstance(completion_tokens, int):
            self.logger.log_tokens(prompt_tokens, completion_tokens)
        return content

    async def generate_questions(
        self,
        resume: str,
        job_requirements: str,
        custom_questions: Sequence[str] = (),
        cover_letter: str | None = None,
        config: CallConfig | None = None,
    ) -> List[QuestionItem]:
        stage = "Questions"
        content = await self._complete(
            stage,
            QUESTIONS_PROMPT,
            build_questions_message(resume, job_requirements, custom_questions, cover_letter),
            config or self.default_config(stage),
        )
        if content is None:
            return fallback_questions()

        extracted = extract_json(content, allow_array=True)
        if not extracted.found:
            self.logger.log_fallback(stage, f"no JSON found in completion: {content[:200]}")
            return fallback_questions()

        questions = normalize_question_list(extracted.value)
        if questions is None:
            self.logger.log_fallback(stage, f"no usable questions in {extracted.strategy} result")
            return fallback_questions()

        self.logger.log(stage, f"Generated {len(questions)} questions", {"strategy": extracted.strategy})
        return questions

    async def extract_info(
        self,
        resume: str,
        job_requirements: str,
        config: CallConfig | None = None,
    ) -> ExtractionRecord:
        stage = "Extraction"
        content = await self._complete(
            stage,
            EXTRACTION_PROMPT,
            build_extraction_message(resume, job_requirements),
            config or self.default_config(stage),
        )
        if content is None:
            return empty_extraction()

        extracted = extract_json(content)
        if not extracted.found:
            self.logger.log_fallback(stage, f"no JSON found in completion: {content[:200]}")
            return empty_extraction()

        record = normalize_extraction(extracted.value)
        self.logger.log(stage, f"Extracted candidate={record.candidate_name or '-'}, position={record.position or '-'}",
                        {"strategy": extracted.strategy})
        return record

    async def analyze_interview(
        self,
        interview: InterviewDetails,
        questions: Sequence[InterviewQuestion],
        responses: Sequence[InterviewResponse],
        transcript: str,
        config: CallConfig | None = None,
    ) -> AnalysisRecord:
        stage = "Analysis"
        content = await self._complete(
            stage,
            ANALYSIS_PROMPT,
            build_analysis_message(interview, questions, responses, transcript),
            config or self.default_config(stage),
        )
        if content is None:
            return fallback_analysis()

        extracted = extract_json(content)
        if not extracted.found:
            self.logger.log_fallback(stage, f"no JSON found in completion: {content[:200]}")
            return normalize_analysis(None)

        analysis = normalize_analysis(extracted.value)
        self.logger.log(stage, f"Analysis ready. Recommendation: {analysis.recommendation}",
                        {"strategy": extracted.strategy, "confidence_score": analysis.confidence_score})
        return analysis
