from datetime import datetime, timezone

from langgraph.graph import END, START, StateGraph

from interview_ai.core.engine import InterviewAIEngine
from interview_ai.core.interview_data import (
    build_interview_update,
    build_question_plan,
    format_transcript,
    parse_custom_questions,
)
from interview_ai.core.models import CompletionState, ExtractionRecord, SetupState


class InterviewWorkflow:
    """Graphs for preparing an interview and for closing one out."""

    def __init__(self, engine: InterviewAIEngine):
        self.engine = engine
        self.logger = engine.logger
        self.setup_graph = self._build_setup_graph()
        self.completion_graph = self._build_completion_graph()

    @staticmethod
    def _form_details(state: SetupState) -> ExtractionRecord:
        return ExtractionRecord(
            candidate_name=(state.get("candidate_name") or "").strip(),
            position=(state.get("position") or "").strip(),
            title=(state.get("title") or "").strip(),
        )

    def should_extract(self, state: SetupState) -> str:
        form = self._form_details(state)
        if form.candidate_name and form.position and form.title:
            return "use_form_details"
        return "extract_info"

    async def extract_info_node(self, state: SetupState) -> SetupState:
        self.logger.log("Workflow", "Extracting candidate details from documents")
        extracted = await self.engine.extract_info(state.get("resume", ""), state.get("job_requirements", ""))
        form = self._form_details(state)
        # values typed into the form win over extracted ones
        return {
            "extraction": ExtractionRecord(
                candidate_name=form.candidate_name or extracted.candidate_name,
                position=form.position or extracted.position,
                title=form.title or extracted.title,
            )
        }

    def use_form_details_node(self, state: SetupState) -> SetupState:
        self.logger.log("Workflow", "Interview details provided, skipping extraction")
        return {"extraction": self._form_details(state)}

    async def generate_questions_node(self, state: SetupState) -> SetupState:
        self.logger.log("Workflow", "Generating interview questions")
        custom = parse_custom_questions(state.get("custom_questions_text"))
        questions = await self.engine.generate_questions(
            state.get("resume", ""),
            state.get("job_requirements", ""),
            custom,
            state.get("cover_letter"),
        )
        return {"custom_questions": custom, "generated_questions": questions}

    def plan_questions_node(self, state: SetupState) -> SetupState:
        plan = build_question_plan(state.get("generated_questions", []), state.get("custom_questions", []))
        self.logger.log("Workflow", f"Question plan ready: {len(plan)} questions")
        return {"question_plan": plan}

    def assemble_transcript_node(self, state: CompletionState) -> CompletionState:
        transcript = state.get("transcript") or format_transcript(state.get("segments", []))
        return {"transcript": transcript, "end_time": state.get("end_time") or datetime.now(timezone.utc)}

    async def analyze_node(self, state: CompletionState) -> CompletionState:
        self.logger.log("Workflow", "Analyzing interview")
        analysis = await self.engine.analyze_interview(
            state["interview"],
            state.get("questions", []),
            state.get("responses", []),
            state.get("transcript", ""),
        )
        return {"analysis": analysis}

    def summarize_node(self, state: CompletionState) -> CompletionState:
        update = build_interview_update(
            state["analysis"],
            state.get("responses", []),
            state["interview"].start_time,
            state["end_time"],
        )
        self.logger.log("Workflow", f"Interview completed. Final score: {update.final_score:.1f}")
        return {"update": update}

    def _build_setup_graph(self) -> StateGraph:
        workflow = StateGraph(SetupState)
        workflow.add_node("extract_info", self.extract_info_node)
        workflow.add_node("use_form_details", self.use_form_details_node)
        workflow.add_node("generate_questions", self.generate_questions_node)
        workflow.add_node("plan_questions", self.plan_questions_node)

        workflow.add_conditional_edges(
            START,
            self.should_extract,
            {"extract_info": "extract_info", "use_form_details": "use_form_details"}
        )
        workflow.add_edge("extract_info", "generate_questions")
        workflow.add_edge("use_form_details", "generate_questions")
        workflow.add_edge("generate_questions", "plan_questions")
        workflow.add_edge("plan_questions", END)
        return workflow.compile()

    def _build_completion_graph(self) -> StateGraph:
        workflow = StateGraph(CompletionState)
        workflow.add_node("assemble_transcript", self.assemble_transcript_node)
        workflow.add_node("analyze", self.analyze_node)
        workflow.add_node("summarize", self.summarize_node)
        workflow.set_entry_point("assemble_transcript")
        workflow.add_edge("assemble_transcript", "analyze")
        workflow.add_edge("analyze", "summarize")
        workflow.add_edge("summarize", END)
        return workflow.compile()
