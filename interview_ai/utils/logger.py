import json
import logging
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from colorama import Fore, Style, init

init(autoreset=True)

MAX_EVENTS = 200

STAGE_COLORS = {
    "Questions": Fore.CYAN,
    "Extraction": Fore.GREEN,
    "Analysis": Fore.MAGENTA,
    "Workflow": Fore.BLUE,
    "Fallback": Fore.YELLOW,
    "System": Fore.WHITE,
}

STAGE_PREFIXES = {
    "Questions": "[LOG :: QUESTIONS]",
    "Extraction": "[LOG :: EXTRACTION]",
    "Analysis": "[LOG :: ANALYSIS]",
    "Workflow": "[LOG :: WORKFLOW]",
    "Fallback": "[LOG :: FALLBACK]",
    "System": "[LOG :: SYSTEM]",
}


def _empty_log_data() -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "events": deque(maxlen=MAX_EVENTS),
        "metrics": {
            "calls": 0,
            "fallbacks": 0,
            "total_tokens": 0,
            "prompt_tokens": 0,
            "completion_tokens": 0,
            "latency_count": 0,
            "latency_total_ms": 0.0
        }
    }


class InterviewAILogger:
    """Colored stage log for model calls, with token and latency metrics.

    Only the last ``MAX_EVENTS`` events are kept in memory. When ``log_dir``
    is given every event is also appended as one JSON line to a file in that
    directory.
    """

    def __init__(self, log_dir: str | None = None):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self._new_log_file()
        self.log_data = _empty_log_data()
        self.logger = logging.getLogger("interview_ai")

    def _new_log_file(self) -> Path | None:
        if self.log_dir is None:
            return None
        return self.log_dir / f"ai_calls_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.jsonl"

    def log(self, stage: str, message: str, data: Dict[str, Any] | None = None, level: int = logging.INFO):
        event = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "stage": stage,
            "message": message,
            "data": data or {}
        }
        self.log_data["events"].append(event)

        color = STAGE_COLORS.get(stage, Fore.WHITE)
        prefix = STAGE_PREFIXES.get(stage, f"[LOG :: {stage.upper()}]")
        formatted_msg = f"{color}{prefix}{Style.RESET_ALL} {message}"
        if data:
            formatted_msg += f" | Data: {json.dumps(data, ensure_ascii=False, default=str)}"

        self.logger.log(level, formatted_msg)
        self._save_event(event)

    def log_call(self, stage: str, model: str):
        self.log_data["metrics"]["calls"] += 1
        self.log(stage, f"Calling {model}")

    def log_fallback(self, stage: str, reason: str):
        self.log_data["metrics"]["fallbacks"] += 1
        self.log("Fallback", f"{stage}: {reason}", level=logging.WARNING)

    def log_tokens(self, prompt_tokens: int, completion_tokens: int):
        self.log_data["metrics"]["prompt_tokens"] += prompt_tokens
        self.log_data["metrics"]["completion_tokens"] += completion_tokens
        self.log_data["metrics"]["total_tokens"] += (prompt_tokens + completion_tokens)
        self.log("System", f"[METRIC :: TOKENS] +{prompt_tokens} prompt, +{completion_tokens} completion")

    def log_latency(self, latency_ms: float):
        self.log_data["metrics"]["latency_count"] += 1
        self.log_data["metrics"]["latency_total_ms"] += latency_ms
        self.log("System", f"[METRIC :: LATENCY] {latency_ms:.2f}ms")

    def _save_event(self, event: Dict[str, Any]):
        if self.log_file is None:
            return
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(event, ensure_ascii=False, default=str) + "\n")
        except OSError as e:
            self.logger.warning(f"Error saving call log: {e}")

    def get_log_data(self) -> Dict[str, Any]:
        return {
            "timestamp": self.log_data["timestamp"],
            "events": list(self.log_data["events"]),
            "metrics": dict(self.log_data["metrics"]),
        }
