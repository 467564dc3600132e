# =============================================================================
# core/prompts.py  —  Prompt Catalog
# =============================================================================
#
# Canned prompts the agent host can fetch by name to format tool output for
# people (a one-line bilingual audit summary, an ETA breakdown).  They are
# static text; nothing here calls a model.
# =============================================================================

from dataclasses import dataclass, field

from core.errors import ErrorCode, LogisticsError


@dataclass(frozen=True)
class PromptMessage:
    role: str
    text: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class Prompt:
    name: str
    description: str
    messages: tuple[PromptMessage, ...] = field(default_factory=tuple)


PROMPTS: tuple[Prompt, ...] = (
    Prompt(
        name="invoice_audit_summary",
        description="Summarize invoice audit (KR+EN, 1 line)",
        messages=(
            PromptMessage(
                role="system",
                text="Provide KR concise summary + EN-KR one line. Include Incoterm/HS/DEM-DET.",
            ),
        ),
    ),
    Prompt(
        name="eta_explain",
        description="Explain ETA drivers (weather, berth, customs)",
        messages=(
            PromptMessage(
                role="system",
                text="Break down ETA into Weather, Berth, Customs, Trucking.",
            ),
        ),
    ),
)


def list_prompts() -> list[dict[str, str]]:
    return [{"name": prompt.name, "description": prompt.description} for prompt in PROMPTS]


def get_prompt(name: str) -> Prompt:
    """Look a prompt up by name; PROMPT_NOT_FOUND if there is none."""
    for prompt in PROMPTS:
        if prompt.name == name:
            return prompt
    raise LogisticsError(ErrorCode.PROMPT_NOT_FOUND, f"Unknown prompt: {name}", {"name": name})
