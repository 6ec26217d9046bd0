"""Instructions for each kind of generated study aid."""

from dataclasses import dataclass

from mindweave.domain.aids.entities.aid_kind import AidKind

SUMMARY_INSTRUCTIONS = "Summarize the following text concisely, focusing on the main points."

MODULE_INSTRUCTIONS = (
    "Based on the following concept, create a concise real-world analogy to explain it, "
    "and then suggest a simple micro-project idea for a beginner to apply the concept."
)

FLASHCARDS_INSTRUCTIONS = (
    "From the text below, generate exactly 3 distinct question and answer pairs suitable "
    "for flashcards. Format each pair strictly as 'Q: [Your Question]' on one line, "
    "followed by 'A: [Your Answer]' on the next line."
)

STUDY_PLAN_INSTRUCTIONS = (
    "Based on the core topic, create a 7-day study plan. Each day should have a specific, "
    "actionable goal. Format the output as a list, with each day on a new line starting "
    "with 'Day X:'."
)

KNOWLEDGE_WEAVER_INSTRUCTIONS = """
You turn raw study material into a mind map.

Identify the key concepts of the text. For each concept produce a node with:
- key: a short unique identifier (for example "n1", "n2", ...)
- title: a concise name for the concept
- summary: two or three sentences explaining the concept using the text

Then list connections between related concepts. Each connection names the
key of the broader or prerequisite concept as source and the key of the more
specific or dependent concept as target. Only reference keys you defined.

Prefer 5 to 15 nodes. Do not invent concepts that are not in the text.
"""


@dataclass(frozen=True)
class GenerationPrompt:
    instructions: str
    content: str


def aid_instructions(kind: AidKind) -> str:
    match kind:
        case AidKind.SUMMARY:
            return SUMMARY_INSTRUCTIONS
        case AidKind.MODULE:
            return MODULE_INSTRUCTIONS
        case AidKind.FLASHCARDS:
            return FLASHCARDS_INSTRUCTIONS
        case AidKind.STUDY_PLAN:
            return STUDY_PLAN_INSTRUCTIONS


def build_prompt(kind: AidKind, source_text: str) -> GenerationPrompt:
    """Deterministic: the same kind and text always give the same prompt."""
    return GenerationPrompt(instructions=aid_instructions(kind), content=source_text)
