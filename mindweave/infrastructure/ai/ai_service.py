import asyncio

import structlog

from mindweave.config import get_settings
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.mindmaps.entities.mindmap_draft import (
    ConnectionDraft,
    MindmapDraft,
    NodeDraft,
)
from mindweave.exceptions import (
    GenerationTimeoutError,
    MindweaveError,
    ServiceUnavailableError,
)
from mindweave.feature_flags import is_ai_enabled
from mindweave.infrastructure.ai.ai_agents import get_aid_agent, get_knowledge_weaver_agent
from mindweave.infrastructure.ai.prompts import build_prompt

logger = structlog.get_logger(__name__)

# Raw source text beyond this is not sent to the model
MAX_WEAVE_INPUT_CHARS = 30000


def _ensure_ai_enabled() -> None:
    if not is_ai_enabled():
        raise ServiceUnavailableError("AI features are not configured on this server.")


class AIGenerationService:
    """One model call per study aid, no retries."""

    async def generate(self, kind: AidKind, source_text: str) -> str:
        _ensure_ai_enabled()
        prompt = build_prompt(kind, source_text)
        timeout = get_settings().AI_GENERATION_TIMEOUT_SECONDS

        try:
            agent = get_aid_agent(prompt.instructions)
            async with asyncio.timeout(timeout):
                result = await agent.run(prompt.content)
        except TimeoutError:
            logger.error("ai_generation_timed_out", kind=kind.value, timeout_seconds=timeout)
            raise GenerationTimeoutError(timeout) from None
        except MindweaveError:
            raise
        except Exception as e:
            logger.error("ai_generation_failed", kind=kind.value, error=str(e), exc_info=True)
            raise ServiceUnavailableError from e

        if not result.output or not result.output.strip():
            logger.error("ai_generation_empty", kind=kind.value)
            raise ServiceUnavailableError

        return result.output


class AIKnowledgeWeaverService:
    """Turns raw text into a mind-map draft with one structured model call."""

    async def weave(self, raw_text: str) -> MindmapDraft:
        _ensure_ai_enabled()
        if len(raw_text) > MAX_WEAVE_INPUT_CHARS:
            logger.info(
                "weave_input_truncated", length=len(raw_text), limit=MAX_WEAVE_INPUT_CHARS
            )
        timeout = get_settings().AI_GENERATION_TIMEOUT_SECONDS

        try:
            agent = get_knowledge_weaver_agent()
            async with asyncio.timeout(timeout):
                result = await agent.run(raw_text[:MAX_WEAVE_INPUT_CHARS])
        except TimeoutError:
            logger.error("ai_weave_timed_out", timeout_seconds=timeout)
            raise GenerationTimeoutError(timeout) from None
        except MindweaveError:
            raise
        except Exception as e:
            logger.error("ai_weave_failed", error=str(e), exc_info=True)
            raise ServiceUnavailableError from e

        output = result.output
        return MindmapDraft(
            nodes=tuple(
                NodeDraft(key=node.key, title=node.title, summary=node.summary)
                for node in output.nodes
            ),
            connections=tuple(
                ConnectionDraft(source_key=c.source, target_key=c.target)
                for c in output.connections
            ),
        )
