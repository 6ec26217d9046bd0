from pydantic import BaseModel, Field
from pydantic_ai import Agent

from mindweave.infrastructure.ai.ai_model import get_ai_model
from mindweave.infrastructure.ai.prompts import KNOWLEDGE_WEAVER_INSTRUCTIONS


def get_aid_agent(instructions: str) -> Agent[None, str]:
    return Agent(
        get_ai_model(),
        output_type=str,
        instructions=instructions,
    )


class MindmapNodeOutput(BaseModel):
    key: str = Field(..., description="Unique identifier of the node within this mind map")
    title: str = Field(..., description="Concise name of the concept")
    summary: str = Field(..., description="Two or three sentences explaining the concept")


class MindmapConnectionOutput(BaseModel):
    source: str = Field(..., description="Key of the broader or prerequisite concept")
    target: str = Field(..., description="Key of the more specific or dependent concept")


class MindmapOutput(BaseModel):
    nodes: list[MindmapNodeOutput]
    connections: list[MindmapConnectionOutput] = Field(default_factory=list)


def get_knowledge_weaver_agent() -> Agent[None, MindmapOutput]:
    return Agent(
        get_ai_model(),
        output_type=MindmapOutput,
        instructions=KNOWLEDGE_WEAVER_INSTRUCTIONS,
    )
