from mindweave.infrastructure.mindmaps.schemas.mindmap_schemas import (
    EdgeResponse,
    MindmapResponse,
    NodeResponse,
)

__all__ = ["EdgeResponse", "MindmapResponse", "NodeResponse"]
