"""Domain service for turning draft connections into node-id pairs."""

from dataclasses import dataclass

from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.domain.mindmaps.entities.mindmap_draft import ConnectionDraft


@dataclass
class ResolvedConnections:
    pairs: list[tuple[NodeId, NodeId]]
    dropped: list[ConnectionDraft]


class MindmapDraftResolver:
    """Stateless domain service."""

    @staticmethod
    def resolve(
        connections: tuple[ConnectionDraft, ...] | list[ConnectionDraft],
        node_ids_by_key: dict[str, NodeId],
    ) -> ResolvedConnections:
        """
        Map draft connections onto persisted node ids.

        Connections naming an unknown key, connecting a node to itself, or
        repeating an earlier pair are dropped and reported back so the caller
        can log them.
        """
        pairs: list[tuple[NodeId, NodeId]] = []
        dropped: list[ConnectionDraft] = []
        seen: set[tuple[NodeId, NodeId]] = set()

        for connection in connections:
            source = node_ids_by_key.get(connection.source_key)
            target = node_ids_by_key.get(connection.target_key)
            if source is None or target is None or source == target:
                dropped.append(connection)
                continue
            if (source, target) in seen:
                dropped.append(connection)
                continue
            seen.add((source, target))
            pairs.append((source, target))

        return ResolvedConnections(pairs=pairs, dropped=dropped)
