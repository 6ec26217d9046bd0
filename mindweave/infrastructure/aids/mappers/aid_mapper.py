"""Mapper for Aid ORM ↔ Domain conversion."""

from mindweave.domain.aids.entities.aid import Aid
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.common.value_objects.ids import AidId, NodeId, UserId
from mindweave.models import AidMixin


class AidMapper:
    def to_domain(self, kind: AidKind, orm_model: AidMixin) -> Aid:
        return Aid.create_with_id(
            id=AidId(orm_model.id),
            kind=kind,
            node_id=NodeId(orm_model.node_id),
            user_id=UserId(orm_model.user_id),
            content=orm_model.content,
            generated_at=orm_model.generated_at,
        )

    def to_orm(self, domain_entity: Aid, orm_model: AidMixin) -> AidMixin:
        """Copy entity state onto ``orm_model`` (a fresh or loaded row of the kind's table)."""
        if domain_entity.id.value != 0:
            orm_model.id = domain_entity.id.value
        orm_model.node_id = domain_entity.node_id.value
        orm_model.user_id = domain_entity.user_id.value
        orm_model.content = domain_entity.content
        orm_model.generated_at = domain_entity.generated_at
        return orm_model
