"""Repository for study aids, one table per aid kind."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindweave.domain.aids.entities.aid import Aid
from mindweave.domain.aids.entities.aid_kind import AidKind, aid_kind_policy
from mindweave.domain.aids.exceptions import AidAlreadyExistsError
from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.infrastructure.aids.mappers.aid_mapper import AidMapper
from mindweave.models import AidMixin, Flashcards, Module, StudyPlan, Summary

logger = structlog.get_logger(__name__)

_MODELS: dict[str, type[AidMixin]] = {
    model.__tablename__: model for model in (Summary, Module, Flashcards, StudyPlan)
}


def aid_model(kind: AidKind) -> type[AidMixin]:
    """ORM model of the table the kind's policy names."""
    return _MODELS[aid_kind_policy(kind).collection]


class AidRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AidMapper()

    def find_by_node(self, kind: AidKind, node_id: NodeId) -> Aid | None:
        model = aid_model(kind)
        stmt = select(model).where(model.node_id == node_id.value).order_by(model.id).limit(1)
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(kind, orm_model) if orm_model else None

    def add(self, aid: Aid) -> Aid:
        """
        Stage a new aid.

        Raises:
            AidAlreadyExistsError: If the node already has an aid of this kind
        """
        orm_model = self.mapper.to_orm(aid, aid_model(aid.kind)())
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("aid_unique_violation", kind=aid.kind.value, node_id=aid.node_id.value)
            raise AidAlreadyExistsError(aid.kind.value, aid.node_id.value) from e
        return self.mapper.to_domain(aid.kind, orm_model)

    def update(self, aid: Aid) -> Aid:
        orm_model = self.db.get(aid_model(aid.kind), aid.id.value)
        if orm_model is None:
            raise ValueError(f"{aid.kind.value} aid {aid.id.value} not found")
        self.mapper.to_orm(aid, orm_model)
        self.db.flush()
        return self.mapper.to_domain(aid.kind, orm_model)
