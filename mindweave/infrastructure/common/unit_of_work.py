"""SQLAlchemy implementation of the Unit of Work port."""

import structlog
from sqlalchemy.orm import Session

from mindweave.application.common.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the session shared by the repositories."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            logger.warning("unit_of_work_commit_failed", exc_info=True)
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()
