from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from mindweave.application.aids.use_cases.fetch_or_create_aid_use_case import (
    FetchOrCreateAidUseCase,
)
from mindweave.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from mindweave.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from mindweave.application.mindmaps.use_cases.get_mindmap_use_case import GetMindmapUseCase
from mindweave.application.mindmaps.use_cases.weave_mindmap_use_case import WeaveMindmapUseCase
from mindweave.application.ownership.ownership_verifier import OwnershipVerifier
from mindweave.application.progress.use_cases.get_aggregated_progress_use_case import (
    GetAggregatedProgressUseCase,
)
from mindweave.application.progress.use_cases.log_progress_use_case import LogProgressUseCase
from mindweave.application.sources.use_cases.get_sources_use_case import GetSourcesUseCase
from mindweave.application.sources.use_cases.ingest_source_use_case import IngestSourceUseCase
from mindweave.config import get_settings
from mindweave.infrastructure.ai.ai_service import AIGenerationService, AIKnowledgeWeaverService
from mindweave.infrastructure.aids.repositories.aid_repository import AidRepository
from mindweave.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from mindweave.infrastructure.identity.repositories.user_repository import UserRepository
from mindweave.infrastructure.identity.services import PasswordServiceAdapter
from mindweave.infrastructure.mindmaps.repositories.edge_repository import EdgeRepository
from mindweave.infrastructure.mindmaps.repositories.node_repository import NodeRepository
from mindweave.infrastructure.progress.repositories.progress_repository import (
    ProgressRepository,
)
from mindweave.infrastructure.queue.redis_job_queue import RedisJobQueue
from mindweave.infrastructure.sources.repositories.source_repository import SourceRepository
from mindweave.infrastructure.sources.services.text_extraction_service import (
    TextExtractionService,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    source_repository = providers.Factory(SourceRepository, db=db)
    node_repository = providers.Factory(NodeRepository, db=db)
    edge_repository = providers.Factory(EdgeRepository, db=db)
    aid_repository = providers.Factory(AidRepository, db=db)
    progress_repository = providers.Factory(ProgressRepository, db=db)
    uow = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # External services (no db)
    password_service = providers.Singleton(PasswordServiceAdapter)
    generation_service = providers.Singleton(AIGenerationService)
    knowledge_weaver_service = providers.Singleton(AIKnowledgeWeaverService)
    text_extraction_service = providers.Singleton(
        TextExtractionService, timeout_seconds=settings.provided.SCRAPE_TIMEOUT_SECONDS
    )
    job_queue = providers.Singleton(
        RedisJobQueue,
        redis_url=settings.provided.REDIS_URL,
        queue_name=settings.provided.MINDMAP_QUEUE_NAME,
    )

    ownership_verifier = providers.Factory(
        OwnershipVerifier,
        node_repository=node_repository,
        source_repository=source_repository,
    )

    # Identity use cases
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )

    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        uow=uow,
    )

    # Sources module use cases
    ingest_source_use_case = providers.Factory(
        IngestSourceUseCase,
        source_repository=source_repository,
        text_extraction_service=text_extraction_service,
        job_queue=job_queue,
        uow=uow,
    )

    get_sources_use_case = providers.Factory(
        GetSourcesUseCase,
        source_repository=source_repository,
        ownership_verifier=ownership_verifier,
    )

    # Mindmaps module use cases
    get_mindmap_use_case = providers.Factory(
        GetMindmapUseCase,
        node_repository=node_repository,
        edge_repository=edge_repository,
        ownership_verifier=ownership_verifier,
    )

    weave_mindmap_use_case = providers.Factory(
        WeaveMindmapUseCase,
        source_repository=source_repository,
        node_repository=node_repository,
        edge_repository=edge_repository,
        knowledge_weaver=knowledge_weaver_service,
        uow=uow,
    )

    # Aids module use cases
    fetch_or_create_aid_use_case = providers.Factory(
        FetchOrCreateAidUseCase,
        aid_repository=aid_repository,
        ownership_verifier=ownership_verifier,
        generation_service=generation_service,
        uow=uow,
    )

    # Progress module use cases
    log_progress_use_case = providers.Factory(
        LogProgressUseCase,
        progress_repository=progress_repository,
        node_repository=node_repository,
        ownership_verifier=ownership_verifier,
        uow=uow,
    )

    get_aggregated_progress_use_case = providers.Factory(
        GetAggregatedProgressUseCase,
        source_repository=source_repository,
        node_repository=node_repository,
        progress_repository=progress_repository,
        source_query_limit=settings.provided.PROGRESS_SOURCE_QUERY_LIMIT,
    )


# Initialize container
container = Container()
