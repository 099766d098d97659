from contextlib import asynccontextmanager
from typing import Optional
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from LYNK.config.settings import Settings
from LYNK.orchestrator import EnrichmentOrchestrator
from LYNK.storage import MemoryStorage
from LYNK.types import AgentInput
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/agent")


@router.post("/resource/enrich")
async def enrich_resource(agent_input: AgentInput, request: Request):
    orchestrator: EnrichmentOrchestrator = request.app.state.orchestrator
    try:
        context = await orchestrator.enrich(agent_input)
        return context.to_dict()
    except Exception as e:
        logger.exception("Error enriching resource")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to enrich resource",
                "message": str(e),
                "type": type(e).__name__,
            },
        )


async def health(request: Request):
    storage: Optional[MemoryStorage] = request.app.state.storage
    if storage is None:
        return {"status": "healthy", "storage": None}
    healthy, details = await storage.check_health()
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={"status": "healthy" if healthy else "unhealthy", "storage": details},
    )


def create_app(
    orchestrator: Optional[EnrichmentOrchestrator] = None,
    storage: Optional[MemoryStorage] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the HTTP app. With no orchestrator given, everything is wired from
    settings (environment / .env).
    """
    if orchestrator is None:
        from LYNK.factory import build_orchestrator

        orchestrator, storage = build_orchestrator(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if storage is not None and not await storage.initialize():
            logger.error("Memory storage failed to initialize")
        yield
        if storage is not None:
            storage.close()

    app = FastAPI(title="LYNK AI Engine", lifespan=lifespan)
    app.state.orchestrator = orchestrator
    app.state.storage = storage
    app.include_router(router)
    app.add_api_route("/health", health, methods=["GET"])
    return app
