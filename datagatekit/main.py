# datagatekit/main.py
import logging
from typing import Optional
import uvicorn
from fastapi import FastAPI
from datagatekit.api.endpoints import DataGateAPI
from datagatekit.config import GateSettings
from datagatekit.logging_setup import setup_logging
from datagatekit.orchestrator import GateOrchestrator

logger = logging.getLogger(__name__)


def create_app(orchestrator: Optional[GateOrchestrator] = None,
               settings: Optional[GateSettings] = None) -> FastAPI:
    """Build the FastAPI app around one orchestrator."""
    if orchestrator is None:
        orchestrator = GateOrchestrator(settings or GateSettings.from_env())
    app = FastAPI(title="Datagate API", version="0.1.0")
    app.state.orchestrator = orchestrator

    gate_api = DataGateAPI(orchestrator)
    app.include_router(gate_api.router)

    return app


def main():
    settings = GateSettings.from_env()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Datagate server starting up...")
    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
