import logging
from fastapi import FastAPI
from .controllers.dev_controller import router as dev_router
from .controllers.gateway_controller import router as gateway_router
from .controllers.log_controller import LogController

def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("pymongo").disabled = True
    logging.getLogger("pymongo.serverSelection").disabled = True
    logging.getLogger("pymongo.command").disabled = True

def _base_app(controller: LogController, title: str) -> FastAPI:
    # nessuna route oltre a quelle del controller: niente docs, niente redirect su "/"
    app = FastAPI(title=title, version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None,
                  redirect_slashes=False)
    app.state.log_controller = controller
    return app

def create_app(controller: LogController) -> FastAPI:
    """App locale (ENVIRONMENT=dev): espone solo /lambda."""
    app = _base_app(controller, "Log Ingest (dev)")
    app.include_router(dev_router)
    return app

def create_lambda_app(controller: LogController) -> FastAPI:
    """App servita da Mangum: ogni path dell'API Gateway va al controller."""
    app = _base_app(controller, "Log Ingest")
    app.include_router(gateway_router)
    return app
