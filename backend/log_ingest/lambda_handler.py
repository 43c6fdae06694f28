from mangum import Mangum
from .app import create_lambda_app
from .controllers.log_controller import LogController

def make_lambda_handler(controller: LogController) -> Mangum:
    """Entry point API Gateway (REST v1 e HTTP API v2) tramite Mangum."""
    return Mangum(create_lambda_app(controller), lifespan="off")
