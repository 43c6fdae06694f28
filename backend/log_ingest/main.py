import logging
import uvicorn
from .app import configure_logging, create_app
from .controllers.log_controller import LogController
from .infra.db import LOGS_COLLECTION, connect, logs_collection
from .infra.settings import get_settings, is_dev
from .lambda_handler import make_lambda_handler

logger = logging.getLogger(__name__)

def bootstrap() -> LogController:
    s = get_settings()
    configure_logging(s.LOG_LEVEL)
    db = connect(s)
    logger.info("MongoDB database '%s' ready, collection '%s'", s.MONGODB_NAME, LOGS_COLLECTION)
    return LogController(logs_collection(db), expose_error_details=s.EXPOSE_ERROR_DETAILS)

# init a freddo: la Lambda importa questo modulo e usa `handler`
controller = bootstrap()
handler = make_lambda_handler(controller)

def main():
    s = get_settings()
    if not is_dev(s):
        logger.info("ENVIRONMENT != dev: use log_ingest.main.handler as the Lambda entry point")
        return
    logger.info("Dev server on http://%s:%d/lambda", s.DEV_HOST, s.DEV_PORT)
    uvicorn.run(create_app(controller), host=s.DEV_HOST, port=s.DEV_PORT)

if __name__ == "__main__":
    main()
