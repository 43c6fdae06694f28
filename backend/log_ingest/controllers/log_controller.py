from __future__ import annotations
import json
import logging
from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from ..models import log as log_model
from ..models.schemas import ProxyRequest, ProxyResponse, parse_log_document

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

PARSE_ERROR = "Failed to parse request JSON body"
INSERT_ERROR = "Failed to insert log into MongoDB."
SUCCESS_MSG = "Log successfully added!"

# soglia minima per pymongo.timeout quando la Lambda è quasi scaduta
_MIN_TIMEOUT_S = 0.001

def build_response(status_code: int, payload: dict) -> ProxyResponse:
    return ProxyResponse(status_code=status_code, headers=dict(JSON_HEADERS), body=json.dumps(payload))

def remaining_seconds(context) -> float | None:
    """Tempo residuo dell'invocazione (Lambda context), None se non c'è scadenza."""
    get_remaining = getattr(context, "get_remaining_time_in_millis", None)
    if get_remaining is None:
        return None
    return max(get_remaining() / 1000.0, _MIN_TIMEOUT_S)

class LogController:
    """Parse del body JSON e insert di un documento nella collection `logs`."""

    def __init__(self, logs: Collection, expose_error_details: bool = True):
        self.logs = logs
        self.expose_error_details = expose_error_details

    def handle(self, request: ProxyRequest, context=None) -> ProxyResponse:
        try:
            doc = parse_log_document(request.body)
        except ValueError as e:
            reason = e.errors()[0]["msg"] if isinstance(e, ValidationError) else str(e)
            logger.warning("[LOG] Rejected %s request: %s", request.method or "-", reason)
            return build_response(400, {"error": PARSE_ERROR})

        try:
            inserted_id = log_model.insert_log(self.logs, doc, timeout=remaining_seconds(context))
        except (PyMongoError, BSONError, OverflowError) as e:
            logger.exception("[LOG] Insert failed")
            if self.expose_error_details:
                return build_response(500, {"error": f"{INSERT_ERROR} Details: {e}"})
            return build_response(500, {"error": INSERT_ERROR})

        logger.info("[LOG] Stored document %s (%d fields)", inserted_id, len(doc))
        return build_response(201, {"msg": SUCCESS_MSG})
