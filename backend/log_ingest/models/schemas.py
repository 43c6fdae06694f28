import math
from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter
from typing import Dict

# documento di log: qualsiasi oggetto JSON, nessuno schema
LogDocument = Dict[str, JsonValue]
log_document = TypeAdapter(LogDocument, config=ConfigDict(allow_inf_nan=False))

# BSON salva interi solo fino a 8 byte
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

def _json_number(v):
    """NaN/Infinity non sono JSON; interi oltre int64 diventano double come in un decoder float64."""
    if isinstance(v, bool):
        return v
    if isinstance(v, float):
        if not math.isfinite(v):
            raise ValueError("non-finite number is not valid JSON")
        return v
    if isinstance(v, int) and not INT64_MIN <= v <= INT64_MAX:
        try:
            return float(v)
        except OverflowError:
            raise ValueError("number out of range")
    if isinstance(v, dict):
        return {k: _json_number(x) for k, x in v.items()}
    if isinstance(v, list):
        return [_json_number(x) for x in v]
    return v

def parse_log_document(body: str) -> LogDocument:
    """Body → documento; ValueError (anche ValidationError) se non è un oggetto JSON valido."""
    return _json_number(log_document.validate_json(body))

class ProxyRequest(BaseModel):
    method: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    query_parameters: Dict[str, str] = Field(default_factory=dict)
    body: str = ""

class ProxyResponse(BaseModel):
    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
