from typing import Dict, Iterable, Tuple

def canonical_header(name: str) -> str:
    """`x-test` -> `X-Test` (ASGI passa i nomi in minuscolo)."""
    return "-".join(p[:1].upper() + p[1:].lower() for p in name.split("-"))

def first_values(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """Appiattisce coppie multi-valore tenendo solo la prima occorrenza di ogni chiave."""
    out: Dict[str, str] = {}
    for k, v in pairs:
        out.setdefault(k, v)
    return out

def flatten_headers(raw: Iterable[Tuple[bytes, bytes]], skip: Iterable[str] = ()) -> Dict[str, str]:
    skip = {canonical_header(s) for s in skip}
    pairs = ((canonical_header(k.decode("latin-1")), v.decode("latin-1")) for k, v in raw)
    return first_values((k, v) for k, v in pairs if k not in skip)
