from __future__ import annotations
import pymongo
from pymongo.collection import Collection
from .schemas import LogDocument

def insert_log(logs: Collection, doc: LogDocument, timeout: float | None = None):
    """Inserisce il documento così com'è; ritorna l'_id assegnato dal DB.

    `timeout` (secondi) limita l'intera operazione, None = nessun limite.
    """
    # copia: insert_one aggiunge _id al dict passato
    with pymongo.timeout(timeout):
        return logs.insert_one(dict(doc)).inserted_id
