import json
import logging
import os
import threading
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from app.core.config import settings
from app.schemas.document_schema import SiteDocument


logger = logging.getLogger("uvicorn.error")


class DocumentStore:
    """Loads and persists the single site document.

    A missing file and an unreadable file both load as an empty document.
    Write errors are not caught and fail the calling request.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        # Held around a whole load/mutate/save cycle by the resource managers
        self.lock = threading.RLock()

    def load(self) -> SiteDocument:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No site document at %s yet; starting empty", self.path)
            return SiteDocument()
        except OSError as exc:
            logger.warning("Site document %s unreadable, using empty document: %s", self.path, exc)
            return SiteDocument()
        try:
            return SiteDocument.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as exc:
            logger.warning("Site document %s is corrupt, using empty document: %s", self.path, exc)
            return SiteDocument()

    def save(self, doc: SiteDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        temp_path.write_text(
            json.dumps(doc.to_json_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        os.replace(temp_path, self.path)


_store: Optional[DocumentStore] = None


def get_document_store() -> DocumentStore:
    global _store
    if _store is None:
        _store = DocumentStore(settings.DATA_FILE)
    return _store
