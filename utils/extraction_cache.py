# This project was developed with assistance from AI tools.
"""
SQLite-based cache for LLM extraction results.

Keyed by the SHA256 of the uploaded file plus the document kind, so the same
PDF uploaded again skips the model call.
"""
import hashlib
import json
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from config import config


class ExtractionCache:
    """
    SQLite-based cache for extraction results.

    Cache keys are SHA256 hashes of file contents, making lookups O(1) after
    the initial hash computation.
    """

    def __init__(self, cache_path: str | Path = ".extraction_cache.db"):
        self.cache_path = Path(cache_path)
        self._init_db()

    def _init_db(self) -> None:
        """Initialize the SQLite database schema."""
        with sqlite3.connect(self.cache_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS extraction_cache (
                    content_hash TEXT NOT NULL,
                    doc_type TEXT NOT NULL,
                    file_name TEXT,
                    extraction_data TEXT,
                    created_at TEXT,
                    last_accessed TEXT,
                    PRIMARY KEY (content_hash, doc_type)
                )
            """)
            conn.commit()

    @staticmethod
    def compute_hash(file_path: str | Path) -> str:
        """Hex-encoded SHA256 of the file contents."""
        sha256 = hashlib.sha256()
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                sha256.update(chunk)
        return sha256.hexdigest()

    def get(self, content_hash: str, doc_type: str) -> Optional[dict]:
        """
        Retrieve a cached extraction.

        Args:
            content_hash: SHA256 hash of the document
            doc_type: "contract" or "registry"

        Returns:
            The extracted JSON object if cached, None otherwise
        """
        with sqlite3.connect(self.cache_path) as conn:
            cursor = conn.execute(
                "SELECT extraction_data FROM extraction_cache WHERE content_hash = ? AND doc_type = ?",
                (content_hash, doc_type)
            )
            row = cursor.fetchone()

            if row and row[0]:
                conn.execute(
                    "UPDATE extraction_cache SET last_accessed = ? WHERE content_hash = ? AND doc_type = ?",
                    (datetime.now().isoformat(), content_hash, doc_type)
                )
                conn.commit()
                return json.loads(row[0])

        return None

    def store(self, content_hash: str, doc_type: str, file_name: str, data: dict) -> None:
        now = datetime.now().isoformat()
        with sqlite3.connect(self.cache_path) as conn:
            conn.execute("""
                INSERT INTO extraction_cache (content_hash, doc_type, file_name, extraction_data, created_at, last_accessed)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(content_hash, doc_type) DO UPDATE SET
                    extraction_data = excluded.extraction_data,
                    last_accessed = excluded.last_accessed
            """, (content_hash, doc_type, file_name, json.dumps(data, ensure_ascii=False), now, now))
            conn.commit()

    def get_stats(self) -> dict:
        with sqlite3.connect(self.cache_path) as conn:
            cursor = conn.execute("SELECT doc_type, COUNT(*) FROM extraction_cache GROUP BY doc_type")
            by_type = dict(cursor.fetchall())
        return {"total_documents": sum(by_type.values()), "by_type": by_type}

    def clear(self) -> int:
        """Clear all cached data. Returns the number of entries removed."""
        with sqlite3.connect(self.cache_path) as conn:
            cursor = conn.execute("SELECT COUNT(*) FROM extraction_cache")
            count = cursor.fetchone()[0]
            conn.execute("DELETE FROM extraction_cache")
            conn.commit()
        return count


_extraction_cache: ExtractionCache | None = None


def get_extraction_cache() -> ExtractionCache:
    """Shared cache on the configured database file, created on first use."""
    global _extraction_cache
    if _extraction_cache is None:
        _extraction_cache = ExtractionCache(config.EXTRACTION_CACHE_DB_PATH)
    return _extraction_cache
