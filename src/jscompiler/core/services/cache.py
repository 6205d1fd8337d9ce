from __future__ import annotations

"""
Content-Addressed File Cache.

Stores minified output as plain files named after a hash of the raw
(pre-minification) source, so callers may serve a cached file directly from
disk. Read problems degrade to a cache miss; a missing cache directory or a
failed write is reported as ``CacheError``.
"""

import glob
import hashlib
import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional, Union

from jscompiler.domain.errors import CacheError
from jscompiler.infra.fs import DEFAULT_ENCODING, SOURCE_ERRORS, read_source, write_text

logger = logging.getLogger(__name__)

CACHE_FILE_EXT = ".jsc.js"
MATCH = "match"
NOMATCH = "nomatch"

# Number of digest bytes folded into the module name
_NAME_DIGEST_BYTES = 8


@dataclass(frozen=True)
class CacheLookup:
    """
    Outcome of a cache lookup.

    Attributes:
        status: ``"match"`` or ``"nomatch"``.
        path: File backing the entry.
        content: Cached text, only when the caller requested it.
    """
    status: str
    path: str
    content: Optional[str] = None

    @property
    def hit(self) -> bool:
        return self.status == MATCH


class CacheService:
    """
    Directory of minified artifacts keyed by module name.

    Each entry lives in ``<cache_dir>/<module>.jsc.js``.
    """

    def __init__(self, cache_dir: Optional[str], encoding: str = DEFAULT_ENCODING) -> None:
        """
        Args:
            cache_dir: Directory holding cache files. ``None`` leaves the cache
                unusable: every load or store raises ``CacheError``.
            encoding: Encoding of cached files.
        """
        self._cache_dir = os.path.abspath(cache_dir) if cache_dir else None
        self._encoding = encoding
        self._lock = threading.Lock()

    @property
    def cache_dir(self) -> Optional[str]:
        return self._cache_dir

    def path_for(self, module: str) -> str:
        """Return the file path of ``module`` inside the cache directory."""
        return os.path.join(self._require_dir(), module + CACHE_FILE_EXT)

    def load(self, module: str, request_content: bool = True) -> CacheLookup:
        """
        Look up a cached artifact.

        Args:
            module: Module name from :meth:`compute_module_name`.
            request_content: If False, only existence is checked.

        Returns:
            CacheLookup: Match (with content when requested) or miss.

        Raises:
            CacheError: No cache directory is configured.
        """
        path = self.path_for(module)

        with self._lock:
            if not os.path.isfile(path):
                logger.debug(f"CacheService: Miss for {module}")
                return CacheLookup(NOMATCH, path)

            if not request_content:
                logger.debug(f"CacheService: Hit for {module} (content not requested)")
                return CacheLookup(MATCH, path)

            try:
                content = read_source(path, self._encoding)
            except OSError as e:
                logger.warning(f"CacheService: Read error for {module}: {e}")
                return CacheLookup(NOMATCH, path)

        logger.debug(f"CacheService: Hit for {module}")
        return CacheLookup(MATCH, path, content)

    def store(self, module: str, content: str) -> str:
        """
        Persist an artifact, replacing any previous entry.

        Args:
            module: Module name from :meth:`compute_module_name`.
            content: Text to store.

        Returns:
            str: Path of the written file.

        Raises:
            CacheError: No cache directory is configured or the write failed.
        """
        path = self.path_for(module)

        try:
            with self._lock:
                write_text(path, content, self._encoding)
        except OSError as e:
            logger.error(f"CacheService: Write error for {os.path.basename(path)}: {e}")
            raise CacheError(f"Cannot write cache file {path}: {e}") from e

        logger.debug(f"CacheService: Stored {module} ({len(content)} chars)")
        return path

    def purge_all(self) -> int:
        """
        Delete every cached artifact in the directory.

        Returns:
            int: Number of files removed.
        """
        pattern = os.path.join(self._require_dir(), "*" + CACHE_FILE_EXT)
        removed = 0

        with self._lock:
            for path in glob.glob(pattern):
                try:
                    os.remove(path)
                    removed += 1
                except OSError as e:
                    logger.warning(f"CacheService: Could not delete {path}: {e}")

        logger.info(f"CacheService: Purged {removed} cached file(s).")
        return removed

    @staticmethod
    def compute_module_name(code: Union[str, bytes]) -> str:
        """
        Derive a deterministic, letters-only module name from raw source.

        The first bytes of the SHA-256 digest are read as a decimal number
        whose digits 0-9 are spelled as the letters A-J.

        Args:
            code: Source text or raw bytes, before minification.

        Returns:
            str: Module name such as ``"DJABHEG..."``.
        """
        if isinstance(code, str):
            code = code.encode(DEFAULT_ENCODING, errors=SOURCE_ERRORS)
        digest = hashlib.sha256(code).digest()
        number = int.from_bytes(digest[:_NAME_DIGEST_BYTES], "big")
        return "".join(chr(ord("A") + int(d)) for d in str(number))

    def _require_dir(self) -> str:
        if not self._cache_dir:
            raise CacheError("No cache directory configured (file_cache_dir).")
        return self._cache_dir
