# /ministry-dashboard-backend/app/services/image_service.py

"""
Helpers for validating member photo uploads and producing local previews.

The helpers accept any file-like candidate exposing a declared `content_type`
and a `size` (FastAPI's `UploadFile` qualifies). None of them raise on a bad
upload; callers branch on the returned value.
"""

import logging
import threading
import time
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

VALID_IMAGE_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp"})
BYTES_PER_MB = 1024 * 1024
# Member photo bucket limit.
MAX_IMAGE_SIZE_MB = 5
PREVIEW_SCHEME = "blob:"
# Bounds on the live preview registry.
MAX_PREVIEWS = 5
MAX_PREVIEW_BYTES = MAX_PREVIEWS * MAX_IMAGE_SIZE_MB * BYTES_PER_MB
PREVIEW_TTL_SECONDS = 10 * 60


@dataclass(frozen=True)
class PreviewEntry:
    content: bytes
    content_type: Optional[str]
    created_at: float


def _source(file):
    # UploadFile wraps the real stream in `.file`.
    source = getattr(file, "file", None)
    return source if source is not None else file


def _read_bytes(file) -> bytes:
    source = _source(file)
    if hasattr(source, "seek"):
        source.seek(0)
    data = source.read()
    if hasattr(source, "seek"):
        source.seek(0)
    return data or b""


def _file_size(file) -> int:
    size = getattr(file, "size", None)
    if size is not None:
        return size
    source = _source(file)
    position = source.tell()
    source.seek(0, 2)
    size = source.tell()
    source.seek(position)
    return size


class PreviewRegistry:
    """
    Holds the bytes behind every live preview reference.

    A reference stays valid until it is revoked, expires after `ttl_seconds`,
    or is evicted to keep the registry within `max_entries` and `max_bytes`.
    Eviction drops the oldest references first. Callers that create a
    reference are still responsible for revoking it when the preview is torn
    down or replaced.
    """

    def __init__(
        self,
        max_entries: int = MAX_PREVIEWS,
        max_bytes: int = MAX_PREVIEW_BYTES,
        ttl_seconds: float = PREVIEW_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.max_bytes = max_bytes
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # Insertion order is creation order, oldest first.
        self._entries: "OrderedDict[str, PreviewEntry]" = OrderedDict()
        self._total_bytes = 0
        self._lock = threading.Lock()

    def _drop(self, ref: str) -> Optional[PreviewEntry]:
        entry = self._entries.pop(ref, None)
        if entry is not None:
            self._total_bytes -= len(entry.content)
        return entry

    def _evict(self) -> None:
        # Caller holds the lock.
        now = self._clock()
        while self._entries:
            oldest_ref, oldest = next(iter(self._entries.items()))
            expired = now - oldest.created_at >= self.ttl_seconds
            over_capacity = len(self._entries) > self.max_entries or self._total_bytes > self.max_bytes
            if not (expired or over_capacity):
                break
            self._drop(oldest_ref)
            logger.debug("Evicted image preview %s", oldest_ref)

    def create(self, file) -> str:
        ref = f"{PREVIEW_SCHEME}{uuid.uuid4()}"
        entry = PreviewEntry(
            content=_read_bytes(file),
            content_type=getattr(file, "content_type", None),
            created_at=self._clock(),
        )
        with self._lock:
            self._entries[ref] = entry
            self._total_bytes += len(entry.content)
            self._evict()
        return ref

    def get(self, ref: str) -> Optional[PreviewEntry]:
        with self._lock:
            self._evict()
            return self._entries.get(ref)

    def revoke(self, ref: str) -> bool:
        with self._lock:
            return self._drop(ref) is not None

    @property
    def total_bytes(self) -> int:
        with self._lock:
            return self._total_bytes

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @contextmanager
    def preview(self, file) -> Iterator[str]:
        """Creates a preview reference that is revoked when the block exits."""
        ref = self.create(file)
        try:
            yield ref
        finally:
            self.revoke(ref)


# The process-wide registry used by the uploads router.
preview_registry = PreviewRegistry()


def _registry(registry: Optional[PreviewRegistry]) -> PreviewRegistry:
    return registry if registry is not None else preview_registry


def create_image_preview(file, registry: Optional[PreviewRegistry] = None) -> str:
    """
    Creates a preview URL for an image file.

    Returns an opaque `blob:` reference. Release it with
    `revoke_image_preview` once the preview is no longer shown.
    """
    return _registry(registry).create(file)


def revoke_image_preview(ref: str, registry: Optional[PreviewRegistry] = None) -> bool:
    return _registry(registry).revoke(ref)


def is_valid_image(file) -> bool:
    """
    True only when the declared MIME type is one of VALID_IMAGE_TYPES.
    The file content is never inspected.
    """
    content_type = getattr(file, "content_type", None)
    return isinstance(content_type, str) and content_type in VALID_IMAGE_TYPES


def get_file_size_in_mb(file) -> float:
    """Gets the file size in MB. No rounding and no upper bound is applied."""
    return _file_size(file) / BYTES_PER_MB
