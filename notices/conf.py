"""Runtime settings for notice rendering."""

from __future__ import annotations

from django.conf import settings

DEFAULT_PANDOC_FORMAT = "markdown+markdown_attribute+raw_html+pipe_tables+footnotes+smart"


def pandoc_format() -> str:
    raw = getattr(settings, "NOTICES_PANDOC_FORMAT", DEFAULT_PANDOC_FORMAT)
    return str(raw).strip() or DEFAULT_PANDOC_FORMAT


def pandoc_extra_args() -> list[str]:
    return [str(arg) for arg in getattr(settings, "NOTICES_PANDOC_EXTRA_ARGS", [])]


def sanitize_enabled() -> bool:
    return bool(getattr(settings, "NOTICES_SANITIZE", True))
