# File: spiderseek/injector.py
"""
Injector: decides per page whether the analytics tag goes in, and splices it
before ``</head>``.

The head lookup is a single case-insensitive regex search, not HTML parsing,
and the de-dupe check is a plain substring test on ``id="<tag_id>"``.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence
from urllib.parse import quote

from spiderseek.config import InjectorConfig
from spiderseek.logger import logger
from spiderseek.matchers import first_match
from spiderseek.models import FileOutcome, FileRecord, InjectionStatus

__all__: Sequence[str] = (
    "BASE_URL",
    "escape_attr",
    "build_script_tag",
    "has_tag",
    "splice_script",
    "Injector",
)

BASE_URL = "https://spiderseekjs.com/spiderseek.js"

_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_ATTR_ESCAPES = {'"': "&quot;", "&": "&amp;", "<": "&lt;", ">": "&gt;"}
_ATTR_ESCAPE_RE = re.compile(r'["&<>]')
# unreserved characters of encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def escape_attr(value: str) -> str:
    """Escape ``" & < >`` for use inside a double-quoted attribute."""
    return _ATTR_ESCAPE_RE.sub(lambda m: _ATTR_ESCAPES[m.group(0)], value)


def build_script_tag(site_id: str, tag_id: str) -> str:
    return (
        f'<script id="{escape_attr(tag_id)}" async '
        f'src="{BASE_URL}?id={quote(site_id, safe=_URI_COMPONENT_SAFE)}"></script>'
    )


def has_tag(html: str, tag_id: str) -> bool:
    """Literal ``id="..."`` / ``id='...'`` check, plus the escaped form this module writes."""
    if f'id="{tag_id}"' in html or f"id='{tag_id}'" in html:
        return True
    return f'id="{escape_attr(tag_id)}"' in html


def splice_script(html: str, script: str) -> str:
    """Insert *script* right before the first ``</head>``; prepend it when there is none."""
    match = _HEAD_CLOSE_RE.search(html)
    if match is None:
        return script + "\n" + html
    idx = match.start()
    lead = "" if idx > 0 and html[idx - 1] == "\n" else "\n"
    return html[:idx] + lead + script + "\n" + html[idx:]


class Injector:
    """Applies one configuration to individual built pages."""

    def __init__(self, config: InjectorConfig) -> None:
        self.config = config
        self.script = build_script_tag(config.site_id, config.tag_id)

    def excluded_by(self, url_path: str) -> Optional[str]:
        matcher = first_match(self.config.exclude, url_path)
        return None if matcher is None else str(matcher)

    def process(self, record: FileRecord) -> FileOutcome:
        """Run exclusion, de-dupe, splice and write-back for one file.

        I/O and decoding errors are logged and returned as a FAILED outcome.
        """
        matched = self.excluded_by(record.url_path)
        if matched is not None:
            logger.debug("Excluded %s (matched %s)", record.url_path, matched)
            return FileOutcome(record, InjectionStatus.EXCLUDED, matched_by=matched)

        try:
            html = _read_text(record.path)
            if has_tag(html, self.config.tag_id):
                logger.debug("Already tagged: %s", record.url_path)
                return FileOutcome(record, InjectionStatus.ALREADY_TAGGED)
            _write_text(record.path, splice_script(html, self.script))
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to inject script into %s: %s", record.path, exc)
            return FileOutcome(record, InjectionStatus.FAILED, error=str(exc))

        logger.debug("Injected script into %s", record.url_path)
        return FileOutcome(record, InjectionStatus.INJECTED)


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF files byte-stable
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
