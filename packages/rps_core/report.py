# packages/rps_core/report.py
from __future__ import annotations

import logging
import os
from pathlib import Path

from rps_core.config_loader import DEFAULT_REPORT_FILE
from rps_core.session import Session

_LOG = logging.getLogger(__name__)


def write_report(session: Session, path: str | os.PathLike[str] = DEFAULT_REPORT_FILE) -> Path:
    """把会话战报写成 UTF-8 文本文件（覆盖写），返回实际路径。"""
    out = Path(path).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(session.render_report(), encoding="utf-8")
    _LOG.debug("wrote report for %d rounds to %s", len(session), out)
    return out


__all__ = ["write_report"]
