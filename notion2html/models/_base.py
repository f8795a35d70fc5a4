from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    NOTION2HTML_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("NOTION2HTML_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class NotionModel(BaseModel):
    """
    Project-wide base model.

    Exports carry plenty of bookkeeping fields (versions, timestamps, space
    ids) that the renderer never reads, so the default is extra='ignore'.
    Switch at runtime by setting an env var before import:
      export NOTION2HTML_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        frozen=True,
    )


__all__ = ["NotionModel", "_env_extra_mode"]
