from __future__ import annotations

import os
from dataclasses import dataclass, asdict

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ViewSettings:
    """Process-level config for the view core."""

    log_level: str = "INFO"
    trace_dispatch: bool = False  # log every broadcast at DEBUG

    @classmethod
    def from_env(cls) -> "ViewSettings":
        # .env never overrides variables already set in the environment
        load_dotenv(".env", override=False)
        return cls(
            log_level=os.getenv("VIEWCORE_LOG_LEVEL", "INFO").upper(),
            trace_dispatch=os.getenv("VIEWCORE_TRACE_DISPATCH", "").strip().lower() in _TRUTHY,
        )

    def to_dict(self):
        return asdict(self)
