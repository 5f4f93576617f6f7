"""Reporter settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from hf_common.config import parse_bool_env, parse_int_env, parse_str_env

ENV_PREFIX = "HOSTFETCH_"


class ReporterSettings(BaseModel):
    """Runtime knobs; there is no configuration file."""

    log_level: str | int = Field(default="WARNING", description="Logging level name or number")
    log_json: bool = Field(default=False, description="Render diagnostics as JSON lines")
    log_file: Optional[str] = Field(default=None, description="Also write diagnostics to this file")
    strict_exit: bool = Field(
        default=False, description="Exit with status 1 when collection fails"
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReporterSettings":
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw_level = parse_str_env(env.get(f"{ENV_PREFIX}LOG_LEVEL"))
        if raw_level is not None:
            numeric = parse_int_env(raw_level)
            values["log_level"] = numeric if numeric is not None else raw_level.upper()

        log_json = parse_bool_env(env.get(f"{ENV_PREFIX}LOG_JSON"))
        if log_json is not None:
            values["log_json"] = log_json

        log_file = parse_str_env(env.get(f"{ENV_PREFIX}LOG_FILE"))
        if log_file is not None:
            values["log_file"] = log_file

        strict_exit = parse_bool_env(env.get(f"{ENV_PREFIX}STRICT_EXIT"))
        if strict_exit is not None:
            values["strict_exit"] = strict_exit

        return cls(**values)
