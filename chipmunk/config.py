from __future__ import annotations
import os

# Defaults
_DEFAULT_MAX_DEPTH = 1000
_DEFAULT_MAX_PARSE_DEPTH = 200
_DEFAULT_PROMPT = "chipmunk> "


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    return int_from_env('CHIPMUNK_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_max_parse_depth() -> int:
    return int_from_env('CHIPMUNK_MAX_PARSE_DEPTH', _DEFAULT_MAX_PARSE_DEPTH)


def get_prompt() -> str:
    return os.environ.get('CHIPMUNK_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str | None:
    # unset means the REPL leaves logging unconfigured
    raw = os.environ.get('CHIPMUNK_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else None
