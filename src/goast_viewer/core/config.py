import os

DEFAULT_SOURCE_SUFFIX = ".go"

_SUFFIX_ENV_VAR = "GOAST_SOURCE_SUFFIX"


def normalize_suffix(suffix: str) -> str:
    normalized = suffix.strip()
    if not normalized:
        raise ValueError("Source suffix must not be empty.")
    if not normalized.startswith("."):
        normalized = f".{normalized}"
    return normalized


def resolve_source_suffix(suffix: str | None = None) -> str:
    """Return the source-file suffix to filter archive entries by.

    An explicit value wins over ``GOAST_SOURCE_SUFFIX``, which wins over ``.go``.
    """
    if suffix is not None:
        return normalize_suffix(suffix)
    env_value = os.getenv(_SUFFIX_ENV_VAR)
    if env_value is not None:
        return normalize_suffix(env_value)
    return DEFAULT_SOURCE_SUFFIX
