"""Config – developer flag overrides read from the environment."""
from __future__ import annotations

import os
from typing import Mapping


class EnvFlagOverrideLoader:
    """Collect ``<prefix><FLAG_NAME>=<value>`` variables into ``{FLAG_NAME: raw}``.

    Values stay raw strings; the flag factory coerces them against each
    flag's type.  Empty values are ignored.
    """

    def __init__(self, prefix: str = "LAUNCHER_FLAG_") -> None:
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def load(self, environ: Mapping[str, str] | None = None) -> dict[str, str]:
        environ = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for key, raw in environ.items():
            if not key.startswith(self._prefix):
                continue
            name = key[len(self._prefix):]
            if name and raw.strip():
                overrides[name] = raw.strip()
        return overrides


__all__ = ["EnvFlagOverrideLoader"]
