"""HTTP(S) proxy selection for repository downloads."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

ENV_HTTP_PROXY_KEYS = ("HTTP_PROXY", "http_proxy")
ENV_HTTPS_PROXY_KEYS = ("HTTPS_PROXY", "https_proxy")


@dataclass(frozen=True)
class ProxyConfig:
    """Proxy URLs used by the download client."""

    http_proxy: Optional[str] = None
    https_proxy: Optional[str] = None

    @classmethod
    def resolve(
        cls,
        http_proxy: Optional[str] = None,
        https_proxy: Optional[str] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ProxyConfig":
        """Build a config where explicit values take precedence over the environment."""
        env = os.environ if environ is None else environ
        return cls(
            http_proxy=http_proxy or _first_env_value(env, ENV_HTTP_PROXY_KEYS),
            https_proxy=https_proxy or _first_env_value(env, ENV_HTTPS_PROXY_KEYS),
        )

    @property
    def enabled(self) -> bool:
        return bool(self.http_proxy or self.https_proxy)

    def handler_mapping(self) -> Dict[str, str]:
        """Return the scheme mapping expected by `urllib.request.ProxyHandler`.

        A single configured proxy serves both schemes.
        """
        if not self.enabled:
            return {}
        http = self.http_proxy or self.https_proxy
        https = self.https_proxy or self.http_proxy
        return {"http": http, "https": https}  # type: ignore[dict-item]


def _first_env_value(environ: Mapping[str, str], keys: Sequence[str]) -> Optional[str]:
    for key in keys:
        value = environ.get(key)
        if value:
            return value
    return None


__all__ = ["ProxyConfig"]
