import os
import ssl
from functools import lru_cache
from typing import Any, Optional

_CA_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


@lru_cache(maxsize=1)
def create_ssl_context() -> ssl.SSLContext:
    """SSL context trusting the system store, or certifi when truststore is absent.

    ``SSL_CERT_FILE``, ``REQUESTS_CA_BUNDLE`` and ``SSL_CERT_DIR`` are honoured
    in the certifi case.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_ENV_VARS) if path), certifi.where()
        )
        return ssl.create_default_context(
            cafile=cafile, capath=_env_path("SSL_CERT_DIR")
        )


def get_httpx_client_kwargs(timeout_ms: float) -> dict[str, Any]:
    """Default keyword arguments for the httpx clients built by the SDK.

    Proxies are picked up from the standard environment variables by httpx.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": timeout_ms / 1000,
        "follow_redirects": True,
    }
