import os
import ssl
from typing import Any, Dict, Optional

from .constants import ENV_DISABLE_SSL_VERIFY

_TRUTHY = ("1", "true", "yes", "on")


def expand_path(path: Optional[str]) -> Optional[str]:
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    return os.path.expanduser(os.path.expandvars(path))


def create_ssl_context() -> ssl.SSLContext:
    # System certificates through truststore, certifi bundle otherwise
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = (
            expand_path(os.environ.get("SSL_CERT_FILE"))
            or expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
            or certifi.where()
        )
        return ssl.create_default_context(
            cafile=cafile, capath=expand_path(os.environ.get("SSL_CERT_DIR"))
        )


def ssl_verification_disabled() -> bool:
    return os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in _TRUTHY


def get_httpx_client_kwargs(timeout: float = 30.0) -> Dict[str, Any]:
    """Get the httpx client configuration shared by the sync and async clients.

    Proxies (HTTP_PROXY, HTTPS_PROXY, NO_PROXY) are picked up by httpx itself.
    """
    return {
        "follow_redirects": True,
        "timeout": timeout,
        "verify": False if ssl_verification_disabled() else create_ssl_context(),
    }
