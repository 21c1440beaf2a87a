import os
import ssl
from typing import TYPE_CHECKING, Any, Optional

from .constants import ENV_REQUESTS_CA_BUNDLE, ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE

if TYPE_CHECKING:
    from .._config import Config


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
        requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
        ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(config: Optional["Config"] = None) -> dict[str, Any]:
    """Build keyword arguments for ``httpx.Client`` / ``httpx.AsyncClient``.

    Args:
        config: Client settings. Defaults to ``Config()``.

    Returns:
        dict: ``verify`` and ``follow_redirects``, plus ``timeout`` when one is
        configured. Without a timeout the httpx default applies.
    """
    if config is None:
        from .._config import Config

        config = Config()

    kwargs: dict[str, Any] = {
        "verify": create_ssl_context() if config.verify_ssl else False,
        "follow_redirects": config.follow_redirects,
    }
    if config.timeout is not None:
        kwargs["timeout"] = config.timeout
    return kwargs
