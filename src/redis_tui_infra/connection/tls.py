"""TLS option building for redis-py clients."""

from __future__ import annotations

import ssl
from pathlib import Path
from typing import Any

from redis_tui_core.exceptions import CAError, CertificateLoadError
from redis_tui_core.models.config import ConnectionConfig


def build_tls_options(config: ConnectionConfig) -> dict[str, Any]:
    """Validate TLS material and return redis-py ``ssl_*`` keyword arguments.

    The certificate/key pair and CA bundle are loaded into a throwaway
    ``ssl.SSLContext`` so broken material is reported here, before any
    connection attempt.

    Raises:
        CertificateLoadError: cert and key were not given together, or the
            pair failed to load.
        CAError: the CA file is unreadable or holds no certificates.
    """
    context = ssl.create_default_context()
    if not config.tls_verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    _load_client_pair(context, config.tls_cert, config.tls_key)
    _load_ca(context, config.tls_ca_cert)

    return {
        "ssl": True,
        "ssl_cert_reqs": "required" if config.tls_verify else "none",
        "ssl_check_hostname": config.tls_verify,
        "ssl_certfile": str(config.tls_cert) if config.tls_cert else None,
        "ssl_keyfile": str(config.tls_key) if config.tls_key else None,
        "ssl_ca_certs": str(config.tls_ca_cert) if config.tls_ca_cert else None,
    }


def _load_client_pair(context: ssl.SSLContext, cert: Path | None, key: Path | None) -> None:
    if cert is None and key is None:
        return
    if cert is None or key is None:
        msg = "client certificate and key must be given together"
        raise CertificateLoadError(msg)
    try:
        context.load_cert_chain(certfile=cert, keyfile=key)
    except (OSError, ssl.SSLError) as exc:
        msg = f"failed to load client certificate: {exc}"
        raise CertificateLoadError(msg) from exc


def _load_ca(context: ssl.SSLContext, ca_cert: Path | None) -> None:
    if ca_cert is None:
        return
    try:
        context.load_verify_locations(cafile=ca_cert)
    except FileNotFoundError as exc:
        msg = f"failed to read CA certificate: {exc}"
        raise CAError(msg) from exc
    except (OSError, ssl.SSLError) as exc:
        msg = f"failed to parse CA certificate: {exc}"
        raise CAError(msg) from exc
