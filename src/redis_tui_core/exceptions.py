"""Custom exception hierarchy for redis-tui."""

from __future__ import annotations


class RedisTuiError(Exception):
    """Base exception for all redis-tui errors."""


class ConfigurationError(RedisTuiError):
    """Raised when connection parameters cannot be resolved."""


class InvalidSchemeError(ConfigurationError):
    """Raised when a connection URL uses a scheme other than redis/rediss."""


class InvalidPortError(ConfigurationError):
    """Raised when a port is not an integer in 1-65535."""


class InvalidDatabaseError(ConfigurationError):
    """Raised when a database index is not a non-negative integer."""


class TLSBuildError(RedisTuiError):
    """Raised when TLS material cannot be loaded."""


class CertificateLoadError(TLSBuildError):
    """Raised when the client certificate/key pair fails to load."""


class CAError(TLSBuildError):
    """Raised when the CA certificate cannot be read or parsed."""


class ScanError(RedisTuiError):
    """Raised when a keyspace scan fails mid-iteration."""


class CommandSyntaxError(RedisTuiError):
    """Raised when a command line cannot be split into arguments."""
