"""Exception hierarchy for SCM Metadata."""

from __future__ import annotations


class ScmMetadataError(Exception):
    """Base exception for all SCM Metadata errors.

    Attributes:
        message: Human-readable error description
        context: Offending values, rendered into ``str()``
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ConfigurationError(ScmMetadataError, ValueError):
    """Invalid configuration value."""

    pass


class MalformedConnectionStringError(ConfigurationError):
    """Connection string is absent, lacks the ``scm:`` prefix or a delimiter."""

    def __init__(self, message: str, *, connection: str | None = None) -> None:
        super().__init__(message, context={"connection": connection})
        self.connection = connection


class InvalidNotationError(ConfigurationError):
    """Unrecognized token in the notation configuration."""

    def __init__(self, message: str, *, token: str, value: str) -> None:
        super().__init__(message)
        self.token = token
        self.value = value


class UnsupportedProviderError(ScmMetadataError):
    """No registered inspector recognizes the provider."""

    def __init__(self, message: str, *, provider: str | None = None) -> None:
        super().__init__(message, context={"provider": provider} if provider else None)
        self.provider = provider


class ProviderMismatchError(ScmMetadataError):
    """The provider is known but the directory is not under its control."""

    def __init__(self, message: str, *, provider: str, directory: str) -> None:
        super().__init__(message, context={"directory": directory})
        self.provider = provider
        self.directory = directory


class InspectionError(ScmMetadataError):
    """A repository inspector failed unexpectedly."""

    pass
