"""BaseService — shared foundation for all imperium services.

Every service receives the frozen :class:`ImperiumSettings` at
construction time and builds its :class:`ServiceResult` through the
helpers here, so the ``warnings_as_errors`` policy applies uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from imperium_calendar.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from imperium_calendar.config.settings import ImperiumSettings
    from imperium_calendar.domain.errors import InvalidCodeError

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CodecService(BaseService):
            def decode(self, code: str) -> ServiceResult:
                warnings: list[str] = []
                ...
                return self._success("decode", payload, warnings)
    """

    def __init__(self, settings: ImperiumSettings) -> None:
        self._settings = settings

    def _success(
        self,
        op: str,
        data: dict[str, Any],
        warnings: list[str],
    ) -> ServiceResult:
        """Return an ok result, or a failure when warnings are treated as errors."""
        if warnings and self._settings.codec.warnings_as_errors:
            logger.debug("service.warnings_as_errors", op=op, warnings=len(warnings))
            return self._failure(
                op,
                "WARNINGS_AS_ERRORS",
                warnings[0],
                warnings,
                detail={"warnings": list(warnings)},
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _failure(
        self,
        op: str,
        code: str,
        message: str,
        warnings: list[str],
        *,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        logger.debug("service.failed", op=op, code=code)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    def _invalid_code(
        self,
        op: str,
        exc: InvalidCodeError,
        warnings: list[str],
        *,
        code: str,
    ) -> ServiceResult:
        return self._failure(
            op,
            "INVALID_CODE",
            str(exc),
            warnings,
            detail={"code": code, "element": str(exc.kind), "part": exc.code},
        )
