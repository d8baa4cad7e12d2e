"""Config settings – AuthSettings for the annotation parser."""
from __future__ import annotations

import dataclasses
import logging

from ingress_auth.config.settings.base import Settings
from ingress_auth.config.validation import InvalidSettingValueError
from ingress_auth.kernel.security import AnnotationRisk, SecurityPolicy


@dataclasses.dataclass
class AuthSettings(Settings):
    """Settings read from ``INGRESS_AUTH_*`` environment variables.

    ``annotations_risk_level`` accepts ``Low``, ``Medium``, ``High`` or
    ``Critical`` (case-insensitive); annotations above it are rejected.
    """

    _prefix: dataclasses.ClassVar[str] = "INGRESS_AUTH"

    annotation_prefix: str = "nginx.ingress.kubernetes.io"
    auth_directory: str = "/etc/ingress-controller/auth"
    allow_cross_namespace: bool = False
    annotations_risk_level: str = "Critical"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.annotation_prefix or "/" in self.annotation_prefix:
            raise InvalidSettingValueError(
                "annotation_prefix", self.annotation_prefix, "must be a non-empty group without '/'"
            )
        if not self.auth_directory:
            raise InvalidSettingValueError("auth_directory", self.auth_directory, "must not be empty")
        try:
            AnnotationRisk.parse(self.annotations_risk_level)
        except ValueError as exc:
            raise InvalidSettingValueError(
                "annotations_risk_level", self.annotations_risk_level, str(exc)
            ) from exc
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    def security_policy(self) -> SecurityPolicy:
        return SecurityPolicy(
            allow_cross_namespace=self.allow_cross_namespace,
            annotations_risk_level=AnnotationRisk.parse(self.annotations_risk_level),
        )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["AuthSettings"]
