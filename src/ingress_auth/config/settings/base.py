"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base for environment-driven settings such as :class:`AuthSettings`.

    Each field maps to ``<_prefix>_<FIELD>`` in the environment, e.g.
    ``INGRESS_AUTH_AUTH_DIRECTORY``.  Subclasses reject bad values in
    :meth:`_validate`, which runs on construction whichever loader built
    the instance.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that carries *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable values."""


__all__ = ["Settings"]
