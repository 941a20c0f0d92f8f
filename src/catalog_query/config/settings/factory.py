"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Sequence, TypeVar

from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.loaders import SettingsLoader
from catalog_query.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


def _collect(settings_cls: type[T], loaders: Iterable[SettingsLoader]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for loader in loaders:
        try:
            loaded = loader.load(settings_cls)
        except ConfigError:
            # An incomplete source still lets later sources and overrides fill the gaps.
            continue
        values.update(
            (field.name, getattr(loaded, field.name)) for field in dataclasses.fields(loaded)
        )
    return values


class SettingsFactory:
    """Build a settings dataclass from several sources.

    Sources are applied in order, each one overriding the previous, and
    explicit *overrides* win over every loader::

        settings = SettingsFactory.create(
            CatalogSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"echo_sql": True},
        )
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Merge every source into one *settings_cls* instance.

        Raises
        ------
        MissingRequiredSettingError
            A field without a default was not provided by any source.
        InvalidSettingValueError
            The merged values fail the class's own validation.
        ConfigError
            Any other construction failure (for example unknown fields).
        """
        values = _collect(settings_cls, loaders or ())
        values.update(overrides or {})

        missing = [
            field.name
            for field in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
            if field.name not in values and not _has_default(field)
        ]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
