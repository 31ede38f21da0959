"""Language pack value types and merging.

A LanguagePack bundles the phrases for one language: the just-now phrase
plus one UnitTemplateSet for past differences and one for future ones.
Template lookup is indexed by TimeUnit, so every unit always has a
singular and a plural template.

Packs are immutable. Merging a partial pack produces a new LanguagePack;
each unit key of each template set is merged independently, so fields the
partial does not mention keep the base pack's value.

Partial pack mapping form:
    {
        "just_now": "Just now",
        "past_templates": {"minute": "{c} minute ago", "minutes": "{c} minutes ago"},
        "future_templates": {"year": "In {c} year"},
    }

The camelCase keys justNow, pastTemplates and futureTemplates are accepted
as aliases of the snake_case ones.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, assert_never

from howlongago.constants import COUNT_TOKEN
from howlongago.enums import TimeUnit
from howlongago.errors import LanguagePackError

if TYPE_CHECKING:
    from .types import PartialLanguagePack

__all__ = [
    "LanguagePack",
    "PluralTemplates",
    "UnitTemplateSet",
]

logger = logging.getLogger(__name__)

# Flat template keys in declaration order: year, years, month, months, ...
TEMPLATE_KEYS: tuple[str, ...] = tuple(
    key for unit in TimeUnit for key in (unit.singular_key, unit.plural_key)
)

_JUST_NOW_FIELD = "just_now"
_PAST_FIELD = "past_templates"
_FUTURE_FIELD = "future_templates"

# Accepted spellings of the top-level partial pack keys.
_FIELD_ALIASES: dict[str, str] = {
    _JUST_NOW_FIELD: _JUST_NOW_FIELD,
    "justNow": _JUST_NOW_FIELD,
    _PAST_FIELD: _PAST_FIELD,
    "pastTemplates": _PAST_FIELD,
    _FUTURE_FIELD: _FUTURE_FIELD,
    "futureTemplates": _FUTURE_FIELD,
}


def _require_template(value: object, key: str) -> str:
    if not isinstance(value, str):
        msg = f"Template '{key}' must be a string, got {type(value).__name__}"
        raise LanguagePackError(msg)
    return value


@dataclass(frozen=True, slots=True)
class PluralTemplates:
    """Singular and plural template for one unit.

    Attributes:
        singular: Template used when the count is exactly 1
        plural: Template used for every other count, including 0
    """

    singular: str
    plural: str

    def select(self, count: int) -> str:
        """Pick the template for count."""
        return self.singular if count == 1 else self.plural

    def render(self, count: int) -> str:
        """Substitute count into the selected template.

        Only the first token is replaced; templates carry exactly one.

        Example:
            >>> PluralTemplates("{c} day ago", "{c} days ago").render(3)
            '3 days ago'
        """
        return self.select(count).replace(COUNT_TOKEN, str(count), 1)


@dataclass(frozen=True, slots=True)
class UnitTemplateSet:
    """Templates for every TimeUnit in one direction (past or future).

    One field per unit keeps the set exhaustive: a set cannot be built
    with a unit missing.
    """

    year: PluralTemplates
    month: PluralTemplates
    week: PluralTemplates
    day: PluralTemplates
    hour: PluralTemplates
    minute: PluralTemplates
    second: PluralTemplates

    def for_unit(self, unit: TimeUnit) -> PluralTemplates:
        """Return the singular/plural pair for unit."""
        match unit:
            case TimeUnit.YEAR:
                return self.year
            case TimeUnit.MONTH:
                return self.month
            case TimeUnit.WEEK:
                return self.week
            case TimeUnit.DAY:
                return self.day
            case TimeUnit.HOUR:
                return self.hour
            case TimeUnit.MINUTE:
                return self.minute
            case TimeUnit.SECOND:
                return self.second
            case _:
                assert_never(unit)

    @classmethod
    def from_mapping(cls, templates: Mapping[str, str]) -> UnitTemplateSet:
        """Build a complete set from the flat 14-key mapping.

        Raises:
            LanguagePackError: If a key is missing or a value is not a string
        """
        if not isinstance(templates, Mapping):
            msg = f"Template set must be a mapping, got {type(templates).__name__}"
            raise LanguagePackError(msg)

        missing = [key for key in TEMPLATE_KEYS if key not in templates]
        if missing:
            msg = f"Template set is missing keys: {', '.join(missing)}"
            raise LanguagePackError(msg)

        return cls(
            **{
                unit.value: PluralTemplates(
                    singular=_require_template(templates[unit.singular_key], unit.singular_key),
                    plural=_require_template(templates[unit.plural_key], unit.plural_key),
                )
                for unit in TimeUnit
            }
        )

    def merged(self, overrides: Mapping[str, object]) -> UnitTemplateSet:
        """Return a copy with the templates named in overrides replaced.

        Keys are merged one at a time. Keys that name no unit are ignored;
        None values count as absent.

        Raises:
            LanguagePackError: If overrides is not a mapping or a present
                value is not a string
        """
        if not isinstance(overrides, Mapping):
            msg = f"Template set must be a mapping, got {type(overrides).__name__}"
            raise LanguagePackError(msg)

        unknown = [str(key) for key in overrides if key not in TEMPLATE_KEYS]
        if unknown:
            logger.debug("Ignoring unknown template keys: %s", ", ".join(sorted(unknown)))

        changes: dict[str, PluralTemplates] = {}
        for unit in TimeUnit:
            current = self.for_unit(unit)
            singular = overrides.get(unit.singular_key)
            plural = overrides.get(unit.plural_key)
            if singular is None and plural is None:
                continue
            changes[unit.value] = PluralTemplates(
                singular=current.singular
                if singular is None
                else _require_template(singular, unit.singular_key),
                plural=current.plural
                if plural is None
                else _require_template(plural, unit.plural_key),
            )

        return replace(self, **changes) if changes else self

    def as_mapping(self) -> dict[str, str]:
        """Flat 14-key form, the same shape from_mapping() accepts."""
        result: dict[str, str] = {}
        for unit in TimeUnit:
            pair = self.for_unit(unit)
            result[unit.singular_key] = pair.singular
            result[unit.plural_key] = pair.plural
        return result


@dataclass(frozen=True, slots=True)
class LanguagePack:
    """Phrases for one language.

    Attributes:
        just_now: Phrase used inside the just-now window
        past_templates: Templates for targets before the reference instant
        future_templates: Templates for targets after the reference instant

    Example:
        >>> pack = get_language_pack("en")
        >>> pack.past_templates.for_unit(TimeUnit.DAY).render(2)
        '2 days ago'
    """

    just_now: str
    past_templates: UnitTemplateSet
    future_templates: UnitTemplateSet

    def templates_for(self, *, is_future: bool) -> UnitTemplateSet:
        """Template set for the direction of a difference."""
        return self.future_templates if is_future else self.past_templates

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> LanguagePack:
        """Build a complete pack from the mapping form.

        Raises:
            LanguagePackError: If a field or template is missing or malformed
        """
        fields = _canonical_fields(data)
        for name in (_JUST_NOW_FIELD, _PAST_FIELD, _FUTURE_FIELD):
            if name not in fields:
                msg = f"Language pack is missing field '{name}'"
                raise LanguagePackError(msg)

        return cls(
            just_now=_require_template(fields[_JUST_NOW_FIELD], _JUST_NOW_FIELD),
            past_templates=UnitTemplateSet.from_mapping(fields[_PAST_FIELD]),  # type: ignore[arg-type]
            future_templates=UnitTemplateSet.from_mapping(fields[_FUTURE_FIELD]),  # type: ignore[arg-type]
        )

    def merged(self, partial: PartialLanguagePack) -> LanguagePack:
        """Merge a partial pack on top of this one.

        A LanguagePack argument is complete and replaces every field. A
        mapping replaces only what it names, with the two template sets
        merged key by key.

        Raises:
            LanguagePackError: If partial is neither a LanguagePack nor a
                mapping, or holds malformed values
        """
        if isinstance(partial, LanguagePack):
            return partial

        fields = _canonical_fields(partial)
        just_now = fields.get(_JUST_NOW_FIELD)
        past = fields.get(_PAST_FIELD)
        future = fields.get(_FUTURE_FIELD)

        return LanguagePack(
            just_now=self.just_now
            if just_now is None
            else _require_template(just_now, _JUST_NOW_FIELD),
            past_templates=self.past_templates
            if past is None
            else self.past_templates.merged(past),  # type: ignore[arg-type]
            future_templates=self.future_templates
            if future is None
            else self.future_templates.merged(future),  # type: ignore[arg-type]
        )

    def as_mapping(self) -> dict[str, object]:
        """Mapping form with snake_case keys."""
        return {
            _JUST_NOW_FIELD: self.just_now,
            _PAST_FIELD: self.past_templates.as_mapping(),
            _FUTURE_FIELD: self.future_templates.as_mapping(),
        }


def _canonical_fields(data: object) -> dict[str, object]:
    """Resolve aliases in a pack mapping, dropping unknown keys."""
    if not isinstance(data, Mapping):
        msg = f"Language pack must be a LanguagePack or mapping, got {type(data).__name__}"
        raise LanguagePackError(msg)

    fields: dict[str, object] = {}
    for key, value in data.items():
        name = _FIELD_ALIASES.get(key) if isinstance(key, str) else None
        if name is None:
            logger.debug("Ignoring unknown language pack field: %s", key)
            continue
        fields[name] = value
    return fields
