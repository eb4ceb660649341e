"""Localization models for the locale catalog.

Defines the core data structures: locales, per-locale catalogs and
plural resources.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Dict, Iterator, Optional, Tuple, Union

from localization.exceptions import RegistryFrozenError


@dataclass(frozen=True)
class Locale:
    """Identifier for a language/region combination.

    Uses IETF BCP 47 language tag format (e.g., en, fr-FR, zh-Hant-TW).
    Frozen to ensure immutability and hashability, equality is by value.

    Attributes:
        language: ISO 639 language code (e.g., "en").
        region: ISO 3166 region code (e.g., "US"), empty if absent.
        script: ISO 15924 script code (e.g., "Hant"), empty if absent.
    """

    language: str
    region: str = ""
    script: str = ""

    ENGLISH: ClassVar["Locale"]

    def __post_init__(self):
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())
        object.__setattr__(self, "script", self.script.title())

    @property
    def tag(self) -> str:
        """Return the BCP 47 tag (e.g., "fr-FR")."""
        return "-".join(part for part in (self.language, self.script, self.region) if part)

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale tag such as "fr-FR", "fr_FR" or "zh-Hant-TW".

        Args:
            locale_str: Locale tag, "-" or "_" separated.

        Returns:
            Matching Locale value.

        Raises:
            ValueError: If the tag is empty or malformed.
        """
        parts = locale_str.strip().replace("_", "-").split("-")
        if not parts or not parts[0].isalpha() or not 2 <= len(parts[0]) <= 8:
            raise ValueError(f"Invalid locale: {locale_str!r}")

        language, script, region = parts[0], "", ""
        for part in parts[1:]:
            if len(part) == 4 and part.isalpha() and not script and not region:
                script = part
            elif (len(part) == 2 and part.isalpha()) or (
                len(part) == 3 and part.isdigit()
            ):
                if region:
                    raise ValueError(f"Invalid locale: {locale_str!r}")
                region = part
            else:
                raise ValueError(f"Invalid locale: {locale_str!r}")
        return cls(language=language, region=region, script=script)


Locale.ENGLISH = Locale("en")


class PluralCategory(str, Enum):
    """CLDR plural category keys.

    Only used as storage keys; selecting a category for a quantity is
    left to the caller.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


CategoryKey = Union[PluralCategory, str]


def _to_category(key: CategoryKey) -> PluralCategory:
    try:
        return PluralCategory(key)
    except ValueError as e:
        raise ValueError(f"Unknown plural category: {key!r}") from e


class PluralResource(Mapping):
    """Immutable set of plural category -> text mappings.

    The OTHER category is mandatory since every locale falls back to it.
    """

    __slots__ = ("_forms",)

    def __init__(self, forms: Mapping[CategoryKey, str]):
        converted = {_to_category(key): value for key, value in forms.items()}
        if PluralCategory.OTHER not in converted:
            raise ValueError("Plural resource requires an 'other' category")
        self._forms: Mapping[PluralCategory, str] = MappingProxyType(converted)

    @classmethod
    def coerce(
        cls, value: Union["PluralResource", Mapping[CategoryKey, str]]
    ) -> "PluralResource":
        """Return value as a PluralResource, converting plain mappings."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def categories(self) -> Tuple[PluralCategory, ...]:
        return tuple(self._forms)

    def __getitem__(self, key: CategoryKey) -> str:
        return self._forms[_to_category(key)]

    def __iter__(self) -> Iterator[PluralCategory]:
        return iter(self._forms)

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, key: object) -> bool:
        try:
            return _to_category(key) in self._forms  # type: ignore[arg-type]
        except ValueError:
            return False

    def get(self, key: CategoryKey, default: Optional[str] = None) -> Optional[str]:
        """Return the text for an exact category, or default."""
        return self._forms.get(_to_category(key), default)

    def select(self, key: CategoryKey) -> str:
        """Return the text for a category, falling back to OTHER."""
        return self._forms.get(_to_category(key), self._forms[PluralCategory.OTHER])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PluralResource):
            return dict(self._forms) == dict(other._forms)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._forms.items()))

    def __repr__(self) -> str:
        forms = ", ".join(f"{k.value}={v!r}" for k, v in self._forms.items())
        return f"PluralResource({forms})"


@dataclass(eq=False)
class Catalog:
    """Container for resolved resources in a specific locale.

    Equality is by identity: exactly one Catalog exists per registered
    locale, plus the default Catalog.

    Attributes:
        locale: The Locale this catalog is for.
        strings: Resource name -> string value.
        plurals: Resource name -> PluralResource.
    """

    locale: Locale
    strings: Dict[str, str] = field(default_factory=dict)
    plurals: Dict[str, PluralResource] = field(default_factory=dict)
    _frozen: bool = field(default=False, init=False, repr=False)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the catalog read-only.

        The entry maps are swapped for read-only views so direct dict
        writes fail as well.
        """
        if self._frozen:
            return
        self.strings = MappingProxyType(dict(self.strings))  # type: ignore[assignment]
        self.plurals = MappingProxyType(dict(self.plurals))  # type: ignore[assignment]
        self._frozen = True

    def _check_writable(self, name: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot write resource {name!r} to frozen catalog {self.locale}"
            )

    def get_string(self, name: str) -> Optional[str]:
        """Retrieve a string resource by name.

        Returns:
            The string value, or None if not found.
        """
        return self.strings.get(name)

    def set_string(self, name: str, value: str) -> None:
        self._check_writable(name)
        self.strings[name] = value

    def has_string(self, name: str) -> bool:
        return name in self.strings

    def get_plural(self, name: str) -> Optional[PluralResource]:
        """Retrieve a plural resource by name.

        Returns:
            The PluralResource, or None if not found.
        """
        return self.plurals.get(name)

    def set_plural(self, name: str, value: PluralResource) -> None:
        self._check_writable(name)
        self.plurals[name] = value

    def has_plural(self, name: str) -> bool:
        return name in self.plurals

    def names(self) -> frozenset:
        """Return every resource name stored in this catalog."""
        return frozenset(self.strings) | frozenset(self.plurals)
