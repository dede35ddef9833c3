"""Mod packs: metadata, versions, items, recipes and research declarations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar, Union

from tyconia.conditions import ConditionFlag

__all__ = [
    "SemverStage",
    "SemVer",
    "ParseSemVerError",
    "Meta",
    "ParseMetaError",
    "MetaShorthand",
    "MetaSourceKind",
    "MetaSources",
    "MetaSource",
    "MetaDescriptor",
    "MetaAttributions",
    "ModPack",
    "ItemId",
    "ItemCategory",
    "ItemEntry",
    "StackSize",
    "RecipeId",
    "Recipe",
    "ResearchId",
    "ResearchDeclared",
    "Pack",
    "ItemPack",
    "ResearchPack",
    "RecipePack",
    "base_mod",
    "to_snake_case",
]

_U8_MAX = 255


class ParseSemVerError(ValueError):
    """Raised when text is not a valid version."""

    def __init__(self, message: str = "invalid semver format") -> None:
        super().__init__(message)


class ParseMetaError(ValueError):
    """Raised when text is not a valid ``<mod_name>_<version>`` identifier."""

    def __init__(self, message: str = "invalid mod meta") -> None:
        super().__init__(message)


class SemverStage(Enum):
    """Release stage of a version."""

    DEV = "dev"
    NIGHTLY = "nightly"
    RELEASE_CANDIDATE = "rc"
    STABLE = "stable"


def _parse_u8(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseSemVerError()
    value = int(digits)
    if value > _U8_MAX:
        raise ParseSemVerError()
    return value


@dataclass(frozen=True)
class SemVer:
    """A ``major.minor.patch`` version with a release stage.

    ``candidate`` holds the release-candidate number and is set only for
    :attr:`SemverStage.RELEASE_CANDIDATE`.
    """

    major: int
    minor: int
    patch: int
    stage: SemverStage = SemverStage.STABLE
    candidate: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _U8_MAX:
                raise ValueError(f"{name} must be an integer in 0..{_U8_MAX}")
        if self.stage is SemverStage.RELEASE_CANDIDATE:
            if not isinstance(self.candidate, int) or not 0 <= self.candidate <= _U8_MAX:
                raise ValueError(f"release candidate must be an integer in 0..{_U8_MAX}")
        elif self.candidate is not None:
            raise ValueError("only release candidates carry a candidate number")

    @classmethod
    def parse(cls, text: str) -> SemVer:
        """Parse ``1.2.3``, ``1.2.3-dev``, ``1.2.3-nightly`` or ``1.2.3-rcN``."""
        parts = text.split("-")
        version_part = parts[0]
        stage_part = parts[1] if len(parts) > 1 else None

        numbers = version_part.split(".")
        if len(numbers) < 3:
            raise ParseSemVerError()
        major, minor, patch = (_parse_u8(number) for number in numbers[:3])

        candidate = None
        if stage_part is None:
            stage = SemverStage.STABLE
        elif stage_part == "dev":
            stage = SemverStage.DEV
        elif stage_part == "nightly":
            stage = SemverStage.NIGHTLY
        elif stage_part.startswith("rc"):
            stage = SemverStage.RELEASE_CANDIDATE
            candidate = _parse_u8(stage_part[2:])
        else:
            raise ParseSemVerError()

        return cls(major, minor, patch, stage, candidate)

    @classmethod
    def from_tuple(cls, triple: tuple[int, int, int]) -> SemVer:
        """Build a development version from ``(major, minor, patch)``."""
        major, minor, patch = triple
        return cls(major, minor, patch, SemverStage.DEV)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.stage is SemverStage.STABLE:
            return base
        if self.stage is SemverStage.RELEASE_CANDIDATE:
            return f"{base}-rc{self.candidate}"
        return f"{base}-{self.stage.value}"


@dataclass(frozen=True)
class Meta:
    """Identifies a mod by name and version."""

    mod_name: str
    version: SemVer

    @classmethod
    def parse(cls, text: str) -> Meta:
        """Parse ``<mod_name>_<version>``, splitting at the last underscore."""
        parts = text.rsplit("_", 1)
        if len(parts) != 2:
            raise ParseMetaError("missing mod name or version")
        mod_name, version_text = parts
        try:
            version = SemVer.parse(version_text)
        except (ParseSemVerError, ValueError):
            raise ParseMetaError("invalid version") from None
        return cls(mod_name, version)

    def __str__(self) -> str:
        return f"{self.mod_name}_{self.version}"


@dataclass(frozen=True)
class MetaShorthand:
    """Short ``<mod_name>_<version>`` reference to a mod."""

    value: str


class MetaSourceKind(Enum):
    """Where a mod dependency can be fetched from."""

    PATH = "path"
    GIT = "git"


@dataclass(frozen=True)
class MetaSources:
    """A location for a dependency: a filesystem path or a git remote."""

    kind: MetaSourceKind
    location: Union[Path, str]

    def __post_init__(self) -> None:
        if self.kind is MetaSourceKind.PATH:
            object.__setattr__(self, "location", Path(self.location))
        else:
            object.__setattr__(self, "location", str(self.location))


@dataclass(frozen=True)
class MetaSource:
    """A dependency and the places it may be found."""

    id: MetaShorthand
    sources: tuple[MetaSources, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sources", tuple(self.sources))


@dataclass(frozen=True)
class MetaDescriptor:
    """Presentation details of a mod."""

    display_name: str
    description: str
    thumbnail: Optional[Path] = None
    cover_art: Optional[Path] = None
    dependencies: tuple[MetaSource, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", tuple(self.dependencies))


@dataclass(frozen=True)
class MetaAttributions:
    """Authors, licences and credits of a mod."""

    authors: tuple[str, ...] = ()
    licenses: tuple[str, ...] = ()
    credits: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("authors", "licenses", "credits"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


@dataclass(frozen=True)
class ModPack:
    """Full description of a mod."""

    mod_id: Meta
    descriptor: MetaDescriptor
    attributions: MetaAttributions


@dataclass(frozen=True)
class ItemId:
    """Identifier of an item."""

    value: str


@dataclass(frozen=True)
class ItemCategory:
    """Category an item belongs to."""

    value: str


@dataclass(frozen=True)
class ItemEntry:
    """A quantity of one item."""

    item: ItemId
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.item, str):
            object.__setattr__(self, "item", ItemId(self.item))
        if self.quantity < 0:
            raise ValueError("quantity must not be negative")


@dataclass(frozen=True)
class StackSize:
    """Maximum amount of an item per stack."""

    value: int = 10


@dataclass(frozen=True)
class RecipeId:
    """Identifier of a recipe."""

    value: str


@dataclass(frozen=True)
class ResearchId:
    """Identifier of a research."""

    value: str


@dataclass(frozen=True)
class Recipe:
    """Ingredients turned into output over ``duration`` milliseconds."""

    ingredients: tuple[ItemEntry, ...] = ()
    output: tuple[ItemEntry, ...] = ()
    research_required: tuple[ResearchId, ...] = ()
    duration: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "output", tuple(self.output))
        object.__setattr__(self, "research_required", _ids(ResearchId, self.research_required))
        if self.duration < 0:
            raise ValueError("duration must not be negative")


@dataclass(frozen=True)
class ResearchDeclared:
    """A research with its unlock condition and prerequisites."""

    id: ResearchId
    display_name: str
    flavor_text: str
    unlock_condition: ConditionFlag
    required_research: tuple[ResearchId, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.id, str):
            object.__setattr__(self, "id", ResearchId(self.id))
        object.__setattr__(self, "required_research", _ids(ResearchId, self.required_research))


_Id = TypeVar("_Id", ItemId, ResearchId, RecipeId)


def _ids(kind: type[_Id], values: Iterable[Union[_Id, str]]) -> tuple[_Id, ...]:
    return tuple(kind(value) if isinstance(value, str) else value for value in values)


@dataclass(frozen=True)
class Pack:
    """Items, research and recipes contributed by a mod."""

    meta: Meta
    description: str
    items: tuple[ItemId, ...] = ()
    research: tuple[ResearchId, ...] = ()
    recipes: tuple[RecipeId, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _ids(ItemId, self.items))
        object.__setattr__(self, "research", _ids(ResearchId, self.research))
        object.__setattr__(self, "recipes", _ids(RecipeId, self.recipes))


@dataclass(frozen=True)
class ItemPack:
    """Declared items of a mod."""

    items: tuple[ItemId, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _ids(ItemId, self.items))


@dataclass(frozen=True)
class ResearchPack:
    """Declared research of a mod."""

    research: tuple[ResearchId, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "research", _ids(ResearchId, self.research))


@dataclass(frozen=True)
class RecipePack:
    """Declared recipes of a mod."""

    recipes: tuple[RecipeId, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "recipes", _ids(RecipeId, self.recipes))


def base_mod() -> Pack:
    """The pack shipped with the game itself."""
    return Pack(
        meta=Meta("base", SemVer.from_tuple((0, 0, 0))),
        description="adds automated arm, mover belts and the infinite io machine",
        items=("auto_arm", "mover_belt", "infinite_io"),
        research=("developer_tools",),
        recipes=(),
    )


def to_snake_case(text: str) -> str:
    """Convert camel case and spaced words to snake case."""
    result: list[str] = []
    prev_was_upper = False
    prev_was_underscore = False

    for position, char in enumerate(text):
        if char.isupper():
            if position > 0 and not prev_was_upper and not prev_was_underscore:
                result.append("_")
            result.append(char.lower() if char.isascii() else char)
            prev_was_upper = True
            prev_was_underscore = False
        elif char.isspace():
            if not prev_was_underscore:
                result.append("_")
                prev_was_underscore = True
            prev_was_upper = False
        else:
            result.append(char)
            prev_was_upper = False
            prev_was_underscore = False

    return "".join(result)