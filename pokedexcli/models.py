"""Typed views of the PokeAPI responses the Pokedex uses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string or null, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name with the API URL that describes it."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class Locations:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Locations:
        data = _mapping(data, "locations")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=[NamedResource.from_dict(item) for item in _list(data, "results")],
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _mapping(data, "location area")
        encounters = [
            NamedResource.from_dict(_mapping(item, "pokemon encounter").get("pokemon"))
            for item in _list(data, "pokemon_encounters")
        ]
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=encounters,
        )

    def pokemon_names(self) -> list[str]:
        """Names of the Pokemon found here, in the order the API lists them."""
        return [pokemon.name for pokemon in self.pokemon_encounters]


@dataclass(frozen=True)
class PokemonStat:
    """One base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @property
    def name(self) -> str:
        return self.stat.name

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
            stat=NamedResource.from_dict(data.get("stat")),
        )


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokemon record the Pokedex shows and uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            is_default=_bool(data, "is_default"),
            order=_int(data, "order"),
            stats=[PokemonStat.from_dict(item) for item in _list(data, "stats")],
            types=[
                NamedResource.from_dict(_mapping(item, "type slot").get("type"))
                for item in _list(data, "types")
            ],
        )

    def type_names(self) -> list[str]:
        """Names of the Pokemon's types in slot order."""
        return [kind.name for kind in self.types]