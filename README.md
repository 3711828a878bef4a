# pokedexcli

`pokedexcli` holds the building blocks of a Pokedex that works with PokeAPI
data. It has two modules:

- `pokedexcli.cache`: a thread-safe, in-memory cache whose entries expire.
- `pokedexcli.models`: frozen dataclasses that read PokeAPI JSON, already
  decoded into Python objects, into typed records.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## The cache

`Cache(interval)` stores `bytes` values under string keys. A daemon thread
wakes every `interval` seconds and removes entries older than `interval`
seconds. A value of `interval` that is zero or negative raises `ValueError`.

```python
from pokedexcli.cache import Cache

with Cache(300.0) as cache:
    cache.add("location-area", b'{"count": 1}')
    print(cache.get("location-area"))   # b'{"count": 1}'
    print(cache.get("missing"))         # None
```

- `add(key, value)` stores the value and replaces any earlier entry.
- `get(key)` returns the stored bytes, or `None` if there are none.
- `close()` stops the background thread. Using the cache as a context manager
  calls `close()` on exit.

## The models

Each model has a `from_dict(data)` class method that takes a decoded JSON
object. Missing or `null` fields take their defaults (`0`, `""`, `False`, an
empty list). A field of the wrong type raises `ValueError`.

| Class           | What it holds                                                        |
|-----------------|----------------------------------------------------------------------|
| `NamedResource` | `name` and `url`                                                     |
| `Locations`     | one page of location areas: `count`, `next`, `previous`, `results`   |
| `LocationArea`  | `id`, `name`, `game_index`, `location`, `pokemon_encounters`         |
| `PokemonStat`   | `base_stat`, `effort`, `stat`, and a `name` property                 |
| `Pokemon`       | `id`, `name`, `base_experience`, `height`, `weight`, `is_default`, `order`, `stats`, `types` |

`LocationArea.pokemon_names()` lists the names of the Pokemon found in the
area, in the order the data gives them. `Pokemon.type_names()` lists a
Pokemon's type names in slot order.

```python
import json
from pokedexcli.models import Pokemon

data = json.loads(
    '{"name": "magikarp", "height": 9, "weight": 100,'
    ' "stats": [{"base_stat": 20, "stat": {"name": "hp"}}],'
    ' "types": [{"slot": 1, "type": {"name": "water"}}]}'
)
magikarp = Pokemon.from_dict(data)
print(magikarp.height, magikarp.type_names())   # 9 ['water']
print(magikarp.stats[0].name, magikarp.stats[0].base_stat)   # hp 20
```

## What this package does not do

The package does not fetch anything from the network; you supply the JSON
yourself. It has no interactive prompt and installs no command: there are no
`map`, `explore`, `catch`, `inspect` or `pokedex` commands, and caught Pokemon
are not kept anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```