"""Pokedex building blocks: an expiring in-memory cache and typed PokeAPI models."""

__version__ = "0.1.0"