"""Client library and CLI for the Pokémon TCG REST API."""

__version__ = "0.1.0"
