"""Command groups for the ``lin`` CLI. Each module exposes ``register(cli)``."""
