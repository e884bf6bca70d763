"""Local keypair and public-key registry persistence."""

from cnft_read_api.storage.keys import (
    load_keypair,
    load_or_generate_keypair,
    load_public_keys,
    save_keypair,
    save_public_key,
)

__all__ = [
    "load_keypair",
    "load_or_generate_keypair",
    "load_public_keys",
    "save_keypair",
    "save_public_key",
]
