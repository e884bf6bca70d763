"""File-backed storage for keypairs and the public-key registry."""

import json
import logging
from pathlib import Path
from typing import Any

from solders.keypair import Keypair
from solders.pubkey import Pubkey

logger = logging.getLogger(__name__)

DEFAULT_KEY_DIR = Path(".local_keys")
DEFAULT_PUBLIC_KEY_FILE = DEFAULT_KEY_DIR / "keys.json"


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_public_keys(path: Path = DEFAULT_PUBLIC_KEY_FILE) -> dict[str, Pubkey]:
    """
    Load the public-key registry.

    The registry is a JSON object mapping names (e.g., 'treeAddress',
    'collectionMint') to base-58 addresses.

    Parameters
    ----------
    path : Path
        Registry file

    Returns
    -------
    dict[str, Pubkey]
        Parsed registry; empty if the file is missing or unreadable

    """
    path = Path(path)
    if not path.exists():
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return {name: Pubkey.from_string(value) for name, value in data.items()}
    except (OSError, ValueError, AttributeError, TypeError) as e:
        logger.warning("Failed to load public keys from %s: %s", path, e)
        return {}


def save_public_key(name: str, pubkey: Pubkey, path: Path = DEFAULT_PUBLIC_KEY_FILE) -> dict[str, Pubkey]:
    """
    Add or replace one entry in the public-key registry.

    Parameters
    ----------
    name : str
        Registry key
    pubkey : Pubkey
        Address to store
    path : Path
        Registry file

    Returns
    -------
    dict[str, Pubkey]
        Registry contents after the update

    """
    path = Path(path)
    data = load_public_keys(path)
    data[name] = pubkey
    _write_json(path, {key: str(value) for key, value in data.items()})
    return data


def load_keypair(path: Path) -> Keypair:
    """
    Load a keypair from a JSON array of secret-key bytes.

    Parameters
    ----------
    path : Path
        Keypair file, in the format written by ``solana-keygen``

    Returns
    -------
    Keypair
        Loaded keypair

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the file does not hold a valid 64-byte secret key

    """
    path = Path(path)
    if not path.exists():
        msg = f"Keypair file does not exist: {path}"
        raise FileNotFoundError(msg)
    secret = json.loads(path.read_text(encoding="utf-8"))
    return Keypair.from_bytes(bytes(secret))


def save_keypair(keypair: Keypair, name: str, key_dir: Path = DEFAULT_KEY_DIR) -> Path:
    """Write a keypair to ``<key_dir>/<name>.json`` and return the path."""
    path = Path(key_dir) / f"{name}.json"
    _write_json(path, list(bytes(keypair)))
    return path


def load_or_generate_keypair(name: str, key_dir: Path = DEFAULT_KEY_DIR) -> Keypair:
    """
    Load ``<key_dir>/<name>.json``, generating and saving a new keypair if absent.

    Parameters
    ----------
    name : str
        Keypair name (file stem)
    key_dir : Path
        Directory holding keypair files

    Returns
    -------
    Keypair
        Existing or freshly generated keypair

    """
    path = Path(key_dir) / f"{name}.json"
    if path.exists():
        return load_keypair(path)

    keypair = Keypair()
    save_keypair(keypair, name, key_dir)
    logger.debug("Generated keypair %s at %s", keypair.pubkey(), path)
    return keypair
