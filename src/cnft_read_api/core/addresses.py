"""Program ids and program-derived address helpers for compressed assets."""

from solders.pubkey import Pubkey

from cnft_read_api.errors import AssetMappingError

BUBBLEGUM_PROGRAM_ID = Pubkey.from_string("BGUMAp9Gq7iTEuizy4pqaxsTyUCBK68MDfK752saRPUY")

ASSET_SEED = b"asset"
MAX_LEAF_INDEX = 2**64 - 1


def to_pubkey(address: str | Pubkey) -> Pubkey:
    """
    Coerce a base-58 string or Pubkey into a Pubkey.

    Parameters
    ----------
    address : str | Pubkey
        Address to convert

    Returns
    -------
    Pubkey
        Parsed public key

    Raises
    ------
    ValueError
        If the string is not a valid 32-byte base-58 key

    """
    if isinstance(address, Pubkey):
        return address
    return Pubkey.from_string(address)


def find_leaf_asset_address(tree_address: str | Pubkey, leaf_index: int) -> str:
    """
    Derive the asset address of a leaf in a Bubblegum Merkle tree.

    Seeds are ``b"asset"``, the 32 tree address bytes, and the leaf index as
    an 8-byte little-endian integer, under the Bubblegum program.

    Parameters
    ----------
    tree_address : str | Pubkey
        Merkle tree account address
    leaf_index : int
        Leaf index (nonce) inside the tree

    Returns
    -------
    str
        Base-58 program-derived address

    Raises
    ------
    AssetMappingError
        If the tree address is invalid or the leaf index does not fit in u64

    """
    try:
        tree = to_pubkey(tree_address)
    except ValueError as e:
        msg = f"Invalid tree address: {tree_address}"
        raise AssetMappingError(msg, e) from e

    if not 0 <= leaf_index <= MAX_LEAF_INDEX:
        msg = f"Leaf index out of range: {leaf_index}"
        raise AssetMappingError(msg)

    address, _bump = Pubkey.find_program_address(
        [ASSET_SEED, bytes(tree), leaf_index.to_bytes(8, "little")],
        BUBBLEGUM_PROGRAM_ID,
    )
    return str(address)
