"""Formatting helpers for console output."""

import httpx

EXPLORER_BASE_URL = "https://explorer.solana.com"


def explorer_url(
    address: str | None = None,
    tx_signature: str | None = None,
    cluster: str = "devnet",
) -> str:
    """
    Build a block explorer link for an address or a transaction.

    Parameters
    ----------
    address : str | None
        Account address; takes precedence over ``tx_signature``
    tx_signature : str | None
        Transaction signature
    cluster : str
        Explorer cluster parameter

    Returns
    -------
    str
        Explorer URL, or ``"[unknown]"`` if neither value is given

    """
    if not address and not tx_signature:
        return "[unknown]"

    path = f"/address/{address}" if address else f"/tx/{tx_signature}"
    return str(httpx.URL(EXPLORER_BASE_URL + path, params={"cluster": cluster}))
