"""Expected result shapes for the typed client.

Models list only the fields the client relies on and allow extra fields, so
the rest of the node's response passes through unchanged.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RPCResult(BaseModel):
    """Base for node result objects; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")


class SignRawTransactionResult(RPCResult):
    """
    Result of signrawtransactionwithwallet.

    Attributes
    ----------
    hex : str
        Signed transaction, hex-encoded
    complete : bool
        Whether the transaction has a complete set of signatures
    errors : list[dict[str, Any]]
        Script verification errors, if any

    """

    hex: str
    complete: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)


class FundRawTransactionResult(RPCResult):
    """
    Result of fundrawtransaction.

    Attributes
    ----------
    hex : str
        Funded raw transaction, hex-encoded
    fee : Decimal
        Fee the resulting transaction pays
    changepos : int
        Position of the added change output, or -1

    """

    hex: str
    fee: Decimal
    changepos: int


class WalletTransaction(RPCResult):
    """Wallet transaction entry as returned by listtransactions."""

    category: str | None = None
    amount: Decimal
    confirmations: int | None = None
    txid: str | None = None
    address: str | None = None


class GetTransactionResult(RPCResult):
    """Result of gettransaction."""

    txid: str
    amount: Decimal
    confirmations: int
    hex: str | None = None
    blockhash: str | None = None


class NodeInfo(RPCResult):
    """Result of getinfo."""

    version: int | str
    blocks: int
    connections: int | None = None


class AncientNodeInfo(RPCResult):
    """Result of getinfo on nodes that predate getblockchaininfo."""

    version: int | str
    protocolversion: int
    blocks: int


class BlockchainInfo(RPCResult):
    """Result of getblockchaininfo."""

    chain: str
    blocks: int
    headers: int | None = None
    bestblockhash: str


class RawTransaction(RPCResult):
    """Result of getrawtransaction in verbose mode."""

    txid: str
    hex: str
    vin: list[dict[str, Any]]
    vout: list[dict[str, Any]]
    blockhash: str | None = None
    confirmations: int | None = None


class Block(RPCResult):
    """Result of getblock."""

    hash: str
    height: int
    confirmations: int
    tx: list[Any]
    previousblockhash: str | None = None


class ValidateAddressResult(RPCResult):
    """Result of validateaddress."""

    isvalid: bool
    address: str | None = None


class UnspentOutput(RPCResult):
    """Entry of listunspent."""

    txid: str
    vout: int
    amount: Decimal
    confirmations: int
    address: str | None = None
    script_pub_key: str | None = Field(default=None, alias="scriptPubKey")
