"""Typed client surface: one method per supported node command."""

from peercoin_rpc.client.params import (
    FeeEstimateMode,
    FundRawTransactionOptions,
    OutPoint,
    SendToAddressOptions,
    TxInput,
)
from peercoin_rpc.client.peercoin import PeercoinRPC

__all__ = [
    "FeeEstimateMode",
    "FundRawTransactionOptions",
    "OutPoint",
    "PeercoinRPC",
    "SendToAddressOptions",
    "TxInput",
]
