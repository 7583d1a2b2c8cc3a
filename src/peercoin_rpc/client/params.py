"""Structured parameters for commands with optional arguments."""

from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FeeEstimateMode(StrEnum):
    """Fee estimate mode accepted by fundrawtransaction."""

    UNSET = "UNSET"
    ECONOMICAL = "ECONOMICAL"
    CONSERVATIVE = "CONSERVATIVE"


class OutPoint(BaseModel):
    """Reference to a transaction output."""

    txid: str
    vout: int = Field(ge=0)


class TxInput(OutPoint):
    """Input of createrawtransaction, optionally with a sequence number."""

    sequence: int | None = None


class SendToAddressOptions(BaseModel):
    """
    Optional trailing arguments of sendtoaddress.

    The node takes these positionally, so every argument before the last one
    that is set must be sent too. Unset earlier arguments are filled with the
    node's defaults.

    Attributes
    ----------
    comment : str | None
        Wallet-local comment (argument 3)
    comment_to : str | None
        Wallet-local name of the recipient (argument 4)
    subtract_fee_from_amount : bool | None
        Deduct the fee from the sent amount (argument 5)
    replaceable : bool | None
        Signal BIP125 replaceability (argument 6)

    """

    comment: str | None = None
    comment_to: str | None = None
    subtract_fee_from_amount: bool | None = None
    replaceable: bool | None = None

    def to_params(self) -> list[Any]:
        """
        Positional arguments 3 and onward, truncated after the last set field.

        Returns
        -------
        list[Any]
            Trailing parameters; empty when nothing is set

        """
        values: list[tuple[Any, Any]] = [
            (self.comment, ""),
            (self.comment_to, ""),
            (self.subtract_fee_from_amount, False),
            (self.replaceable, None),
        ]
        last_set = max((i for i, (value, _) in enumerate(values) if value is not None), default=-1)
        return [value if value is not None else default for value, default in values[: last_set + 1]]


class FundRawTransactionOptions(BaseModel):
    """Options object of fundrawtransaction."""

    model_config = ConfigDict(populate_by_name=True)

    change_address: str | None = Field(default=None, alias="changeAddress")
    change_position: int | None = Field(default=None, alias="changePosition")
    change_type: str | None = None
    include_watching: bool | None = Field(default=None, alias="includeWatching")
    lock_unspents: bool | None = Field(default=None, alias="lockUnspents")
    fee_rate: Decimal | None = Field(default=None, alias="feeRate")
    subtract_fee_from_outputs: list[int] | None = Field(default=None, alias="subtractFeeFromOutputs")
    replaceable: bool | None = None
    conf_target: int | None = None
    estimate_mode: FeeEstimateMode | None = None

    def to_param(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
