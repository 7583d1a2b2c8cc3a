"""Tests for result decoding."""

from decimal import Decimal

import pytest

from peercoin_rpc.client.decoders import SignRawTransactionResult, UnspentOutput
from peercoin_rpc.core.errors import DecodingError
from peercoin_rpc.rpc.decode import decode


def test_decode_scalar():
    assert decode(str, "a1b2c3") == "a1b2c3"
    assert decode(Decimal, 12.5) == Decimal("12.5")


def test_decode_model_list():
    raw = [
        {
            "txid": "ab" * 32,
            "vout": 1,
            "amount": 0.5,
            "confirmations": 12,
            "scriptPubKey": "76a914",
            "spendable": True,
        }
    ]

    outputs = decode(list[UnspentOutput], raw)

    assert outputs[0].vout == 1
    assert outputs[0].amount == Decimal("0.5")
    assert outputs[0].script_pub_key == "76a914"


def test_extra_fields_are_kept():
    result = decode(SignRawTransactionResult, {"hex": "0100", "complete": True, "extra": 1})

    assert result.complete is True
    assert result.model_extra == {"extra": 1}


def test_mismatch_raises_executed_decoding_error():
    with pytest.raises(DecodingError) as exc_info:
        decode(SignRawTransactionResult, {"complete": "maybe"})

    error = exc_info.value
    assert error.executed is True
    assert error.raw_result == {"complete": "maybe"}
    assert {tuple(e["loc"]) for e in error.errors} >= {("hex",), ("complete",)}
    assert "SignRawTransactionResult" in str(error)


def test_null_where_value_expected():
    with pytest.raises(DecodingError):
        decode(str, None)
