"""Test suite for peercoin-rpc."""
