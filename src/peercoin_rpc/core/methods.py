"""Method purity table mapping RPC method names to pure or mutating."""

from collections.abc import Iterator, Mapping

from peercoin_rpc.core.models import MethodPurity


class MethodTable:
    """
    Configuration table partitioning RPC methods into pure and mutating.

    Methods absent from the table are treated as mutating, so a newly used
    command is never retried through an execution-state ambiguity by accident.

    Parameters
    ----------
    entries : Mapping[str, MethodPurity | str] | None
        Mapping of method name to purity

    Examples
    --------
    >>> table = MethodTable({"getblockcount": "pure"})
    >>> table.is_pure("getblockcount")
    True
    >>> table.is_pure("sendrawtransaction")
    False

    """

    def __init__(self, entries: Mapping[str, MethodPurity | str] | None = None) -> None:
        self._entries: dict[str, MethodPurity] = {}
        for method, purity in (entries or {}).items():
            self.register(method, purity)

    def register(self, method: str, purity: MethodPurity | str) -> None:
        """
        Add or replace the purity of a method.

        Parameters
        ----------
        method : str
            RPC method name
        purity : MethodPurity | str
            'pure' or 'mutating'

        Raises
        ------
        ValueError
            If purity is not a known value

        """
        try:
            self._entries[method.lower()] = MethodPurity(purity)
        except ValueError as e:
            msg = f"Unknown purity {purity!r} for method {method!r}, expected 'pure' or 'mutating'"
            raise ValueError(msg) from e

    def purity(self, method: str) -> MethodPurity:
        return self._entries.get(method.lower(), MethodPurity.MUTATING)

    def is_pure(self, method: str) -> bool:
        return self.purity(method) is MethodPurity.PURE

    def merged(self, overrides: Mapping[str, MethodPurity | str]) -> "MethodTable":
        """
        Return a new table with overrides applied on top of this one.

        Parameters
        ----------
        overrides : Mapping[str, MethodPurity | str]
            Entries that replace or extend the current ones

        Returns
        -------
        MethodTable
            New table; this instance is left unchanged

        """
        table = MethodTable(self._entries)
        for method, purity in overrides.items():
            table.register(method, purity)
        return table

    def pure_methods(self) -> list[str]:
        return sorted(m for m, p in self._entries.items() if p is MethodPurity.PURE)

    def mutating_methods(self) -> list[str]:
        return sorted(m for m, p in self._entries.items() if p is MethodPurity.MUTATING)

    def items(self) -> Iterator[tuple[str, MethodPurity]]:
        return iter(sorted(self._entries.items()))

    def __contains__(self, method: object) -> bool:
        return isinstance(method, str) and method.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
