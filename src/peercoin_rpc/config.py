"""Client configuration models."""

from pydantic import BaseModel, ConfigDict, Field

from peercoin_rpc.core.methods import MethodTable
from peercoin_rpc.rpc.retry import DELAY_BETWEEN_ATTEMPTS, MAX_ATTEMPTS, RetryConfig


class ClientOptions(BaseModel):
    """
    Options for PeercoinRPC.

    Attributes
    ----------
    ancient : bool
        Node predates getblockchaininfo; use getinfo for readiness probes
    timeout : float
        HTTP request timeout in seconds
    max_attempts : int
        Maximum transport attempts per call
    retry_delay : float
        Constant delay between attempts in seconds

    """

    ancient: bool = False
    timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    retry_delay: float = Field(default=DELAY_BETWEEN_ATTEMPTS, ge=0)

    def retry_config(self) -> RetryConfig:
        return RetryConfig(max_attempts=self.max_attempts, delay=self.retry_delay)


class ClientConfig(BaseModel):
    """
    Everything needed to build a client, as loaded from a config file.

    Attributes
    ----------
    url : str | None
        Node RPC endpoint
    options : ClientOptions
        Client options
    methods : MethodTable
        Method purity table (defaults merged with file overrides)

    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    url: str | None = None
    options: ClientOptions = Field(default_factory=ClientOptions)
    methods: MethodTable
