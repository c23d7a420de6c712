from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """
    Runtime configuration for the tracker.
    Every gateway and service receives an instance at construction time.
    """
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3001, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Arc Testnet endpoints
    explorer_api_url: str = Field(default="https://testnet.arcscan.app/api", description="ArcScan API base URL")
    explorer_tx_url: str = Field(default="https://testnet.arcscan.app/tx", description="ArcScan transaction page prefix")
    rpc_url: str = Field(default="https://rpc.testnet.arc.network", description="Arc Testnet JSON-RPC endpoint")
    request_timeout_seconds: float = Field(default=30, description="HTTP request timeout")

    # Wallet analysed by the standalone scripts
    tracked_wallet: str = Field(default="0xc59E942dC65f7eabCa195A71BCFEE5Bf0CcA2afE")

    # Gas comparison assumptions (Ethereum reference network)
    ref_gas_price_gwei: int = Field(default=30, description="Reference gas price in gwei")
    ref_token_price_usd: int = Field(default=2500, description="Reference gas token price in USD")
    gas_token_decimals: int = Field(default=6, description="Arc gas token (USDC) decimals")
    scan_block_depth: int = Field(default=200, ge=1, description="Blocks walked by the block tracker")

    # Aggregation policy
    count_token_interactions: bool = Field(
        default=True,
        description="Count every token transfer as a contract interaction",
    )
    bridge_contracts: List[str] = Field(
        default_factory=lambda: ["0x0000000000000000000000000000000000000000"],
        description="Known Arc Testnet bridge contracts",
    )

    # Airdrop claim
    airdrop_address: str = Field(default="0x54BD13f0B52E748292a9FCF09eba09C7b5a24220")
    proofs_path: Path = Field(default=BASE_DIR / "proofs.json", description="Eligibility proofs file")

    @field_validator("bridge_contracts")
    @classmethod
    def _lower_bridges(cls, value: List[str]) -> List[str]:
        return [addr.lower() for addr in value]


@lru_cache
def get_settings() -> Settings:
    return Settings()
