# src/deskperp/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr
import os
import yaml

MAINNET_URL = "https://api.happytrading.global"
TESTNET_URL = "https://stg-trade-api.happytrading.global"


class Settings(BaseSettings):
    network: str | None = "testnet"
    private_key: SecretStr | None = None
    subaccount_id: int = Field(default=0, ge=0)
    timeout_s: float = 5.0

    exchange_name: str = "DESK Exchange"
    mainnet_url: str = MAINNET_URL
    testnet_url: str = TESTNET_URL
    log_dir: str = "logs"

    # frozen: one Settings instance is shared by every handler in a call
    model_config = SettingsConfigDict(
        env_prefix="DESK_EXCHANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @property
    def endpoint(self) -> str:
        base = self.mainnet_url if self.network == "mainnet" else self.testnet_url
        return base.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.private_key and self.private_key.get_secret_value()) and bool(
            self.network
        )

    @classmethod
    def load(cls, path: str | None = None):
        cfg: dict = {}
        if path:
            with open(path, "r", encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}

        # environment wins over the YAML file
        pk = os.getenv("DESK_EXCHANGE_PRIVATE_KEY")
        net = os.getenv("DESK_EXCHANGE_NETWORK")
        if pk:
            cfg["private_key"] = pk
        if net:
            cfg["network"] = net

        return cls.model_validate(cfg)
