"""Network configuration for deployments, loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, Union

from dotenv import load_dotenv

Network = Literal["localhost", "hardhat", "sepolia"]

DEFAULT_RPC_URLS: dict[Network, str] = {
    "localhost": "http://127.0.0.1:8545",
    "hardhat": "http://127.0.0.1:8545",
    "sepolia": "https://ethereum-sepolia-rpc.publicnode.com",
}

# Role -> account index (or literal address).
NAMED_ACCOUNTS: dict[str, Union[int, str]] = {
    "deployer": 0,
}


@dataclass
class NetworkConfig:
    """Connection and filesystem settings for a single network."""

    name: str = "localhost"
    rpc_url: str = DEFAULT_RPC_URLS["localhost"]
    private_key: Optional[str] = None
    artifacts_dir: Path = Path("artifacts")
    deployments_dir: Path = Path("deployments")
    named_accounts: dict[str, Union[int, str]] = field(
        default_factory=lambda: dict(NAMED_ACCOUNTS)
    )

    def deployments_path(self) -> Path:
        """Directory holding the deployment records for this network."""

        return self.deployments_dir / self.name


def load_network_config(network: Optional[str] = None) -> NetworkConfig:
    """Build a :class:`NetworkConfig` from ``.env`` and process environment."""

    load_dotenv()

    name = network or os.getenv("FAUCET_NETWORK", "localhost")
    rpc_url = os.getenv("RPC_URL") or DEFAULT_RPC_URLS.get(name)  # type: ignore[call-overload]
    if not rpc_url:
        raise ValueError(f"No RPC URL known for network {name!r}; set RPC_URL")

    return NetworkConfig(
        name=name,
        rpc_url=rpc_url,
        private_key=os.getenv("PRIVATE_KEY") or None,
        artifacts_dir=Path(os.getenv("ARTIFACTS_DIR", "artifacts")),
        deployments_dir=Path(os.getenv("DEPLOYMENTS_DIR", "deployments")),
    )
