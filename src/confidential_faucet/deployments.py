"""Contract publishing and deployment tracking on top of web3.py."""

from __future__ import annotations

import json
import logging
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from .config import NetworkConfig

logger = logging.getLogger(__name__)

MIGRATIONS_FILE = ".migrations.json"


class DeploymentError(RuntimeError):
    """Raised when a contract cannot be published."""


class ArtifactNotFoundError(DeploymentError):
    """Raised when no compiled artifact exists for a contract name."""


class DeploymentNotFoundError(DeploymentError):
    """Raised when a named deployment has never been recorded."""


@dataclass(frozen=True)
class Artifact:
    """Compiled contract output: ABI plus creation bytecode."""

    contract_name: str
    abi: list[dict[str, Any]]
    bytecode: str

    @classmethod
    def load(cls, artifacts_dir: Path, contract_name: str) -> "Artifact":
        """Locate ``<contract_name>.json`` anywhere below ``artifacts_dir``."""

        for path in sorted(artifacts_dir.rglob(f"{contract_name}.json")):
            data = json.loads(path.read_text())
            if "abi" in data and "bytecode" in data:
                return cls(contract_name, data["abi"], data["bytecode"])
        raise ArtifactNotFoundError(
            f"No artifact for {contract_name!r} under {artifacts_dir}"
        )


@dataclass
class DeploymentRecord:
    """A published contract as tracked per network."""

    name: str
    address: str
    abi: list[dict[str, Any]] = field(default_factory=list)
    transaction_hash: Optional[str] = None
    bytecode: Optional[str] = None
    args: list[Any] = field(default_factory=list)
    newly_deployed: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "abi": self.abi,
            "transactionHash": self.transaction_hash,
            "bytecode": self.bytecode,
            "args": self.args,
        }

    @classmethod
    def from_json(cls, name: str, data: dict[str, Any]) -> "DeploymentRecord":
        return cls(
            name=name,
            address=data["address"],
            abi=data.get("abi", []),
            transaction_hash=data.get("transactionHash"),
            bytecode=data.get("bytecode"),
            args=list(data.get("args", [])),
        )


class DeploymentsManager:
    """Publish contracts and persist one JSON record per deployed name.

    Re-deploying a name whose stored bytecode and constructor args are
    unchanged reuses the stored record instead of sending a transaction.
    """

    def __init__(
        self,
        config: NetworkConfig,
        w3: Web3,
        signer: Optional[LocalAccount] = None,
    ) -> None:
        self.config = config
        self.w3 = w3
        self.signer = signer

    @property
    def path(self) -> Path:
        return self.config.deployments_path()

    def deploy(
        self,
        name: str,
        from_: str,
        log: bool = False,
        args: Sequence[Any] = (),
    ) -> DeploymentRecord:
        """Publish ``name`` from ``from_`` unless an identical deployment exists."""

        artifact = Artifact.load(self.config.artifacts_dir, name)
        # Args must be storable before anything is sent.
        json.dumps(list(args))
        existing = self.get_or_none(name)
        if (
            existing is not None
            and existing.bytecode == artifact.bytecode
            and existing.args == list(args)
        ):
            if log:
                logger.info('reusing "%s" at %s', name, existing.address)
            return existing

        tx_hash, address, gas_used = self._submit(artifact, from_, args)
        record = DeploymentRecord(
            name=name,
            address=address,
            abi=artifact.abi,
            transaction_hash=tx_hash,
            bytecode=artifact.bytecode,
            args=list(args),
            newly_deployed=True,
        )
        self.save(record)
        if log:
            logger.info(
                'deploying "%s" (tx: %s)...: deployed at %s with %s gas',
                name,
                tx_hash,
                address,
                gas_used,
            )
        return record

    def _submit(
        self, artifact: Artifact, from_: str, args: Sequence[Any]
    ) -> tuple[str, str, int]:
        contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        constructor = contract.constructor(*args)
        sender = Web3.to_checksum_address(from_)

        if self.signer is not None and self.signer.address == sender:
            txn = constructor.build_transaction(
                {
                    "from": sender,
                    "nonce": self.w3.eth.get_transaction_count(sender),
                }
            )
            signed = self.signer.sign_transaction(txn)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = constructor.transact({"from": sender})

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        tx_hex = Web3.to_hex(tx_hash)
        if receipt["status"] != 1 or not receipt["contractAddress"]:
            raise DeploymentError(
                f"Deployment of {artifact.contract_name} reverted (tx: {tx_hex})"
            )
        return tx_hex, receipt["contractAddress"], receipt["gasUsed"]

    def save(self, record: DeploymentRecord) -> None:
        self.path.mkdir(parents=True, exist_ok=True)
        target = self.path / f"{record.name}.json"
        target.write_text(json.dumps(record.to_json(), indent=2))

    def get_or_none(self, name: str) -> Optional[DeploymentRecord]:
        target = self.path / f"{name}.json"
        if not target.exists():
            return None
        return DeploymentRecord.from_json(name, json.loads(target.read_text()))

    def get(self, name: str) -> DeploymentRecord:
        record = self.get_or_none(name)
        if record is None:
            raise DeploymentNotFoundError(
                f"No deployment named {name!r} on {self.config.name}"
            )
        return record

    def all(self) -> dict[str, DeploymentRecord]:
        """Return every recorded deployment on the active network."""

        if not self.path.exists():
            return {}
        records = {}
        for target in sorted(self.path.glob("*.json")):
            if target.name == MIGRATIONS_FILE:
                continue
            records[target.stem] = DeploymentRecord.from_json(
                target.stem, json.loads(target.read_text())
            )
        return records

    def read_migrations(self) -> dict[str, int]:
        target = self.path / MIGRATIONS_FILE
        if not target.exists():
            return {}
        return json.loads(target.read_text())

    def record_migration(self, script_id: str) -> None:
        """Mark a deploy script id as executed on this network."""

        migrations = self.read_migrations()
        migrations[script_id] = int(time.time())
        self.path.mkdir(parents=True, exist_ok=True)
        (self.path / MIGRATIONS_FILE).write_text(json.dumps(migrations, indent=2))

    def reset(self) -> None:
        """Forget every deployment and migration recorded for this network."""

        if self.path.exists():
            shutil.rmtree(self.path)


@dataclass
class RuntimeEnvironment:
    """Handle passed to every deploy script."""

    config: NetworkConfig
    w3: Web3
    deployments: DeploymentsManager
    signer: Optional[LocalAccount] = None

    @property
    def network(self) -> str:
        return self.config.name

    def get_named_accounts(self) -> dict[str, str]:
        """Resolve each configured role to a checksummed address."""

        resolved: dict[str, str] = {}
        node_accounts: Optional[list[str]] = None
        for role, ref in self.config.named_accounts.items():
            if isinstance(ref, str):
                resolved[role] = Web3.to_checksum_address(ref)
                continue
            if ref == 0 and self.signer is not None:
                resolved[role] = self.signer.address
                continue
            if node_accounts is None:
                node_accounts = list(self.w3.eth.accounts)
            if ref >= len(node_accounts):
                raise RuntimeError(
                    f"Named account {role!r} refers to index {ref}, but the node "
                    f"exposes {len(node_accounts)} accounts"
                )
            resolved[role] = Web3.to_checksum_address(node_accounts[ref])
        return resolved


def create_environment(config: NetworkConfig) -> RuntimeEnvironment:
    """Connect to the configured node and build a deploy environment."""

    w3 = Web3(Web3.HTTPProvider(config.rpc_url))
    if not w3.is_connected():
        raise RuntimeError(f"Could not connect to RPC URL: {config.rpc_url}")
    logger.info("Connected to %s at %s", config.name, config.rpc_url)

    signer = Account.from_key(config.private_key) if config.private_key else None
    deployments = DeploymentsManager(config, w3, signer)
    return RuntimeEnvironment(config, w3, deployments, signer)
