import io
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, call

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from confidential_faucet.deploy import DEPLOY_SCRIPTS, deploy_tokens

DEPLOYER = "0x1111111111111111111111111111111111111111"
ADDRESSES = {
    "ConfidentialETH": "0xE7e7E7e7E7e7e7E7E7E7E7e7e7e7E7e7E7E7E7e7",
    "ConfidentialBTC": "0xB7b7B7b7b7B7B7b7B7b7b7b7b7B7B7B7b7B7b7b7",
    "ConfidentialUSDC": "0xC7c7C7C7c7c7c7c7c7C7c7c7C7c7C7c7c7c7c7C7",
    "ConfidentialDAI": "0xD7D7d7d7d7D7d7D7D7D7D7d7D7d7D7d7d7d7D7D7",
}


def _env() -> MagicMock:
    env = MagicMock()
    env.get_named_accounts.return_value = {"deployer": DEPLOYER}
    env.deployments.deploy.side_effect = lambda name, **kwargs: SimpleNamespace(
        address=ADDRESSES[name]
    )
    return env


class DeployTokensTests(unittest.TestCase):
    def test_deploys_four_contracts_in_order_from_deployer(self) -> None:
        env = _env()
        with redirect_stdout(io.StringIO()):
            deploy_tokens(env)

        self.assertEqual(
            env.deployments.deploy.call_args_list,
            [
                call("ConfidentialETH", from_=DEPLOYER, log=True),
                call("ConfidentialBTC", from_=DEPLOYER, log=True),
                call("ConfidentialUSDC", from_=DEPLOYER, log=True),
                call("ConfidentialDAI", from_=DEPLOYER, log=True),
            ],
        )

    def test_prints_symbol_and_address_report(self) -> None:
        env = _env()
        out = io.StringIO()
        with redirect_stdout(out):
            deploy_tokens(env)

        self.assertEqual(
            out.getvalue().splitlines(),
            [
                f"cETH: {ADDRESSES['ConfidentialETH']}",
                f"cBTC: {ADDRESSES['ConfidentialBTC']}",
                f"cUSDC: {ADDRESSES['ConfidentialUSDC']}",
                f"cDAI: {ADDRESSES['ConfidentialDAI']}",
            ],
        )

    def test_failure_aborts_remaining_deployments(self) -> None:
        env = _env()
        env.deployments.deploy.side_effect = [
            SimpleNamespace(address=ADDRESSES["ConfidentialETH"]),
            ConnectionError("node went away"),
        ]
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(ConnectionError):
            deploy_tokens(env)

        self.assertEqual(env.deployments.deploy.call_count, 2)
        self.assertEqual(out.getvalue(), "")

    def test_account_resolution_failure_propagates(self) -> None:
        env = _env()
        env.get_named_accounts.side_effect = RuntimeError("no accounts")
        with self.assertRaises(RuntimeError):
            deploy_tokens(env)
        env.deployments.deploy.assert_not_called()

    def test_script_metadata(self) -> None:
        self.assertEqual(deploy_tokens.id, "deploy_tokens_only")
        self.assertEqual(deploy_tokens.tags, ["Tokens"])
        self.assertIn(deploy_tokens, DEPLOY_SCRIPTS)


if __name__ == "__main__":
    unittest.main()
