"""Publish the four confidential token contracts."""

from __future__ import annotations

from ..deployments import RuntimeEnvironment
from ..runner import deploy_script


@deploy_script("deploy_tokens_only", tags=["Tokens"])
def deploy_tokens(env: RuntimeEnvironment) -> None:
    deployer = env.get_named_accounts()["deployer"]
    deploy = env.deployments.deploy

    c_eth = deploy("ConfidentialETH", from_=deployer, log=True)
    c_btc = deploy("ConfidentialBTC", from_=deployer, log=True)
    c_usdc = deploy("ConfidentialUSDC", from_=deployer, log=True)
    c_dai = deploy("ConfidentialDAI", from_=deployer, log=True)

    print(f"cETH: {c_eth.address}")
    print(f"cBTC: {c_btc.address}")
    print(f"cUSDC: {c_usdc.address}")
    print(f"cDAI: {c_dai.address}")
