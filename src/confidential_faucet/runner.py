"""Run tagged deploy scripts once per network."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, Optional, Sequence

from .config import load_network_config
from .deployments import RuntimeEnvironment, create_environment

logger = logging.getLogger(__name__)

DeployScript = Callable[[RuntimeEnvironment], object]


def deploy_script(
    script_id: str, tags: Iterable[str] = ()
) -> Callable[[DeployScript], DeployScript]:
    """Attach a stable ``id`` and selection ``tags`` to a deploy function.

    A script whose id is already recorded for the network is not run again.
    """

    def decorate(func: DeployScript) -> DeployScript:
        func.id = script_id  # type: ignore[attr-defined]
        func.tags = list(tags)  # type: ignore[attr-defined]
        return func

    return decorate


def run_deploy_scripts(
    env: RuntimeEnvironment,
    scripts: Sequence[DeployScript],
    tags: Optional[Iterable[str]] = None,
) -> list[str]:
    """Execute ``scripts`` in order and return the ids that actually ran."""

    wanted = set(tags) if tags else None
    executed: list[str] = []
    migrations = env.deployments.read_migrations()

    for script in scripts:
        script_id = getattr(script, "id", None)
        script_tags = set(getattr(script, "tags", ()))
        name = script_id or getattr(script, "__name__", repr(script))

        if wanted is not None and not (script_tags & wanted):
            logger.debug("Skipping %s: tags %s not selected", name, sorted(script_tags))
            continue
        if script_id and script_id in migrations:
            logger.info("Skipping %s: already executed on %s", name, env.network)
            continue

        script(env)

        if script_id:
            env.deployments.record_migration(script_id)
            migrations[script_id] = 0
            executed.append(script_id)

    return executed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faucet-deploy",
        description="Deploy the confidential token contracts.",
    )
    parser.add_argument("--network", help="Network name (defaults to FAUCET_NETWORK)")
    parser.add_argument(
        "--tags", help="Comma-separated tags; only matching scripts run"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Discard recorded deployments for the network before running",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    from .deploy import DEPLOY_SCRIPTS

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    tags = [tag.strip() for tag in args.tags.split(",") if tag.strip()] if args.tags else None
    try:
        env = create_environment(load_network_config(args.network))
        if args.reset:
            env.deployments.reset()
        run_deploy_scripts(env, DEPLOY_SCRIPTS, tags)
    except Exception as exc:  # noqa: BLE001 - report and exit non-zero
        logger.error("Deployment failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
