"""Deploy scripts, in execution order."""

from .deploy_tokens import deploy_tokens

DEPLOY_SCRIPTS = [deploy_tokens]

__all__ = ["DEPLOY_SCRIPTS", "deploy_tokens"]
