"""
Configuration module for the TechHealth migration CDK app.

This module resolves the deployment target from environment variables and
sets up logging for the synth process.
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import aws_cdk as cdk
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ACCOUNT_ENV_VAR = "CDK_DEFAULT_ACCOUNT"
REGION_ENV_VAR = "CDK_DEFAULT_REGION"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class DeploymentTarget:
    """Account and region the stack is deployed to.

    Either field may be None, in which case the CDK toolchain resolves it.
    """

    account: Optional[str] = None
    region: Optional[str] = None

    def to_environment(self) -> cdk.Environment:
        """Build the CDK Environment struct for this target."""
        return cdk.Environment(account=self.account, region=self.region)

    def to_stack_props(self) -> Dict[str, Any]:
        """Return the target as plain stack properties."""
        return {"env": {"account": self.account, "region": self.region}}


def load_deployment_target(environ: Optional[Mapping[str, str]] = None) -> DeploymentTarget:
    """
    Read the deployment target from the environment.

    Values are passed through as-is. Unset variables become None.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        DeploymentTarget: The resolved target
    """
    if environ is None:
        environ = os.environ

    return DeploymentTarget(
        account=environ.get(ACCOUNT_ENV_VAR),
        region=environ.get(REGION_ENV_VAR)
    )


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Configure root logging from LOG_LEVEL.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        int: The numeric log level applied
    """
    if environ is None:
        environ = os.environ

    level_name = environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    numeric_level = getattr(logging, level_name.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level)

    logger.debug(f"Log level: {logging.getLevelName(numeric_level)}")
    return numeric_level


def load_dotenv_file(path: Optional[str] = None) -> bool:
    """Load a local .env file without overriding the real environment."""
    return load_dotenv(dotenv_path=path, override=False)
