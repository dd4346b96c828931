"""
Bootstrap for the TechHealth migration CDK app.

Creates the CDK App, resolves the deployment target and registers the single
TechhealthMigrationStack under a fixed logical id.
"""

import logging
from typing import Callable, Mapping, Optional

import aws_cdk as cdk
from constructs import Construct

from .config import configure_logging, load_deployment_target, load_dotenv_file
from .techhealth_migration_stack import TechhealthMigrationStack

logger = logging.getLogger(__name__)

STACK_ID = "TechhealthMigrationStack"


def build_app(
    environ: Optional[Mapping[str, str]] = None,
    app_factory: Optional[Callable[[], cdk.App]] = None,
    stack_factory: Optional[Callable[..., Construct]] = None
) -> cdk.App:
    """
    Build the CDK app with its one stack.

    Args:
        environ: Environment to read the deployment target from, defaults to os.environ
        app_factory: Creates the app, defaults to aws_cdk.App
        stack_factory: Creates the stack, defaults to TechhealthMigrationStack

    Returns:
        cdk.App: The app holding the stack
    """
    if app_factory is None:
        app_factory = cdk.App
    if stack_factory is None:
        stack_factory = TechhealthMigrationStack

    app = app_factory()

    target = load_deployment_target(environ)
    logger.debug(f"Deployment target for {STACK_ID}: {target.to_stack_props()}")

    stack_factory(app, STACK_ID, env=target.to_environment())

    return app


def main(environ: Optional[Mapping[str, str]] = None) -> None:
    """Main synth function"""
    load_dotenv_file()
    configure_logging(environ)

    try:
        app = build_app(environ)
        app.synth()
    except Exception:
        logger.exception(f"Failed to synthesize {STACK_ID}")
        raise
