"""
TechHealth migration CDK application.
"""

from .bootstrap import STACK_ID, build_app, main
from .config import DeploymentTarget, configure_logging, load_deployment_target
from .techhealth_migration_stack import TechhealthMigrationStack

__all__ = [
    'STACK_ID',
    'build_app',
    'main',
    'DeploymentTarget',
    'configure_logging',
    'load_deployment_target',
    'TechhealthMigrationStack'
]
