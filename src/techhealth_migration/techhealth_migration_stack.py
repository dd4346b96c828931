"""
TechHealth Migration CDK Stack
"""
from aws_cdk import Stack
from constructs import Construct


class TechhealthMigrationStack(Stack):
    """
    Main CDK Stack for the TechHealth migration.

    Resources are not defined here yet; the stack only carries the
    deployment target it was constructed with.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
