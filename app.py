#!/usr/bin/env python3
"""
AWS CDK App for the TechHealth migration
"""
from techhealth_migration.bootstrap import main


if __name__ == "__main__":
    main()
