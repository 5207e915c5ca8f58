#!/usr/bin/env python3
"""
Create the readers database if it does not exist

Usage:
    readers-create-db            # uses .env
    readers-create-db --env test # uses .env.test
    readers-create-db --env-file /etc/readers.env
"""

import sys
import asyncio
import argparse
import logging

from readers_api.config.settings import DatabaseConfig, load_env_file, ENV_FILES
from readers_api.database.schema import ensure_schema_exists


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(description="Create the readers database if it is absent")
    parser.add_argument("--env", choices=sorted(ENV_FILES), default="default",
                        help="Environment file to load (default: .env)")
    parser.add_argument("--env-file", help="Explicit env file path; overrides --env")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    load_env_file(args.env, env_file=args.env_file)

    config = DatabaseConfig.from_env()
    print(f"🏗️  Ensuring database '{config.database}' exists on {config.host}:{config.port}...")

    if asyncio.run(ensure_schema_exists(config)):
        print("✅ Database ready")
        return 0

    print("❌ Database could not be created - see log output above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
