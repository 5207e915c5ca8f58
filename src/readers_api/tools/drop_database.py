#!/usr/bin/env python3
"""
Drop the readers database after a test run (best-effort)

Usage:
    readers-drop-db                # uses .env.test
    readers-drop-db --env default  # uses .env
"""

import sys
import asyncio
import argparse
import logging

from readers_api.config.settings import DatabaseConfig, load_env_file, ENV_FILES
from readers_api.database.schema import drop_schema


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(description="Drop the readers database")
    parser.add_argument("--env", choices=sorted(ENV_FILES), default="test",
                        help="Environment file to load (default: .env.test)")
    parser.add_argument("--env-file", help="Explicit env file path; overrides --env")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    load_env_file(args.env, env_file=args.env_file)

    config = DatabaseConfig.from_env()
    print(f"🗑️  Dropping database '{config.database}' on {config.host}:{config.port}...")

    asyncio.run(drop_schema(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
