#!/usr/bin/env python3
"""Create a user and print the API key for the editor extension.

Usage:
    python scripts/create_user.py alice --email alice@example.com
"""

import argparse
import asyncio
import hashlib
import secrets
import sys

import logfire

from devsocial.application.usecase.user import CreateUserRequest, CreateUserUseCase
from devsocial.config import Settings
from devsocial.domain.error import DomainError
from devsocial.util.di.container import create_container
from devsocial.util.observability import configure_logfire


async def create_user(username: str, email: str | None) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(CreateUserUseCase)
            # Accounts created here have no password; the API key is the credential
            credential_hash = hashlib.sha256(secrets.token_bytes(32)).hexdigest()
            response = await use_case.execute(
                CreateUserRequest(
                    username=username,
                    credential_hash=credential_hash,
                    email=email,
                )
            )
    except DomainError as e:
        logfire.error("User creation failed", username=username, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        await container.close()

    print(f"user_id: {response.user_id}")
    print(f"api_key: {response.api_key}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("username")
    parser.add_argument("--email", default=None)
    args = parser.parse_args()

    configure_logfire(Settings())
    return asyncio.run(create_user(args.username, args.email))


if __name__ == "__main__":
    sys.exit(main())
