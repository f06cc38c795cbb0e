"""Seed script — registers demo users via the REST API.

Requires the "scripts" extra (pip install -e ".[scripts]").

Usage:
    python scripts/seed.py              # uses http://localhost:5000
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"

USERS = [
    {
        "firstName": "Alice",
        "lastName": "Smith",
        "email": "alice@example.com",
        "password": "password123",
    },
    {
        "firstName": "Bob",
        "lastName": "Jones",
        "email": "bob@example.com",
        "password": "password123",
    },
]


def register(client: httpx.Client, user: dict) -> None:
    resp = client.post(f"{BASE_URL}/api/users/", json=user)
    if resp.status_code == 201:
        print(f"  Registered {user['email']}")
    elif resp.status_code == 400 and resp.json().get("msg") == "User already exists":
        print(f"  {user['email']} already exists, skipping")
    else:
        resp.raise_for_status()


def main() -> None:
    print(f"Seeding against {BASE_URL}\n")

    with httpx.Client(timeout=10) as client:
        print("Users:")
        for user in USERS:
            register(client, user)

        resp = client.get(f"{BASE_URL}/api/users/")
        resp.raise_for_status()
        print(f"\n{len(resp.json())} users registered")

    print("\nDone!")


if __name__ == "__main__":
    main()
