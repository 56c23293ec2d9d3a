#!/usr/bin/env python
"""Simple configuration check.

Prints whether the variables the client reads are present in the
environment.  Credential values themselves are never printed.  Useful
for operators verifying a deployment before running anything against
the API.
"""

from __future__ import annotations

import os


def main() -> None:
    # Each entry is satisfied by the variable itself or its *_FILE variant
    keys = [
        "TRADING212_API_KEY",
        "TRADING212_API_SECRET",
        "TRADING212_ENV",
        "TRADING212_BASE_URL",
        "TRADING212_TIMEOUT",
        "LOG_LEVEL",
    ]
    print("Health Check:")
    for key in keys:
        if os.environ.get(key):
            status = "set"
        elif os.environ.get(f"{key}_FILE"):
            status = "set (file)"
        else:
            status = "missing"
        print(f"{key}: {status}")


if __name__ == "__main__":
    main()
