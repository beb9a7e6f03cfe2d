#!/usr/bin/env python3
"""
AWS Lambda alias & function deploy tasks

- create-alias: create an alias pointing at a function version
- update-alias: update an existing alias
- migrate-alias: update an alias, creating it when it does not exist
- update-function: push new code and configuration to a function

This script supports running directly from a source checkout that uses a
src/ layout. It adds the local `src/` directory to sys.path before importing.
For production use, prefer installing the project and using the provided
`lambda-tasks` console script.

Examples:
  python3 main.py --region eu-west-1 create-alias \\
      --function-name f1 --alias-name prod --function-version 2

  python3 main.py update-function --function-name f1 \\
      --zip-file build/f1.zip --memory-size 512 --publish
"""

import os
import sys

# Add src/ to path to import modules directly
REPO_ROOT = os.path.dirname(os.path.abspath(__file__))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from cli import main

if __name__ == "__main__":
    sys.exit(main())
