# src/maxfile/cli.py
import sys
import argparse
import asyncio
import os
from pathlib import Path

# Module imports
from maxfile.config import IGNORE_FILE_NAME
from maxfile.core.finder import find_max_file_in_directory
from maxfile.core.lister import load_ignore_spec

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Find the file with the most non-empty lines in a directory."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Directory to search")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern of entries to skip (repeatable)"
    )
    parser.add_argument(
        "--no-ignore-file",
        action="store_true",
        help=f"Do not read {IGNORE_FILE_NAME} from the directory"
    )
    return parser

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        root_dir = Path(args.root_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        print(f"--- maxfile ---")
        print(f"Scanning: {root_dir}")

        # 2. Ignore Rules
        patterns = list(args.exclude)
        ignore_file = None
        if not args.no_ignore_file and (root_dir / IGNORE_FILE_NAME).exists():
            ignore_file = root_dir / IGNORE_FILE_NAME
            # The ignore file is a directory entry too; never count it
            patterns.append(f"/{IGNORE_FILE_NAME}")

        ignore_spec = load_ignore_spec(ignore_file, extra_patterns=patterns) if (ignore_file or patterns) else None

        # 3. Search
        try:
            winner = asyncio.run(find_max_file_in_directory(str(root_dir), ignore_spec))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if winner is None:
            print("No files found.")
            return

        print(winner)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
