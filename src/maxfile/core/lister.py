# src/maxfile/core/lister.py
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pathspec

from maxfile.config import DEFAULT_ENCODING


def _scan_entries(directory: str) -> List[Tuple[str, bool]]:
    with os.scandir(directory) as entries:
        return [(entry.name, entry.is_dir()) for entry in entries]


async def list_directory(directory: str, ignore_spec: Optional[pathspec.PathSpec] = None) -> List[str]:
    """
    Lists the entry names of a directory, sorted by name.
    Entries matching ignore_spec are left out; subdirectories are matched as 'name/'
    so directory patterns like 'logs/' apply. Listing errors propagate as raised.
    """
    entries = await asyncio.to_thread(_scan_entries, directory)
    if ignore_spec is not None:
        entries = [
            (name, is_dir) for name, is_dir in entries
            if not ignore_spec.match_file(name + "/" if is_dir else name)
        ]
    return sorted(name for name, _ in entries)


def load_ignore_spec(ignore_file: Optional[Path], extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Loads rules from an ignore file (when it exists) and creates a GitIgnoreSpec object.
    Extra patterns, e.g. from the command line, are appended after the file's rules.
    """
    lines = []

    if ignore_file is not None and ignore_file.exists():
        with open(ignore_file, "r", encoding=DEFAULT_ENCODING) as f:
            lines = f.read().splitlines()

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except Exception as e:
        print(f"Warning: Could not parse ignore rules ({e}), nothing will be ignored.", file=sys.stderr)
        return pathspec.GitIgnoreSpec.from_lines([])
