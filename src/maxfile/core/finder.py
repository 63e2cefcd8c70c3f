# src/maxfile/core/finder.py
import os
from typing import Optional, Sequence

import pathspec

from maxfile.core.lister import list_directory
from maxfile.core.loader import Reader, load_files, read_text_file
from maxfile.utils.indexing import index_of_max
from maxfile.utils.lines import count_non_empty_lines


async def find_max_file(file_paths: Sequence[str], reader: Reader = read_text_file) -> Optional[str]:
    """
    Returns the path with the most non-empty lines, or None for an empty input.
    Ties resolve to the earliest path. Any read error is raised unchanged.
    """
    if not file_paths:
        return None

    loaded = await load_files(file_paths, reader=reader)
    line_counts = [count_non_empty_lines(f.content) for f in loaded]
    return file_paths[index_of_max(line_counts)]


async def find_max_file_in_directory(
    directory: str,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    reader: Reader = read_text_file,
) -> Optional[str]:
    """Finds the entry of `directory` with the most non-empty lines."""
    names = await list_directory(directory, ignore_spec)
    return await find_max_file([os.path.join(directory, name) for name in names], reader=reader)
