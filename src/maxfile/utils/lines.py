# src/maxfile/utils/lines.py

def count_non_empty_lines(text: str) -> int:
    """
    Counts the lines of text that are not empty.
    Splits on '\\n' only, so a trailing newline adds an empty segment (not counted)
    and a line holding just '\\r' still counts.
    """
    return sum(1 for line in text.split("\n") if len(line) > 0)
