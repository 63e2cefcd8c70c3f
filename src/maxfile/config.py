# src/maxfile/config.py

DEFAULT_ENCODING = "utf-8"

# Optional per-directory ignore file, gitignore syntax
IGNORE_FILE_NAME = ".maxfileignore"
