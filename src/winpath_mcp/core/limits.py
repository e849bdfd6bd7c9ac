from __future__ import annotations

# Legacy maximum path length in Windows (without extended syntax).
MAX_PATH = 260

# Ceiling for extended-syntax paths (short.MaxValue on the native side).
MAX_LONG_PATH = 32_767

EXTENDED_PATH_PREFIX = "\\\\?\\"
EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"
UNC_PREFIX = "\\\\"

# Tool-level input ceilings
MAX_PATHS_PER_REQUEST = 10_000
MAX_PATH_CHARS = MAX_LONG_PATH
