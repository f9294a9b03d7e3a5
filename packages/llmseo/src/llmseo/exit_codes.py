from __future__ import annotations

OK = 0
WARN = 1
ERROR = 2
ERR_CONFIG_NOT_FOUND = 4
ERR_INVALID_CONFIG = 5
ERR_VALIDATION = 7
ERR_GENERATION_FAILED = 8
ERR_USAGE = 64
ERR_INTERNAL = 99
