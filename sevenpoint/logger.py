import os
import sys

LEVELS_MAP = {"DEBUG": 0,
              "INFO": 1,
              "WARN": 2,
              "ERROR": 3}
LOG_LEVEL = LEVELS_MAP["WARN"]


def set_log_level(level):
    global LOG_LEVEL
    if level not in LEVELS_MAP:
        raise ValueError("unknown log level %r, expected one of %s" % (level, ", ".join(LEVELS_MAP)))
    LOG_LEVEL = LEVELS_MAP[level]


def is_enabled_for(level):
    return LOG_LEVEL <= LEVELS_MAP[level]


def _log(level, *args):
    if is_enabled_for(level):
        print("[sevenpoint %s]" % level, *args, file=sys.stderr)


def debug(*args):
    _log("DEBUG", *args)


def info(*args):
    _log("INFO", *args)


def warn(*args):
    _log("WARN", *args)


def error(*args):
    _log("ERROR", *args)


# SEVENPOINT_LOG_LEVEL=DEBUG prints every skipped root and rejected sample
set_log_level(os.environ.get("SEVENPOINT_LOG_LEVEL", "WARN").upper())
