#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/logger.py

import argparse
import os
import sys

from contrastlab.core import config as c


def paint(code: str, text: str, stream=None) -> str:
    """
    Wrap text in an ANSI code unless NO_COLOR is set or the stream
    (stdout by default) is not a terminal.
    """
    stream = sys.stdout if stream is None else stream
    if "NO_COLOR" in os.environ or not getattr(stream, "isatty", lambda: False)():
        return text
    return f"{code}{text}{c.RESET}"


def log(level: str, message: str) -> None:
    """
    Print '[level] message'. 'info' and 'success' go to stdout so they
    can be piped; warnings and errors go to stderr.
    """
    level = str(level).lower()
    stream = sys.stdout if level in c.STDOUT_LEVELS else sys.stderr
    tag = paint(c.MSG_BOLD_COLORS.get(level, c.RESET), f"[{level}]", stream)
    msg = paint(c.MSG_COLORS.get(level, c.RESET), message, stream)
    print(f"{tag} {msg}", file=stream)


class ContrastlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Report usage errors through the logger with a pointer to -h,
        then exit with the standard CLI error code 2.
        """
        log('error', message)
        log('info', f"use '{self.prog} -h' to see all options")
        sys.exit(2)
