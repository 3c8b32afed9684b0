#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    contrast,
    distinct,
    parse
)

SUBCOMMANDS = {
    'contrast': contrast,
    'distinct': distinct,
    'parse': parse
}
