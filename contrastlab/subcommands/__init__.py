#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/__init__.py
