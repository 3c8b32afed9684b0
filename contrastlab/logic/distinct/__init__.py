#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/distinct/__init__.py
