#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/__init__.py
