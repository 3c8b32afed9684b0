#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/__init__.py
