#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/__init__.py
