#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/parse/__init__.py
