#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/__init__.py
