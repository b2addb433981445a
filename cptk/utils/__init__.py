#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK utilities package.

Byte/hex conversions, host platform detection and plugin loading shared by
the rest of CPTK.
"""
