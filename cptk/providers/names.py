#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Well-known cryptographic provider names."""

from cptk.utils.cptk_enum import CptkEnum


class KnownProvider(CptkEnum):
    """Names of the providers test suites commonly compare against."""

    BC = (0, "BC", "BouncyCastle")
    SUN = (1, "SUN", "SUN")
    SUN_JCE = (2, "SunJCE", "SunJCE")
    SUN_RSA_SIGN = (3, "SunRsaSign", "SunRsaSign")
    SUN_EC = (4, "SunEC", "SunEC")
    OPEN_JCE_PLUS = (5, "OpenJCEPlus", "OpenJCEPlus")
    OPEN_JCE_PLUS_FIPS = (6, "OpenJCEPlusFIPS", "OpenJCEPlus FIPS")
