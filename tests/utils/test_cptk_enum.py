#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for CPTK enumeration."""

import pytest

from cptk.exceptions import CPTKKeyError
from cptk.utils.cptk_enum import CptkEnum


class SimpleEnum(CptkEnum):
    """Simple enum for testing purposes."""

    ONE = (1, "TheOne", "Just one")
    TWO = (2, "TheTwo")


def test_lookup() -> None:
    """Test members are found by tag and by case-insensitive label."""
    assert SimpleEnum.from_tag(2) is SimpleEnum.TWO
    assert SimpleEnum.from_label("theone") is SimpleEnum.ONE
    assert SimpleEnum.get_label(1) == "TheOne"
    assert SimpleEnum.ONE.description == "Just one"
    assert SimpleEnum.TWO.description is None


def test_lists() -> None:
    """Test member listing."""
    assert SimpleEnum.labels() == ["TheOne", "TheTwo"]
    assert SimpleEnum.tags() == [1, 2]


def test_equality() -> None:
    """Test members compare equal to their tag and label."""
    assert SimpleEnum.ONE == 1
    assert SimpleEnum.ONE == "TheOne"
    assert SimpleEnum.ONE != SimpleEnum.TWO
    assert len({SimpleEnum.ONE, SimpleEnum.ONE, SimpleEnum.TWO}) == 2


def test_missing() -> None:
    """Test lookup of unknown members."""
    with pytest.raises(CPTKKeyError):
        SimpleEnum.from_tag(3)
    with pytest.raises(CPTKKeyError):
        SimpleEnum.from_label("TheThree")
    with pytest.raises(CPTKKeyError):
        SimpleEnum.from_label(1)  # type: ignore[arg-type]
