#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行生克关系单元测试"""

import pytest

from core.calculators.bazi_core import (
    ELEMENT_RELATIONS,
    cycle_distance,
    get_controlled_by_element,
    get_controlled_element,
    get_element_relation,
    get_producing_element,
    get_producing_from_element,
)
from core.exceptions import InvariantViolationError


class TestElementRelation:
    @pytest.mark.parametrize("target, relation", [
        ("wood", "same"),
        ("fire", "me_producing"),
        ("earth", "me_controlling"),
        ("metal", "controlling_me"),
        ("water", "producing_me"),
    ])
    def test_relations_from_wood(self, target, relation):
        assert get_element_relation("wood", target) == relation

    def test_relations_from_water(self):
        assert get_element_relation("water", "metal") == "producing_me"
        assert get_element_relation("water", "earth") == "controlling_me"
        assert get_element_relation("water", "fire") == "me_controlling"

    def test_unknown_element(self):
        with pytest.raises(InvariantViolationError):
            get_element_relation("wood", "wind")

    @pytest.mark.parametrize("lookup", [
        get_producing_element,
        get_controlled_element,
        get_producing_from_element,
        get_controlled_by_element,
    ])
    def test_unknown_element_in_cycle_lookups(self, lookup):
        with pytest.raises(InvariantViolationError) as exc_info:
            lookup("wind")
        assert exc_info.value.symbol == "wind"


class TestCycles:
    def test_generation_cycle(self):
        assert [get_producing_element(e) for e in ("wood", "fire", "earth", "metal", "water")] == \
            ["fire", "earth", "metal", "water", "wood"]

    def test_restriction_cycle(self):
        assert get_controlled_element("wood") == "earth"
        assert get_controlled_element("earth") == "water"
        assert get_controlled_element("water") == "fire"
        assert get_controlled_element("fire") == "metal"
        assert get_controlled_element("metal") == "wood"

    def test_inverse_lookups(self):
        for element in ELEMENT_RELATIONS:
            assert get_producing_element(get_producing_from_element(element)) == element
            assert get_controlled_element(get_controlled_by_element(element)) == element

    def test_cycle_distance(self):
        assert cycle_distance("water", "water") == 0
        assert cycle_distance("water", "wood") == 1
        assert cycle_distance("water", "metal") == 4

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ELEMENT_RELATIONS["wood"]["produces"] = "water"
