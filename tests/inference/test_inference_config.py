"""Tests for InferenceConfig validation and immutability."""

from __future__ import annotations

import dataclasses

import pytest

from json_type_infer.inference import InferenceConfig
from json_type_infer.values import DEFAULT_MAX_DEPTH


class TestDefaults:
    def test_default_values(self) -> None:
        config = InferenceConfig()
        assert config.max_depth == DEFAULT_MAX_DEPTH
        assert config.element_suffix == "Elem"

    def test_frozen(self) -> None:
        config = InferenceConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_depth = 3  # type: ignore[misc]

    def test_equality(self) -> None:
        assert InferenceConfig(max_depth=5) == InferenceConfig(max_depth=5)


class TestValidation:
    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_max_depth_must_be_positive(self, max_depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            InferenceConfig(max_depth=max_depth)

    def test_max_depth_one_is_allowed(self) -> None:
        assert InferenceConfig(max_depth=1).max_depth == 1

    @pytest.mark.parametrize("suffix", ["", "  "])
    def test_blank_element_suffix_rejected(self, suffix: str) -> None:
        with pytest.raises(ValueError, match="element_suffix"):
            InferenceConfig(element_suffix=suffix)
