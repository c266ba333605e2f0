"""Tests for paradigm names and validation."""

from __future__ import annotations

import pytest
from hypothesis import given

from colback import PARADIGMS, Paradigm, UnknownParadigmError, check_paradigm
from colback.paradigms import CALLBACK_PARADIGMS, CONVENTIONS
from tests.strategies import paradigm_names, unknown_paradigms


class TestParadigms:
    def test_paradigm_order(self):
        assert PARADIGMS == ("classical", "baroque", "modern", "promise", "deferred")

    def test_paradigms_is_immutable(self):
        with pytest.raises(TypeError):
            PARADIGMS[0] = "other"  # type: ignore[index]

    def test_members_compare_equal_to_names(self):
        assert Paradigm.CLASSICAL == "classical"
        assert str(Paradigm.DEFERRED) == "deferred"

    def test_callback_paradigms(self):
        assert CALLBACK_PARADIGMS == {Paradigm.CLASSICAL, Paradigm.BAROQUE, Paradigm.MODERN}

    def test_every_paradigm_has_a_convention(self):
        assert set(CONVENTIONS) == set(Paradigm)


class TestCheckParadigm:
    @given(paradigm_names)
    def test_known_names(self, name):
        assert check_paradigm(name) is Paradigm(name)

    def test_accepts_members(self):
        assert check_paradigm(Paradigm.MODERN) is Paradigm.MODERN

    @given(unknown_paradigms)
    def test_unknown_names_rejected(self, name):
        with pytest.raises(UnknownParadigmError) as exc_info:
            check_paradigm(name)
        assert exc_info.value.paradigm == name

    def test_unhashable_value_rejected(self):
        with pytest.raises(UnknownParadigmError):
            check_paradigm(["classical"])

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="unknown paradigm"):
            check_paradigm("callback-hell")
