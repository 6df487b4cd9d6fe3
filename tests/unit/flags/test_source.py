"""Unit tests for flag value sources."""

from __future__ import annotations

import pytest

from launcher_flags.config import InvalidSettingValueError
from launcher_flags.flags import (
    BooleanFlag,
    DefaultValueSource,
    FlagValueSource,
    InMemoryValueSource,
    IntFlag,
    ReaderValueSource,
    override_readers,
)

F1 = BooleanFlag(1, "F1", False)
F2 = BooleanFlag(2, "F2", True)
N1 = IntFlag(3, "N1", 3)


class TestDefaultValueSource:
    def test_answers_defaults(self) -> None:
        source = DefaultValueSource()
        assert source.value(F1) is False
        assert source.value(F2) is True
        assert source.value(N1) == 3

    def test_ignores_reader_overrides(self) -> None:
        with override_readers(boolean=lambda flag: True):
            assert DefaultValueSource().boolean_value(F1) is False

    def test_is_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            FlagValueSource()  # type: ignore[abstract]


class TestReaderValueSource:
    def test_follows_process_wide_readers(self) -> None:
        source = ReaderValueSource()
        assert source.value(F1) is False
        with override_readers(boolean=lambda flag: True, int_=lambda flag: 7):
            assert source.value(F1) is True
            assert source.value(N1) == 7
        assert source.value(N1) == 3


class TestInMemoryValueSource:
    def test_falls_back_to_defaults(self) -> None:
        source = InMemoryValueSource()
        assert source.value(F2) is True
        assert source.value(N1) == 3

    def test_init_with_values(self) -> None:
        source = InMemoryValueSource({"F1": True, "N1": 7})
        assert source.value(F1) is True
        assert source.value(N1) == 7

    def test_set_by_flag_and_name(self) -> None:
        source = InMemoryValueSource()
        source.set(F1, True)
        source.set("F2", False)
        assert source.value(F1) is True
        assert source.value(F2) is False

    def test_unset_restores_default(self) -> None:
        source = InMemoryValueSource({"F1": True})
        source.unset(F1)
        source.unset("MISSING")
        assert source.value(F1) is False

    def test_flags_sharing_a_default_are_distinguished(self) -> None:
        a = BooleanFlag(10, "A", False)
        b = BooleanFlag(11, "B", False)
        source = InMemoryValueSource({"A": True})
        assert source.value(a) is True
        assert source.value(b) is False

    def test_raw_strings_are_coerced(self) -> None:
        source = InMemoryValueSource({"F2": "false", "F1": " yes ", "N1": "42"})
        assert source.value(F2) is False
        assert source.value(F1) is True
        assert source.value(N1) == 42

    def test_uncoercible_value_names_the_flag(self) -> None:
        source = InMemoryValueSource({"F1": "maybe"})
        with pytest.raises(InvalidSettingValueError) as info:
            source.value(F1)
        assert info.value.flag == "F1"
        assert info.value.detail == {"setting": "F1", "value": "maybe", "flag": "F1"}
