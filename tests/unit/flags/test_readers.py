"""Unit tests for the process-wide flag readers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from launcher_flags.flags import BooleanFlag, IntFlag, override_readers, readers
from launcher_flags.testing.fixtures import ReaderOverrides

F1 = BooleanFlag(1, "F1", False)
F2 = BooleanFlag(2, "F2", True)
N1 = IntFlag(3, "N1", 3)

boolean_flags = st.builds(
    BooleanFlag,
    tracking_id=st.integers(min_value=0, max_value=2**31 - 1),
    name=st.text(min_size=1, max_size=40),
    default_value=st.booleans(),
)


def _always_true(flag: BooleanFlag) -> bool:
    return True


# ---------------------------------------------------------------------------
# Default policy
# ---------------------------------------------------------------------------


class TestDefaultPolicy:
    @given(boolean_flags)
    def test_reads_baked_in_default(self, flag: BooleanFlag) -> None:
        assert flag.get() is flag.default_value

    @given(st.integers())
    def test_int_reads_baked_in_default(self, value: int) -> None:
        assert IntFlag(1, "N", value).get() == value

    def test_not_overridden_initially(self) -> None:
        assert readers.readers_overridden() is False
        assert readers.get_boolean_reader() is readers.default_boolean_reader
        assert readers.get_int_reader() is readers.default_int_reader


# ---------------------------------------------------------------------------
# Replacing the policy
# ---------------------------------------------------------------------------


class TestReplacePolicy:
    def test_all_true_round_trip(self, flag_readers: ReaderOverrides) -> None:
        assert F1.get() is False
        assert F2.get() is True

        previous = readers.set_boolean_reader(_always_true)
        assert F1.get() is True
        assert F2.get() is True
        assert readers.readers_overridden() is True

        readers.set_boolean_reader(previous)
        assert F1.get() is False
        assert F2.get() is True

    def test_int_override(self, flag_readers: ReaderOverrides) -> None:
        assert N1.get() == 3
        flag_readers.set_int(lambda flag: 7)
        assert N1.get() == 7

    def test_boolean_override_leaves_int_reads_alone(self, flag_readers: ReaderOverrides) -> None:
        flag_readers.set_boolean(_always_true)
        assert N1.get() == 3

    def test_name_keyed_policy_distinguishes_flags(self, flag_readers: ReaderOverrides) -> None:
        a = BooleanFlag(10, "A", False)
        b = BooleanFlag(11, "B", False)
        overrides = {"A": True}
        flag_readers.set_boolean(lambda flag: overrides.get(flag.name, flag.default_value))
        assert a.get() is True
        assert b.get() is False

    def test_reset_restores_defaults(self, flag_readers: ReaderOverrides) -> None:
        flag_readers.set_boolean(_always_true)
        flag_readers.set_int(lambda flag: 0)
        readers.reset_readers()
        assert F1.get() is False
        assert N1.get() == 3

    @pytest.mark.parametrize("bad", [None, True, 3])
    def test_non_callable_rejected(self, bad: object) -> None:
        with pytest.raises(TypeError):
            readers.set_boolean_reader(bad)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            readers.set_int_reader(bad)  # type: ignore[arg-type]
        assert F1.get() is False

    def test_policy_may_observe_reads(self, flag_readers: ReaderOverrides) -> None:
        seen: list[str] = []

        def recording(flag: BooleanFlag) -> bool:
            seen.append(flag.name)
            return flag.default_value

        flag_readers.set_boolean(recording)
        F1.get()
        F2.get()
        assert seen == ["F1", "F2"]


# ---------------------------------------------------------------------------
# override_readers context manager
# ---------------------------------------------------------------------------


class TestOverrideReaders:
    @given(boolean_flags)
    def test_all_true_inside_block_only(self, flag: BooleanFlag) -> None:
        with override_readers(boolean=_always_true):
            assert flag.get() is True
        assert flag.get() is flag.default_value

    def test_both_kinds(self) -> None:
        with override_readers(boolean=_always_true, int_=lambda flag: 7):
            assert F1.get() is True
            assert N1.get() == 7
        assert F1.get() is False
        assert N1.get() == 3

    def test_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with override_readers(boolean=_always_true):
                raise RuntimeError("boom")
        assert F1.get() is False

    def test_nested_blocks_restore_in_order(self) -> None:
        with override_readers(boolean=_always_true):
            with override_readers(boolean=lambda flag: False):
                assert F2.get() is False
            assert F1.get() is True
        assert F2.get() is True

    def test_none_leaves_reader_untouched(self) -> None:
        before = readers.get_boolean_reader()
        with override_readers(int_=lambda flag: 1):
            assert readers.get_boolean_reader() is before

    def test_bad_int_reader_restores_boolean(self) -> None:
        with pytest.raises(TypeError):
            with override_readers(boolean=_always_true, int_=42):  # type: ignore[arg-type]
                pass
        assert F1.get() is False
