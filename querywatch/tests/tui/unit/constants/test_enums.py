"""Unit tests for enum definitions in constants/enums.py."""

from __future__ import annotations

from enum import Enum

import pytest

from querywatch.constants.enums import (
    FailureKind,
    QuerySource,
    QueryStatus,
    StreamName,
    TimeWindow,
    ViewSlice,
)

# =============================================================================
# TimeWindow
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestTimeWindow:
    """Test TimeWindow enum."""

    def test_is_enum(self) -> None:
        assert issubclass(TimeWindow, Enum)

    def test_values_in_display_order(self) -> None:
        assert [w.value for w in TimeWindow] == ["15m", "1h", "6h", "24h"]

    @pytest.mark.parametrize("token", ["6h", "6H", " 6h "])
    def test_parse_accepts_case_and_whitespace(self, token: str) -> None:
        assert TimeWindow.parse(token) is TimeWindow.H6

    def test_parse_passes_members_through(self) -> None:
        assert TimeWindow.parse(TimeWindow.M15) is TimeWindow.M15

    @pytest.mark.parametrize("token", ["", "2h", "1d", "15"])
    def test_parse_rejects_unknown_tokens(self, token: str) -> None:
        with pytest.raises(ValueError, match="Unsupported time window"):
            TimeWindow.parse(token)

    def test_label(self) -> None:
        assert TimeWindow.M15.label == "Last 15m"
        assert TimeWindow.H24.label == "Last 24h"


# =============================================================================
# QuerySource / QueryStatus
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestQuerySource:
    """Test QuerySource enum."""

    def test_members(self) -> None:
        assert {s.value for s in QuerySource} == {"JDBC", "REST", "PYTHON", "OTHER"}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("JDBC", QuerySource.JDBC),
            ("rest", QuerySource.REST),
            ("Python", QuerySource.PYTHON),
            ("db", QuerySource.OTHER),
            ("cache_s3", QuerySource.OTHER),
            ("", QuerySource.OTHER),
            (None, QuerySource.OTHER),
        ],
    )
    def test_coerce(self, raw: object, expected: QuerySource) -> None:
        assert QuerySource.coerce(raw) is expected


@pytest.mark.unit
@pytest.mark.fast
class TestQueryStatus:
    """Test QueryStatus enum."""

    def test_members(self) -> None:
        assert {s.value for s in QueryStatus} == {"RUNNING", "OK", "FAILED"}

    def test_invalid_membership(self) -> None:
        with pytest.raises(ValueError):
            QueryStatus("DONE")


# =============================================================================
# Engine enums
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestEngineEnums:
    """Test stream, slice and failure enums."""

    def test_every_stream_has_a_slice(self) -> None:
        assert {s.value for s in StreamName} == {s.value for s in ViewSlice}

    def test_failure_kinds(self) -> None:
        assert {k.value for k in FailureKind} == {
            "transport",
            "http",
            "decode",
            "unexpected",
        }
