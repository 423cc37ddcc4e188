"""
Tests for plain-text grave import.
"""

import pytest

from gravefinder.models import Cemetery, Grave, GraveState
from gravefinder.services import import_graves, parse_grave_pairs


@pytest.mark.unit
class TestParseGravePairs:
    def test_pairs(self):
        result = parse_grave_pairs("Ann Lee\n1920-2000\nBob Lee\n1925-\n")

        assert result.graves == [
            Grave("Ann Lee", "1920-2000", GraveState.INTERRED),
            Grave("Bob Lee", "1925-", GraveState.INTERRED),
        ]
        assert result.skipped == 0

    def test_blank_pairs_are_skipped(self):
        result = parse_grave_pairs("Ann Lee\n1920-2000\n\n\nBob\n")

        assert [grave.name for grave in result.graves] == ["Ann Lee", "Bob"]
        assert result.graves[1].dates == ""
        assert result.skipped == 1

    def test_lines_are_stripped(self):
        result = parse_grave_pairs("  Ann Lee  \r\n\t1920\r\n")

        assert result.graves == [Grave("Ann Lee", "1920")]

    def test_dates_only_is_kept(self):
        assert parse_grave_pairs("\nabt. 1850\n").graves == [Grave("", "abt. 1850")]

    def test_empty_text(self):
        result = parse_grave_pairs("")

        assert result.imported == 0
        assert str(result) == "0 graves imported, 0 blank pairs skipped"


@pytest.mark.unit
class TestImportGraves:
    def test_appends_to_unassigned(self):
        cemetery = Cemetery(name="Pine Hill", graves=[Grave("Existing")])

        result = import_graves(cemetery, "Ann Lee\n1920-2000\n")

        assert result.imported == 1
        assert [grave.name for grave in cemetery.graves] == ["Existing", "Ann Lee"]
