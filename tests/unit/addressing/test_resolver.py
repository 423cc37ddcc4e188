"""
Tests for locator collection and locator-based mutation.
"""

import pytest

from gravefinder.addressing import (
    assign_to_niche,
    collect_grave_infos,
    collect_registry_grave_infos,
    delete_grave,
    move_to_unassigned,
    populate_niche_names,
    remove_niche,
    set_niche,
)
from gravefinder.exceptions import InvalidLocatorError, NicheOccupiedError
from gravefinder.models import (
    UNASSIGNED,
    Cemetery,
    Columbarium,
    Grave,
    GraveInfo,
    GraveRegistry,
    NicheInfo,
    Plot,
)


def niche_locator(plot_index, face_index, row_index, niche_index, cemetery_index=0, grave=None):
    return GraveInfo(
        cemetery_index=cemetery_index,
        grave=grave,
        plot_index=plot_index,
        niche=NicheInfo(face_index, row_index, niche_index),
    )


def grave_locator(grave_index, cemetery_index=0):
    return GraveInfo(cemetery_index=cemetery_index, grave=None, plot_index=UNASSIGNED, grave_index=grave_index)


@pytest.mark.unit
class TestCollectGraveInfos:
    """Flattening a cemetery into locators."""

    def test_unassigned_grave_and_empty_columbarium(self):
        cemetery = Cemetery(
            graves=[Grave("Ann Lee", "1920-2000")],
            plots=[Plot(id=1, columbarium=Columbarium.from_dict({"numFaces": 1, "faces": [{"numRows": 1}]}))],
        )

        infos = collect_grave_infos(cemetery, 0)

        assert len(infos) == 1
        assert infos[0].plot_index is UNASSIGNED
        assert infos[0].grave_index == 0
        assert infos[0].niche is None

    def test_order_and_niche_names(self, sample_registry):
        infos = collect_grave_infos(sample_registry.cemeteries[0], 0)

        assert [info.grave.name for info in infos] == ["Mary Jones", "John Smith Jr", "Ann Lee", "Bob Lee"]
        ann, bob = infos[2], infos[3]
        assert ann.plot_index == 1
        assert (ann.niche.face_index, ann.niche.row_index, ann.niche.niche_index) == (0, 0, 0)
        assert ann.niche.face_name == "East Face"
        assert ann.niche.row_name == "Top"
        assert ann.niche.urn_count == 2
        assert bob.niche.niche_index == 2
        assert bob.grave_index is None

    def test_locator_shares_the_grave(self, sample_registry):
        info = collect_grave_infos(sample_registry.cemeteries[0], 0)[0]

        assert info.grave is sample_registry.cemeteries[0].graves[0]

    def test_registry_wide_collection(self, sample_document):
        sample_document["cemeteries"].append({"name": "Elm", "graves": [{"name": "Ed"}]})
        registry = GraveRegistry.from_dict(sample_document)

        infos = collect_registry_grave_infos(registry)

        assert len(infos) == 5
        assert infos[-1].cemetery_index == 1

    def test_registry_collection_for_one_cemetery(self, sample_document):
        sample_document["cemeteries"].append({"name": "Elm", "graves": [{"name": "Ed"}]})
        registry = GraveRegistry.from_dict(sample_document)

        assert [info.grave.name for info in collect_registry_grave_infos(registry, 1)] == ["Ed"]

    @pytest.mark.parametrize("cemetery_index", [9, -1, "0", True])
    def test_invalid_cemetery_index_is_rejected(self, sample_document, cemetery_index):
        sample_document["cemeteries"].append({"name": "Elm", "graves": [{"name": "Ed"}]})
        registry = GraveRegistry.from_dict(sample_document)

        with pytest.raises(InvalidLocatorError) as exc_info:
            collect_registry_grave_infos(registry, cemetery_index)

        assert exc_info.value.segment == "cemetery"


@pytest.mark.unit
class TestNicheMutation:
    def test_remove_niche(self, sample_registry):
        removed = remove_niche(sample_registry, niche_locator(1, 0, 0, 2))

        assert removed.name == "Bob Lee"
        row = sample_registry.cemeteries[0].plots[1].columbarium.faces[0].rows[0]
        assert row.graves[2].is_placeholder

    def test_remove_niche_on_unassigned_locator(self, sample_registry):
        with pytest.raises(InvalidLocatorError) as exc_info:
            remove_niche(sample_registry, grave_locator(0))

        assert exc_info.value.segment == "plot"

    def test_remove_niche_without_niche_info(self, sample_registry):
        locator = GraveInfo(cemetery_index=0, grave=None, plot_index=1, niche=None)

        with pytest.raises(InvalidLocatorError) as exc_info:
            remove_niche(sample_registry, locator)

        assert exc_info.value.segment == "niche"

    def test_remove_niche_plot_without_columbarium(self, sample_registry):
        with pytest.raises(InvalidLocatorError) as exc_info:
            remove_niche(sample_registry, niche_locator(0, 0, 0, 0))

        assert exc_info.value.segment == "columbarium"

    def test_bad_cemetery(self, sample_registry):
        with pytest.raises(InvalidLocatorError, match="cemetery"):
            remove_niche(sample_registry, niche_locator(1, 0, 0, 0, cemetery_index=3))

    def test_set_niche_uses_locator_grave(self, sample_registry):
        set_niche(sample_registry, niche_locator(1, 0, 1, 1, grave=Grave("Cy Lee")))

        row = sample_registry.cemeteries[0].plots[1].columbarium.faces[0].rows[1]
        assert row.graves[1].name == "Cy Lee"

    def test_set_niche_explicit_grave_overwrites(self, sample_registry):
        set_niche(sample_registry, niche_locator(1, 0, 0, 0), Grave("Dee Lee"))

        row = sample_registry.cemeteries[0].plots[1].columbarium.faces[0].rows[0]
        assert row.graves[0].name == "Dee Lee"

    def test_delete_grave_unassigned(self, sample_registry):
        removed = delete_grave(sample_registry, grave_locator(0))

        assert removed.name == "Mary Jones"
        assert [grave.name for grave in sample_registry.cemeteries[0].graves] == ["John Smith Jr"]

    def test_delete_grave_twice_from_a_niche(self, sample_registry):
        locator = niche_locator(1, 0, 0, 2)
        assert delete_grave(sample_registry, locator).name == "Bob Lee"

        with pytest.raises(InvalidLocatorError, match="niche is empty"):
            delete_grave(sample_registry, locator)

    def test_stale_locator_after_delete(self, sample_registry):
        infos = collect_grave_infos(sample_registry.cemeteries[0], 0)
        delete_grave(sample_registry, infos[0])

        with pytest.raises(InvalidLocatorError):
            delete_grave(sample_registry, infos[1])


@pytest.mark.unit
class TestPopulateNicheNames:
    def test_populates_from_indices(self, sample_registry):
        locator = niche_locator(1, 0, 1, 0)

        niche = populate_niche_names(sample_registry, locator)

        assert niche is locator.niche
        assert (niche.face_name, niche.row_name, niche.urn_count) == ("East Face", "Bottom", 1)

    def test_partial_indices(self, sample_registry):
        locator = GraveInfo(cemetery_index=0, grave=None, plot_index=1, niche=NicheInfo(face_index=0))

        niche = populate_niche_names(sample_registry, locator)

        assert niche.face_name == "East Face"
        assert niche.row_name == "Invalid Row"
        assert niche.urn_count == 0

    def test_unassigned_locator_gets_invalid_names(self, sample_registry):
        locator = grave_locator(0)

        niche = populate_niche_names(sample_registry, locator)

        assert locator.niche is niche
        assert niche.face_name == "Invalid Face"

    def test_plot_without_columbarium(self, sample_registry):
        niche = populate_niche_names(sample_registry, niche_locator(0, 0, 0, 0))

        assert niche.row_name == "Invalid Row"


@pytest.mark.unit
class TestMoveAndAssign:
    def test_move_to_unassigned(self, sample_registry):
        cemetery = sample_registry.cemeteries[0]

        moved = move_to_unassigned(sample_registry, niche_locator(1, 0, 0, 0))

        assert moved.is_unassigned
        assert moved.grave_index == 2
        assert cemetery.graves[2].name == "Ann Lee"
        assert cemetery.plots[1].columbarium.faces[0].rows[0].graves[0].is_placeholder

    def test_move_empty_niche_refused(self, sample_registry):
        with pytest.raises(InvalidLocatorError, match="empty"):
            move_to_unassigned(sample_registry, niche_locator(1, 0, 0, 1))

        assert len(sample_registry.cemeteries[0].graves) == 2

    def test_assign_to_empty_niche(self, sample_registry):
        cemetery = sample_registry.cemeteries[0]

        assigned = assign_to_niche(sample_registry, grave_locator(0), 1, NicheInfo(0, 0, 1))

        assert assigned.grave.name == "Mary Jones"
        assert assigned.niche.row_name == "Top"
        assert [grave.name for grave in cemetery.graves] == ["John Smith Jr"]
        assert cemetery.plots[1].columbarium.faces[0].rows[0].graves[1].name == "Mary Jones"

    def test_assign_to_occupied_niche_changes_nothing(self, sample_registry):
        cemetery = sample_registry.cemeteries[0]

        with pytest.raises(NicheOccupiedError) as exc_info:
            assign_to_niche(sample_registry, grave_locator(0), 1, NicheInfo(0, 0, 0))

        assert exc_info.value.occupant == "Ann Lee"
        assert len(cemetery.graves) == 2
        assert cemetery.plots[1].columbarium.faces[0].rows[0].graves[0].name == "Ann Lee"

    def test_assign_bad_target_changes_nothing(self, sample_registry):
        with pytest.raises(InvalidLocatorError, match="niche"):
            assign_to_niche(sample_registry, grave_locator(0), 1, NicheInfo(0, 0, 5))

        assert len(sample_registry.cemeteries[0].graves) == 2

    def test_assign_requires_unassigned_source(self, sample_registry):
        with pytest.raises(InvalidLocatorError, match="not an unassigned grave"):
            assign_to_niche(sample_registry, niche_locator(1, 0, 0, 0), 1, NicheInfo(0, 0, 1))

    def test_move_then_assign_round_trip(self, sample_registry):
        moved = move_to_unassigned(sample_registry, niche_locator(1, 0, 0, 2))
        assign_to_niche(sample_registry, moved, 1, NicheInfo(0, 1, 0))

        face = sample_registry.cemeteries[0].plots[1].columbarium.faces[0]
        assert face.rows[1].graves[0].name == "Bob Lee"
        assert face.rows[0].graves[2].is_placeholder
        assert len(sample_registry.cemeteries[0].graves) == 2
