"""
Registry text writers, one per node type.

Each writer reproduces the layout of hand-maintained data files exactly:
key order, bracket placement and the absence of a trailing comma after the
last element of every list. ``padding`` is the indentation handed down by
the parent node.
"""

from ..constants import (
    CEMETERY_GRAVE_PADDING,
    COLUMBARIUM_FACE_PADDING,
    FACE_ROW_PADDING,
    PLOT_COLUMBARIUM_PADDING,
    ROW_GRAVE_PADDING,
)
from ..models import Cemetery, Columbarium, Face, Grave, GraveRegistry, Niche, Plot, Row
from .builder import TextBuilder, to_json


def serialize_grave(grave: Grave, padding: str = "") -> str:
    return (
        TextBuilder()
        .newline(padding)
        .text("{ ")
        .field("name", grave.name)
        .text(", ")
        .field("dates", grave.dates)
        .text(", ")
        .field("state", int(grave.state))
        .text(" }")
        .build()
    )


def serialize_row(row: Row, padding: str = "") -> str:
    def niche_grave(niche: Niche) -> str:
        # Empty niches are stored as {} so the array keeps one slot per niche
        if niche.grave.is_placeholder:
            return "\n" + padding + ROW_GRAVE_PADDING + "{}"
        return serialize_grave(niche.grave, padding + ROW_GRAVE_PADDING)

    return (
        TextBuilder()
        .text(padding + " { ")
        .field("name", row.name)
        .text(", ")
        .field("numNiches", row.num_niches)
        .text(", ")
        .newline(padding)
        .text('   "graves": [')
        .items(row.niches, niche_grave)
        .text("],")
        .newline(padding)
        .text('   "urns": [ ')
        .items(row.urns, to_json)
        .text(" ]")
        .text(" }")
        .build()
    )


def serialize_face(face: Face, padding: str = "") -> str:
    return (
        TextBuilder()
        .text(padding + "{ ")
        .field("columbariumName", face.columbarium_name, colon=" : ")
        .text(", ")
        .field("faceName", face.face_name)
        .text(", ")
        .field("shortName", face.short_name)
        .text(", ")
        .field("numRows", face.num_rows)
        .text(", ")
        .newline(padding)
        .text('  "rows": [\n')
        .items(face.rows, lambda row: serialize_row(row, padding + FACE_ROW_PADDING), separator=",\n")
        .text(" ] ")
        .text("}")
        .build()
    )


def serialize_columbarium(columbarium: Columbarium, padding: str = "") -> str:
    return (
        TextBuilder()
        .text(" {")
        .text(" ")
        .field("numFaces", columbarium.num_faces)
        .text(" , ")
        .newline(padding)
        .text('    "faces": [\n')
        .items(
            columbarium.faces,
            lambda face: serialize_face(face, padding + COLUMBARIUM_FACE_PADDING),
            separator=",\n",
            last="\n",
        )
        .text("        ]")
        .text("}")
        .build()
    )


def serialize_plot(plot: Plot) -> str:
    builder = (
        TextBuilder()
        .newline("      ")
        .text("{")
        .field("id", plot.id, colon=":")
        .text(", ")
        .field("location", plot.location, colon=":")
        .text(", ")
        .field("angle", plot.angle, colon=":")
        .text(", ")
        .field("capacity", plot.capacity, colon=":")
    )
    if plot.columbarium is not None:
        builder.text(",").newline("        ").text('"columbarium":')
        builder.text(serialize_columbarium(plot.columbarium, PLOT_COLUMBARIUM_PADDING))
    return builder.text("}").build()


def serialize_cemetery(cemetery: Cemetery) -> str:
    return (
        TextBuilder()
        .newline("  ")
        .text("{")
        .field("location", cemetery.location, colon=":")
        .text(", ")
        .field("name", cemetery.name, colon=":")
        .text(", ")
        .field("town", cemetery.town, colon=":")
        .text(", ")
        .field("description", cemetery.description, colon=":")
        .text(", ")
        .newline("    ")
        .field("boundary", cemetery.boundary, colon=":")
        .text(", ")
        .newline("    ")
        .field("zoom", cemetery.zoom, colon=":")
        .text(", ")
        .field("angle", cemetery.angle, colon=":")
        .text(",")
        .newline("    ")
        .text('"graves":[')
        .items(cemetery.graves, lambda grave: serialize_grave(grave, CEMETERY_GRAVE_PADDING))
        .text("],")
        .newline("    ")
        .text('"plots":[')
        .items(cemetery.plots, serialize_plot)
        .text("]}")
        .build()
    )


def serialize_registry(registry: GraveRegistry) -> str:
    return (
        TextBuilder()
        .text("{")
        .field("referenceLocation", registry.reference_location, colon=":")
        .text(",")
        .newline(" ")
        .text('"cemeteries": [')
        .items(registry.cemeteries, serialize_cemetery)
        .text("]")
        .newline()
        .text("}\n")
        .build()
    )
