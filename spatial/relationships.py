"""
spatial/relationships.py
------------------------
Opening → wall attachment for the roomscan spatial stage.

Responsibilities:
  • Pick the host wall of every door / window / opening (nearest wall
    centre, rejected at or beyond the attachment threshold)
  • Express the opening's position in the wall's own 2D frame
  • Derive wall attachment lists and relationship records from that
    single assignment, so the two can never disagree

Orphaned surfaces (no wall in range) keep null parent fields and are
skipped by every attachment-derived list. Nothing here raises on
empty input.
"""

import math
from typing import Dict, Iterable, List, Optional, Sequence

from common.io_utils import log
from common.config import DEFAULT_ATTACHMENT_THRESHOLD
from common.transformations import clamp, distance
from .spatial_classes import (
    AttachedElement,
    ElementType,
    RelationshipType,
    RelativePosition,
    RoomSpatialData,
    SpatialConnection,
    SurfaceRelationship,
    SurfaceSpatialInfo,
    WallSpatialInfo,
)

CONNECTION_TYPES = {
    RelationshipType.ATTACHED_TO: "surface_contact",
    RelationshipType.CONTAINED_IN: "embedded",
}


# -------------------------------------------------------------
# Host wall search
# -------------------------------------------------------------
def find_parent_wall(
    surface: SurfaceSpatialInfo,
    walls: Sequence[WallSpatialInfo],
    threshold: float = DEFAULT_ATTACHMENT_THRESHOLD
) -> Optional[WallSpatialInfo]:
    """
    Nearest wall by centre-to-centre distance, or None when the nearest
    wall is `threshold` meters away or more. Equidistant walls resolve
    to the smallest identifier.
    """
    best_wall = None
    best_key = (math.inf, "")
    for wall in walls:
        key = (distance(surface.position, wall.position), wall.identifier)
        if key < best_key:
            best_key = key
            best_wall = wall

    if best_wall is None or best_key[0] >= threshold:
        return None
    return best_wall


def resolve_parent_walls(
    surfaces: Iterable[SurfaceSpatialInfo],
    walls: Sequence[WallSpatialInfo],
    threshold: float = DEFAULT_ATTACHMENT_THRESHOLD
) -> Dict[str, Optional[str]]:
    """Host wall ID for every surface (None for orphans), computed once per surface."""
    parents: Dict[str, Optional[str]] = {}
    for surface in surfaces:
        if surface.identifier in parents:
            continue
        wall = find_parent_wall(surface, walls, threshold)
        parents[surface.identifier] = wall.identifier if wall else None
    return parents


# -------------------------------------------------------------
# Wall-relative placement
# -------------------------------------------------------------
def relative_position_on_wall(surface: SurfaceSpatialInfo, wall: WallSpatialInfo) -> RelativePosition:
    """
    Project the surface centre onto the wall's right / up axes.
    Distances are measured from the wall's left and bottom edges and
    limited to the wall extent; a surface at the wall centre sits at
    (0.5, 0.5). Degenerate walls give 0.0.
    """
    offset = surface.position - wall.position
    local_x = offset.dot(wall.orientation.right_vector.normalized())
    local_y = offset.dot(wall.orientation.up_vector.normalized())

    width = wall.dimensions.width
    height = wall.dimensions.height
    from_left = clamp(local_x + width / 2, 0.0, max(width, 0.0))
    from_bottom = clamp(local_y + height / 2, 0.0, max(height, 0.0))

    return RelativePosition(
        distance_from_left=from_left,
        distance_from_bottom=from_bottom,
        normalized_x=clamp(from_left / width, 0.0, 1.0) if width > 0 else 0.0,
        normalized_y=clamp(from_bottom / height, 0.0, 1.0) if height > 0 else 0.0,
    )


def _attach(
    surface: SurfaceSpatialInfo,
    parents: Dict[str, Optional[str]],
    walls_by_id: Dict[str, WallSpatialInfo]
) -> SurfaceSpatialInfo:
    wall_id = parents.get(surface.identifier)
    if wall_id is None:
        log(f"⚠️ {surface.category.value} {surface.identifier} has no wall within range", "WARNING")
        return surface
    return surface.model_copy(update={
        "parent_wall_id": wall_id,
        "relative_position_on_wall": relative_position_on_wall(surface, walls_by_id[wall_id]),
    })


# -------------------------------------------------------------
# Derived records
# -------------------------------------------------------------
def build_attached_elements(
    wall_id: str,
    doors: Iterable[SurfaceSpatialInfo],
    windows: Iterable[SurfaceSpatialInfo],
    openings: Iterable[SurfaceSpatialInfo]
) -> List[AttachedElement]:
    """Attached-element entries for one wall, read from resolved parent IDs."""
    attached = []
    for surface in [*doors, *windows, *openings]:
        if surface.parent_wall_id != wall_id:
            continue
        attached.append(AttachedElement(
            element_id=surface.identifier,
            element_type=surface.category,
            relative_position=surface.relative_position_on_wall or RelativePosition.zero(),
        ))
    return attached


def build_surface_relationships(
    doors: Iterable[SurfaceSpatialInfo],
    windows: Iterable[SurfaceSpatialInfo],
    openings: Iterable[SurfaceSpatialInfo]
) -> List[SurfaceRelationship]:
    """
    One record per attached surface: doors / windows are `attachedTo`
    their wall, openings are `containedIn` it. Contact area is the
    child's width × height; distance is always 0.0.
    """
    relationships = []
    for surface in [*doors, *windows, *openings]:
        if surface.parent_wall_id is None:
            continue
        rel_type = (RelationshipType.CONTAINED_IN
                    if surface.category == ElementType.OPENING
                    else RelationshipType.ATTACHED_TO)
        relationships.append(SurfaceRelationship(
            child_id=surface.identifier,
            parent_id=surface.parent_wall_id,
            relationship_type=rel_type,
            spatial_connection=SpatialConnection(
                connection_type=CONNECTION_TYPES[rel_type],
                contact_area=surface.dimensions.face_area,
                distance=0.0,
            ),
        ))
    return relationships


# -------------------------------------------------------------
# Main resolver
# -------------------------------------------------------------
def resolve_room_spatial_data(
    walls: List[WallSpatialInfo],
    doors: List[SurfaceSpatialInfo],
    windows: List[SurfaceSpatialInfo],
    openings: List[SurfaceSpatialInfo],
    threshold: float = DEFAULT_ATTACHMENT_THRESHOLD
) -> RoomSpatialData:
    """
    Assign every opening-type surface to at most one wall and build a
    consistent RoomSpatialData from that assignment.
    Raises ValueError when two surfaces share an identifier.
    """
    ids = [s.identifier for s in [*walls, *doors, *windows, *openings]]
    if len(ids) != len(set(ids)):
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        raise ValueError(f"Duplicate surface identifiers: {', '.join(duplicates)}")

    parents = resolve_parent_walls([*doors, *windows, *openings], walls, threshold)
    walls_by_id = {w.identifier: w for w in walls}

    doors = [_attach(d, parents, walls_by_id) for d in doors]
    windows = [_attach(w, parents, walls_by_id) for w in windows]
    openings = [_attach(o, parents, walls_by_id) for o in openings]

    walls = [
        w.model_copy(update={
            "attached_elements": build_attached_elements(w.identifier, doors, windows, openings)
        })
        for w in walls
    ]
    relationships = build_surface_relationships(doors, windows, openings)

    attached = sum(1 for v in parents.values() if v is not None)
    log(f"🔗 Attached {attached}/{len(parents)} openings to walls "
        f"(threshold {threshold:.2f}m)", "INFO")

    return RoomSpatialData(
        walls=walls,
        doors=doors,
        windows=windows,
        openings=openings,
        surface_relationships=relationships,
    )
