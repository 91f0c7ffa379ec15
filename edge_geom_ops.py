from osgeo import ogr

import lineargeom

"""Operations on edge geometries - OGR LineStrings made up of a sequence of
straight segments, e.g. a road network edge with its intermediate
vertices. These walk the segments of the line and use the segment functions
in lineargeom."""

def create_edge_geom(coords):
    """Creates an OGR LineString from a list of (x, y) or (x, y, z)
    coordinate tuples. If the first coordinate has a height, the line is
    created as 2.5D."""
    if len(coords) < 2:
        raise ValueError("An edge needs at least 2 vertices, %d given."
            % len(coords))
    use_3d = len(coords[0]) >= 3
    if use_3d:
        edge_geom = ogr.Geometry(ogr.wkbLineString25D)
    else:
        edge_geom = ogr.Geometry(ogr.wkbLineString)
    for coord in coords:
        if use_3d:
            edge_geom.AddPoint(coord[0], coord[1], coord[2])
        else:
            edge_geom.AddPoint_2D(coord[0], coord[1])
    return edge_geom

def create_edge_geom_from_wkt(edge_wkt):
    try:
        edge_geom = ogr.CreateGeometryFromWkt(edge_wkt)
    except RuntimeError as e:
        # Raised instead of returning None when OGR exceptions are enabled.
        raise ValueError("Couldn't parse edge WKT '%s': %s" % (edge_wkt, e))
    if edge_geom is None or edge_geom.GetGeometryName() != "LINESTRING":
        raise ValueError("Edge WKT must be a LINESTRING, got '%s'." % edge_wkt)
    if edge_geom.GetPointCount() < 2:
        raise ValueError("An edge needs at least 2 vertices, %d given."
            % edge_geom.GetPointCount())
    return edge_geom

def _edge_points(edge_geom, use_3d):
    if use_3d:
        # 2D edges get unknown (NaN) heights, so 3D calcs fall back to 2D.
        return [(pt[0], pt[1], pt[2] if len(pt) > 2 else float("nan"))
            for pt in edge_geom.GetPoints()]
    return [(pt[0], pt[1]) for pt in edge_geom.GetPoints()]

def edge_has_heights(edge_geom):
    return edge_geom.GetCoordinateDimension() == 3

def calc_edge_length(edge_geom, use_3d=False):
    """Total length along the edge, summed segment by segment. With use_3d,
    height differences between vertices are included."""
    assert edge_geom.GetGeometryName() == "LINESTRING"
    if use_3d:
        dist_func = lineargeom.magnitude_3d
    else:
        dist_func = lineargeom.magnitude
    total_length = 0
    for seg_start, seg_end in lineargeom.pairs(_edge_points(edge_geom, use_3d)):
        total_length += dist_func(seg_start, seg_end)
    return total_length

def find_closest_seg_on_edge(edge_geom, point, use_3d=False):
    """Finds the segment of the edge closest to point.
    Returns a tuple of (seg_index, closest_point, normalized_dist,
    within_seg), where closest_point is on the segment (clamped to its
    ends), normalized_dist the squared distance to it, and within_seg
    whether the perpendicular from point falls on that segment. If two
    segments are equally close, the one nearer the start of the edge is
    returned."""
    assert edge_geom.GetGeometryName() == "LINESTRING"
    if use_3d:
        edge_dist_func = lineargeom.calc_normalized_edge_distance_3d
        closest_func = lineargeom.calc_closest_point_on_edge_3d
        valid_func = lineargeom.valid_edge_distance_3d
    else:
        edge_dist_func = lineargeom.calc_normalized_edge_distance
        closest_func = lineargeom.calc_closest_point_on_edge
        valid_func = lineargeom.valid_edge_distance

    closest_seg_ii = None
    min_dist = float("inf")
    closest_seg = None
    for seg_ii, seg in enumerate(lineargeom.pairs(
            _edge_points(edge_geom, use_3d))):
        cur_dist = edge_dist_func(point, seg[0], seg[1])
        if cur_dist < min_dist:
            min_dist = cur_dist
            closest_seg_ii = seg_ii
            closest_seg = seg

    seg_start, seg_end = closest_seg
    within_seg = valid_func(point, seg_start, seg_end)
    closest_pt = closest_func(point, seg_start, seg_end)
    return closest_seg_ii, closest_pt, min_dist, within_seg

def point_at_dist_along_edge(edge_geom, dist):
    """Walk dist along the edge from its first vertex (measured in 2D), and
    return the (x, y) point reached. Distances past the end of the edge
    return its last vertex, negative ones its first."""
    assert edge_geom.GetGeometryName() == "LINESTRING"
    edge_pts = _edge_points(edge_geom, False)
    if dist <= 0:
        return edge_pts[0]
    rem_dist = dist
    for seg_start, seg_end in lineargeom.pairs(edge_pts):
        dist_to_seg_end = lineargeom.magnitude(seg_start, seg_end)
        if dist_to_seg_end < rem_dist:
            rem_dist -= dist_to_seg_end
        else:
            return lineargeom.point_dist_along_line(seg_start, seg_end,
                rem_dist)
    # Means we've walked the whole edge, so just return the end of the final
    # segment.
    return edge_pts[-1]
