import math

"""These functions perform basic linear geometry operations between a point
and an edge segment - how far the point is from the segment, where its
perpendicular foot falls on the line through the segment, and whether that
foot lies within the segment itself.

Points are tuples of (x, y) or (x, y, z) coordinates in a planar
(projected) coordinate system. Distances are returned in the same units as
the coordinates. The 'normalized' distances are squared distances - cheaper
to compute and fine for comparisons when searching for the nearest edge. Use
calc_denormalized_dist() to get back to a linear distance.

The projection formulas follow Paul Bourke's point-line computations:
http://paulbourke.net/geometry/pointlineplane/
"""

# pairs iterator:
# http://stackoverflow.com/questions/1257413/1257446#1257446
def pairs(lst, loop=False):
    i = iter(lst)
    try:
        first = prev = item = next(i)
    except StopIteration:
        return
    for item in i:
        yield prev, item
        prev = item
    if loop == True:
        yield item, first

#################################################
# Point to point distances

def magnitude(p1, p2):
    vect_x = p2[0] - p1[0]
    vect_y = p2[1] - p1[1]
    return math.sqrt(vect_x**2 + vect_y**2)

def magnitude_3d(p1, p2):
    return math.sqrt(calc_normalized_dist_3d(p1, p2))

def calc_normalized_dist(p1, p2):
    vect_x = p2[0] - p1[0]
    vect_y = p2[1] - p1[1]
    return vect_x**2 + vect_y**2

def calc_normalized_dist_3d(p1, p2):
    """Squared 3D distance. An unknown (NaN) height on either point is
    treated as no height difference."""
    vect_z = 0.0
    if not _has_nan_height(p1, p2):
        vect_z = p2[2] - p1[2]
    return calc_normalized_dist(p1, p2) + vect_z**2

def calc_denormalized_dist(normed_dist):
    return math.sqrt(normed_dist)

def calc_normalized_dist_from(dist):
    """Converts a linear distance into the normalized (squared) form, e.g.
    to compare a search radius against calc_normalized_edge_distance()."""
    return dist * dist

def _has_nan_height(*points):
    for pt in points:
        if math.isnan(pt[2]):
            return True
    return False

#################################################
# Projection of a point onto an edge

def _proj_factor(point, line_start, line_end):
    """Returns the 'uval' - the linear proportion along the line from
    line_start to line_end where the perpendicular from point meets it.
    Values < 0 are before the start, > 1.0 after the end. Returns None for a
    zero length segment, where there is no line to project onto."""
    dx = line_end[0] - line_start[0]
    dy = line_end[1] - line_start[1]
    line_mag_sq = dx * dx + dy * dy
    if line_mag_sq == 0.0:
        return None
    return ((point[0] - line_start[0]) * dx +
        (point[1] - line_start[1]) * dy) / line_mag_sq

def _proj_factor_3d(point, line_start, line_end):
    dx = line_end[0] - line_start[0]
    dy = line_end[1] - line_start[1]
    dz = line_end[2] - line_start[2]
    line_mag_sq = dx * dx + dy * dy + dz * dz
    if line_mag_sq == 0.0:
        return None
    return ((point[0] - line_start[0]) * dx +
        (point[1] - line_start[1]) * dy +
        (point[2] - line_start[2]) * dz) / line_mag_sq

def calc_proj_uval(point, line_start, line_end):
    """The unclamped uval of point's projection onto the segment, or None
    for a zero length segment."""
    return _proj_factor(point, line_start, line_end)

def calc_proj_uval_3d(point, line_start, line_end):
    if _has_nan_height(point, line_start, line_end):
        return _proj_factor(point, line_start, line_end)
    return _proj_factor_3d(point, line_start, line_end)

def _clamp_uval(uval):
    return max(0.0, min(1.0, uval))

def _point_at_uval(line_start, line_end, uval):
    return tuple(s + uval * (e - s) for s, e in zip(line_start, line_end))

def calc_crossing_point_to_edge(point, line_start, line_end):
    """Finds the foot of the perpendicular from point onto the (infinite)
    line through line_start and line_end.
    Note this is NOT clamped to the segment - if the point is before the
    start or after the end, the returned crossing point is too. For a zero
    length segment, returns line_start."""
    line_start = line_start[:2]
    uval = _proj_factor(point, line_start, line_end)
    if uval is None:
        return line_start
    return _point_at_uval(line_start, line_end[:2], uval)

def calc_crossing_point_to_edge_3d(point, line_start, line_end):
    if _has_nan_height(point, line_start, line_end):
        return calc_crossing_point_to_edge(point, line_start, line_end)
    line_start = line_start[:3]
    uval = _proj_factor_3d(point, line_start, line_end)
    if uval is None:
        return line_start
    return _point_at_uval(line_start, line_end[:3], uval)

def calc_closest_point_on_edge(point, line_start, line_end):
    """The point on the segment line_start -> line_end closest to point. Where
    the perpendicular foot falls outside the segment, this is the nearer
    endpoint."""
    uval = _proj_factor(point, line_start, line_end)
    if uval is None:
        return line_start[:2]
    return _point_at_uval(line_start[:2], line_end[:2], _clamp_uval(uval))

def calc_closest_point_on_edge_3d(point, line_start, line_end):
    if _has_nan_height(point, line_start, line_end):
        return calc_closest_point_on_edge(point, line_start, line_end)
    uval = _proj_factor_3d(point, line_start, line_end)
    if uval is None:
        return line_start[:3]
    return _point_at_uval(line_start[:3], line_end[:3], _clamp_uval(uval))

def calc_normalized_edge_distance(point, line_start, line_end):
    """Squared distance from point to the closest point on the segment
    line_start -> line_end (not the infinite line through them)."""
    closest = calc_closest_point_on_edge(point, line_start, line_end)
    return calc_normalized_dist(point, closest)

def calc_normalized_edge_distance_3d(point, line_start, line_end):
    """As for calc_normalized_edge_distance(), but including heights. Falls
    back to the 2D distance when any of the heights is unknown (NaN)."""
    if _has_nan_height(point, line_start, line_end):
        return calc_normalized_edge_distance(point, line_start, line_end)
    closest = calc_closest_point_on_edge_3d(point, line_start, line_end)
    return calc_normalized_dist_3d(point, closest)

def calc_normalized_line_distance(point, line_start, line_end):
    """Squared perpendicular distance from point to the infinite line
    through line_start and line_end (i.e. to the crossing point). Only the
    same as calc_normalized_edge_distance() when valid_edge_distance()."""
    crossing = calc_crossing_point_to_edge(point, line_start, line_end)
    return calc_normalized_dist(point, crossing)

def calc_normalized_line_distance_3d(point, line_start, line_end):
    crossing = calc_crossing_point_to_edge_3d(point, line_start, line_end)
    if len(crossing) == 2:
        return calc_normalized_dist(point, crossing)
    return calc_normalized_dist_3d(point, crossing)

def valid_edge_distance(point, line_start, line_end):
    """True if the perpendicular from point falls on the segment itself,
    including exactly on either endpoint. Always False for a zero length
    segment."""
    uval = _proj_factor(point, line_start, line_end)
    if uval is None:
        return False
    return 0.0 <= uval <= 1.0

def valid_edge_distance_3d(point, line_start, line_end):
    if _has_nan_height(point, line_start, line_end):
        return valid_edge_distance(point, line_start, line_end)
    uval = _proj_factor_3d(point, line_start, line_end)
    if uval is None:
        return False
    return 0.0 <= uval <= 1.0

def intersect_point_to_line(point, line_start, line_end):
    """Finds the closest point on the segment to point.
    But also, returns a Bool stating if the perpendicular from point was
    within this line segment. And also, the 'uval' stating the linear
    proportion along the line it was found.
    (uval values -ve imply before start of line, > 1.0 after end of
    line)."""
    uval = _proj_factor(point, line_start, line_end)
    if uval is None:
        # A zero length segment - just return the start as closest
        return line_start[:2], False, 0.0
    within_seg = 0.0 <= uval <= 1.0
    closest = _point_at_uval(line_start[:2], line_end[:2], _clamp_uval(uval))
    return closest, within_seg, uval

#################################################
# Moving along an edge segment

def point_dist_along_line(line_start, line_end, dist):
    """Find the point along a line dist from line_start"""
    line_magnitude = magnitude(line_end, line_start)
    if line_magnitude == 0.0:
        u = 0
    else:
        u = dist / line_magnitude
    ix = line_start[0] + u * (line_end[0] - line_start[0])
    iy = line_start[1] + u * (line_end[1] - line_start[1])
    return (ix, iy)

def intermediate_point(fraction, p1, p2):
    """Point the given fraction of the way from p1 to p2. Works for 2D or 3D
    points (follows the number of coordinates in p1)."""
    return _point_at_uval(p1, p2[:len(p1)], fraction)
