#!/usr/bin/env python3

"""Reports where a point projects onto an edge - the crossing point on the
line through the edge, the distances to the edge and to that line, and
whether the projection falls within the edge. Handy for checking why a
point did or didn't match an edge of the network."""

import sys
from optparse import OptionParser

import parser_utils
import lineargeom

# Points closer than this to the edge (in coordinate units) are reported as
# being on it.
VERY_NEAR_EDGE = 1e-6
OUTPUT_DECIMALS = 6

def format_point(pt):
    return "(%s)" % ", ".join("%.*f" % (OUTPUT_DECIMALS, c) for c in pt)

def print_seg_dist_info(point, seg_start, seg_end, use_3d):
    if use_3d:
        crossing = lineargeom.calc_crossing_point_to_edge_3d(point,
            seg_start, seg_end)
        edge_dist = lineargeom.calc_normalized_edge_distance_3d(point,
            seg_start, seg_end)
        line_dist = lineargeom.calc_normalized_line_distance_3d(point,
            seg_start, seg_end)
        valid = lineargeom.valid_edge_distance_3d(point, seg_start, seg_end)
        uval = lineargeom.calc_proj_uval_3d(point, seg_start, seg_end)
    else:
        crossing = lineargeom.calc_crossing_point_to_edge(point,
            seg_start, seg_end)
        edge_dist = lineargeom.calc_normalized_edge_distance(point,
            seg_start, seg_end)
        line_dist = lineargeom.calc_normalized_line_distance(point,
            seg_start, seg_end)
        valid = lineargeom.valid_edge_distance(point, seg_start, seg_end)
        uval = lineargeom.calc_proj_uval(point, seg_start, seg_end)
    dec = OUTPUT_DECIMALS
    print("Segment %s -> %s:" % (format_point(seg_start), format_point(seg_end)))
    if uval is None:
        print("  crossing point on line: %s" % format_point(crossing))
    else:
        print("  crossing point on line: %s (uval %.*f)" % \
            (format_point(crossing), dec, uval))
    print("  normalized dist to segment: %.*f" % (dec, edge_dist))
    print("  normalized dist to line: %.*f" % (dec, line_dist))
    print("  dist to segment: %.*f" % \
        (dec, lineargeom.calc_denormalized_dist(edge_dist)))
    print("  projection within segment: %s" % valid)
    if edge_dist < lineargeom.calc_normalized_dist_from(VERY_NEAR_EDGE):
        print("  point is on the segment.")
    return edge_dist, valid

def print_edge_dist_info(point, edge_geom, use_3d):
    import edge_geom_ops
    seg_ii, closest_pt, edge_dist, within_seg = \
        edge_geom_ops.find_closest_seg_on_edge(edge_geom, point, use_3d)
    print("Edge of %d vertices, length %.*f." % (edge_geom.GetPointCount(),
        OUTPUT_DECIMALS, edge_geom_ops.calc_edge_length(edge_geom, use_3d)))
    print("Closest segment is segment %d, at %s." % \
        (seg_ii, format_point(closest_pt)))
    seg_start = edge_geom.GetPoint(seg_ii)
    seg_end = edge_geom.GetPoint(seg_ii + 1)
    if not use_3d:
        seg_start, seg_end = seg_start[:2], seg_end[:2]
    return print_seg_dist_info(point, seg_start, seg_end, use_3d)

def main(argv=None):
    parser = OptionParser()
    parser.add_option('--point', dest='point',
        help='Point to test, as X,Y or X,Y,Z.')
    parser.add_option('--edge_start', dest='edge_start',
        help='Start of the edge segment, as X,Y or X,Y,Z.')
    parser.add_option('--edge_end', dest='edge_end',
        help='End of the edge segment, as X,Y or X,Y,Z.')
    parser.add_option('--edge_wkt', dest='edge_wkt',
        help='Edge as a WKT LINESTRING, instead of --edge_start and '
            '--edge_end.')
    parser.add_option('--use_3d', dest='use_3d', default=None,
        help='Include heights in the calcs (true/false). Default is to use '
            'them if all coordinates given have them.')
    (options, args) = parser.parse_args(argv)

    if options.point is None:
        parser.print_help()
        parser.error("No point given.")
    if options.edge_wkt is None and \
            (options.edge_start is None or options.edge_end is None):
        parser.print_help()
        parser.error("Need either an edge WKT, or both edge start and end.")

    try:
        point = parser_utils.parse_coords(options.point)
        if options.edge_wkt is not None:
            # Only edge WKT needs OGR - plain segments work without GDAL.
            import edge_geom_ops
            edge_geom = edge_geom_ops.create_edge_geom_from_wkt(
                options.edge_wkt)
            have_heights = edge_geom_ops.edge_has_heights(edge_geom)
        else:
            seg_start = parser_utils.parse_coords(options.edge_start)
            seg_end = parser_utils.parse_coords(options.edge_end)
            have_heights = len(seg_start) == 3 and len(seg_end) == 3
    except ValueError as e:
        parser.error(str(e))
    have_heights = have_heights and len(point) == 3

    if options.use_3d is None:
        use_3d = have_heights
    else:
        use_3d = parser_utils.str2bool(options.use_3d)
        if use_3d and not have_heights:
            print("Error:- 3D calcs requested, but the point and edge "
                "don't all have heights.")
            sys.exit(1)

    if options.edge_wkt is not None:
        print_edge_dist_info(point, edge_geom, use_3d)
    else:
        print_seg_dist_info(point, seg_start, seg_end, use_3d)
    return

if __name__ == "__main__":
    main()
