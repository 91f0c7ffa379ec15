def str2bool(v):
    return v.lower() in ("yes", "true", "t", "1")

def getlist(list_string):
    if not list_string:
        parsed_list = []
    else:
        parsed_list = list_string.split(',')
    return parsed_list

def parse_coords(coords_str):
    """Reads in a point in the format X,Y or X,Y,Z"""
    coord_parts = getlist(coords_str)
    if len(coord_parts) not in (2, 3):
        raise ValueError("Expected coordinates as X,Y or X,Y,Z, got '%s'."
            % coords_str)
    return tuple(float(part) for part in coord_parts)
