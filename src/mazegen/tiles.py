# Block tile IDs shared by the renderers

FLOOR = 0
WALL = 1
SOLUTION = 2

COLORS = {
    FLOOR: (235, 235, 235, 255),
    WALL: (40, 40, 40, 255),
    SOLUTION: (220, 60, 60, 255),
}

def color_for(tile_id: int):
    return COLORS.get(tile_id, (255, 0, 255, 255))
