from __future__ import annotations

from typing import List, Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
MEDIUM_SEA_GREEN: Color = (60, 179, 113)
ORANGE_RED: Color = (255, 69, 0)
INDIGO: Color = (75, 0, 130)

# Tree branch colours, trunk to leaf
DARK_BROWN: Color = (89, 55, 10)
MUD_BROWN: Color = (114, 70, 13)
LIGHT_BROWN: Color = (150, 89, 10)
LIGHTER_BROWN: Color = (183, 115, 27)
PEACH_BROWN: Color = (198, 138, 89)
LEAF_GREEN: Color = (99, 140, 63)

# depth thresholds between the bands above (a branch at depth d falls in the
# first band whose division is greater than d)
BRANCH_SHADER_DIVISION_1 = 3
BRANCH_SHADER_DIVISION_2 = 6
BRANCH_SHADER_DIVISION_3 = 7
BRANCH_SHADER_DIVISION_4 = 9
BRANCH_SHADER_DIVISION_5 = 11

BRANCH_BANDS: List[Tuple[int, Color]] = [
    (BRANCH_SHADER_DIVISION_1, LEAF_GREEN),
    (BRANCH_SHADER_DIVISION_2, PEACH_BROWN),
    (BRANCH_SHADER_DIVISION_3, LIGHTER_BROWN),
    (BRANCH_SHADER_DIVISION_4, LIGHT_BROWN),
    (BRANCH_SHADER_DIVISION_5, MUD_BROWN),
]


def shade_by_depth(depth: int) -> Color:
    """
    Lazy rainbow shader for tree branches.

    Low depths are the tips of the tree and come out leaf green; the trunk
    (highest depth) is near-black brown.
    """
    for division, color in BRANCH_BANDS:
        if depth < division:
            return color
    return DARK_BROWN
