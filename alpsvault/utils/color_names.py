"""Named colour palette used for friendly colour-artifact titles."""

from typing import NamedTuple


class NamedColor(NamedTuple):
    name: str
    hex: str


COLORS: list[NamedColor] = [
    NamedColor("Alice Blue", "#F0F8FF"),
    NamedColor("Antique White", "#FAEBD7"),
    NamedColor("Aqua", "#00FFFF"),
    NamedColor("Aquamarine", "#7FFFD4"),
    NamedColor("Azure", "#F0FFFF"),
    NamedColor("Beige", "#F5F5DC"),
    NamedColor("Bisque", "#FFE4C4"),
    NamedColor("Black", "#000000"),
    NamedColor("Blanched Almond", "#FFEBCD"),
    NamedColor("Blue", "#0000FF"),
    NamedColor("Blue Violet", "#8A2BE2"),
    NamedColor("Brown", "#A52A2A"),
    NamedColor("Burlywood", "#DEB887"),
    NamedColor("Cadet Blue", "#5F9EA0"),
    NamedColor("Chartreuse", "#7FFF00"),
    NamedColor("Chocolate", "#D2691E"),
    NamedColor("Coral", "#FF7F50"),
    NamedColor("Cornflower Blue", "#6495ED"),
    NamedColor("Cornsilk", "#FFF8DC"),
    NamedColor("Crimson", "#DC143C"),
    NamedColor("Dark Blue", "#00008B"),
    NamedColor("Dark Cyan", "#008B8B"),
    NamedColor("Dark Goldenrod", "#B8860B"),
    NamedColor("Dark Gray", "#A9A9A9"),
    NamedColor("Dark Green", "#006400"),
    NamedColor("Dark Khaki", "#BDB76B"),
    NamedColor("Dark Magenta", "#8B008B"),
    NamedColor("Dark Olive Green", "#556B2F"),
    NamedColor("Dark Orange", "#FF8C00"),
    NamedColor("Dark Orchid", "#9932CC"),
    NamedColor("Dark Red", "#8B0000"),
    NamedColor("Dark Salmon", "#E9967A"),
    NamedColor("Dark Sea Green", "#8FBC8F"),
    NamedColor("Dark Slate Blue", "#483D8B"),
    NamedColor("Dark Slate Gray", "#2F4F4F"),
    NamedColor("Dark Turquoise", "#00CED1"),
    NamedColor("Dark Violet", "#9400D3"),
    NamedColor("Deep Pink", "#FF1493"),
    NamedColor("Deep Sky Blue", "#00BFFF"),
    NamedColor("Dim Gray", "#696969"),
    NamedColor("Dodger Blue", "#1E90FF"),
    NamedColor("Firebrick", "#B22222"),
    NamedColor("Floral White", "#FFFAF0"),
    NamedColor("Forest Green", "#228B22"),
    NamedColor("Gainsboro", "#DCDCDC"),
    NamedColor("Ghost White", "#F8F8FF"),
    NamedColor("Gold", "#FFD700"),
    NamedColor("Goldenrod", "#DAA520"),
    NamedColor("Gray", "#808080"),
    NamedColor("Green", "#008000"),
    NamedColor("Green Yellow", "#ADFF2F"),
    NamedColor("Honeydew", "#F0FFF0"),
    NamedColor("Hot Pink", "#FF69B4"),
    NamedColor("Indian Red", "#CD5C5C"),
    NamedColor("Indigo", "#4B0082"),
    NamedColor("Ivory", "#FFFFF0"),
    NamedColor("Khaki", "#F0E68C"),
    NamedColor("Lavender", "#E6E6FA"),
    NamedColor("Lavender Blush", "#FFF0F5"),
    NamedColor("Lawn Green", "#7CFC00"),
    NamedColor("Lemon Chiffon", "#FFFACD"),
    NamedColor("Light Blue", "#ADD8E6"),
    NamedColor("Light Coral", "#F08080"),
    NamedColor("Light Cyan", "#E0FFFF"),
    NamedColor("Light Goldenrod Yellow", "#FAFAD2"),
    NamedColor("Light Gray", "#D3D3D3"),
    NamedColor("Light Green", "#90EE90"),
    NamedColor("Light Pink", "#FFB6C1"),
    NamedColor("Light Salmon", "#FFA07A"),
    NamedColor("Light Sea Green", "#20B2AA"),
    NamedColor("Light Sky Blue", "#87CEFA"),
    NamedColor("Light Slate Gray", "#778899"),
    NamedColor("Light Steel Blue", "#B0C4DE"),
    NamedColor("Light Yellow", "#FFFFE0"),
    NamedColor("Lime", "#00FF00"),
    NamedColor("Lime Green", "#32CD32"),
    NamedColor("Linen", "#FAF0E6"),
    NamedColor("Maroon", "#800000"),
    NamedColor("Medium Aquamarine", "#66CDAA"),
    NamedColor("Medium Blue", "#0000CD"),
    NamedColor("Medium Orchid", "#BA55D3"),
    NamedColor("Medium Purple", "#9370DB"),
    NamedColor("Medium Sea Green", "#3CB371"),
    NamedColor("Medium Slate Blue", "#7B68EE"),
    NamedColor("Medium Spring Green", "#00FA9A"),
    NamedColor("Medium Turquoise", "#48D1CC"),
    NamedColor("Medium Violet Red", "#C71585"),
    NamedColor("Midnight Blue", "#191970"),
    NamedColor("Mint Cream", "#F5FFFA"),
    NamedColor("Misty Rose", "#FFE4E1"),
    NamedColor("Moccasin", "#FFE4B5"),
    NamedColor("Navajo White", "#FFDEAD"),
    NamedColor("Navy", "#000080"),
    NamedColor("Old Lace", "#FDF5E6"),
    NamedColor("Olive", "#808000"),
    NamedColor("Olive Drab", "#6B8E23"),
    NamedColor("Orange", "#FFA500"),
    NamedColor("Orange Red", "#FF4500"),
    NamedColor("Orchid", "#DA70D6"),
    NamedColor("Pale Goldenrod", "#EEE8AA"),
    NamedColor("Pale Green", "#98FB98"),
    NamedColor("Pale Turquoise", "#AFEEEE"),
    NamedColor("Pale Violet Red", "#DB7093"),
    NamedColor("Papaya Whip", "#FFEFD5"),
    NamedColor("Peach Puff", "#FFDAB9"),
    NamedColor("Peru", "#CD853F"),
    NamedColor("Pink", "#FFC0CB"),
    NamedColor("Plum", "#DDA0DD"),
    NamedColor("Powder Blue", "#B0E0E6"),
    NamedColor("Purple", "#800080"),
    NamedColor("Rebecca Purple", "#663399"),
    NamedColor("Red", "#FF0000"),
    NamedColor("Rosy Brown", "#BC8F8F"),
    NamedColor("Royal Blue", "#4169E1"),
    NamedColor("Saddle Brown", "#8B4513"),
    NamedColor("Salmon", "#FA8072"),
    NamedColor("Sandy Brown", "#F4A460"),
    NamedColor("Sea Green", "#2E8B57"),
    NamedColor("Seashell", "#FFF5EE"),
    NamedColor("Sienna", "#A0522D"),
    NamedColor("Silver", "#C0C0C0"),
    NamedColor("Sky Blue", "#87CEEB"),
    NamedColor("Slate Blue", "#6A5ACD"),
    NamedColor("Slate Gray", "#708090"),
    NamedColor("Snow", "#FFFAFA"),
    NamedColor("Spring Green", "#00FF7F"),
    NamedColor("Steel Blue", "#4682B4"),
    NamedColor("Tan", "#D2B48C"),
    NamedColor("Teal", "#008080"),
    NamedColor("Thistle", "#D8BFD8"),
    NamedColor("Tomato", "#FF6347"),
    NamedColor("Turquoise", "#40E0D0"),
    NamedColor("Violet", "#EE82EE"),
    NamedColor("Wheat", "#F5DEB3"),
    NamedColor("White", "#FFFFFF"),
    NamedColor("White Smoke", "#F5F5F5"),
    NamedColor("Yellow", "#FFFF00"),
    NamedColor("Yellow Green", "#9ACD32"),
]
