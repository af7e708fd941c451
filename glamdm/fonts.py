# fonts.py
# Ordered FIGlet font catalog cycled with ←/→ or [/]. Index 0 is the startup font.

from typing import Tuple

DEFAULT_FONT = "standard"

FONT_CATALOG: Tuple[str, ...] = (
    "standard", "big", "doom", "slant", "shadow", "block", "banner", "larry3d", "speed", "smslant", "small", "isometric1",
    "3-d", "3x5", "5lineoblique", "acrobatic", "alligator", "alligator2", "alphabet",
    "avatar", "banner3-D", "banner3", "banner4", "barbwire", "basic", "bell", "bigchief",
    "binary", "bubble", "bulbhead", "calgphy2", "caligraphy", "catwalk", "chunky",
    "coinstak", "colossal", "computer", "contessa", "contrast", "cosmic", "cosmike",
    "cricket", "cursive", "cyberlarge", "cybermedium", "cybersmall", "diamond", "digital", "doh", "dotmatrix", "drpepper",
    "eftichess", "eftifont", "eftipiti", "eftirobot", "eftitalic", "eftiwall", "eftiwater",
    "epic", "fender", "fourtops", "fuzzy", "goofy", "gothic", "graffiti", "hollywood",
    "invita", "isometric2", "isometric3", "isometric4", "italic", "ivrit", "jazmine",
    "jerusalem", "katakana", "kban", "lcd", "lean", "letters", "linux", "lockergnome",
    "madrid", "marquee", "maxfour", "mike", "mini", "mirror", "mnemonic", "morse",
    "moscow", "nancyj-fancy", "nancyj-underlined", "nancyj", "nipples", "ntgreek", "o8",
    "ogre", "pawp", "peaks", "pebbles", "pepper", "poison", "puffy", "pyramid", "rectangles",
    "relief", "relief2", "rev", "roman", "rot13", "rounded", "rowancap", "rozzo", "runic",
    "runyc", "sblood", "script", "serifcap", "short", "slide", "slscript", "smisome1", "smkeyboard",
    "smscript", "smshadow", "smtengwar", "stampatello", "starwars", "stellar", "stop",
    "straight", "tanja", "tengwar", "term", "thick", "thin", "threepoint", "ticks", "ticksslant",
    "tinker-toy", "tombstone", "trek", "tsalagi", "twopoint", "univers", "usaflag", "wavy",
    "weird",
)
