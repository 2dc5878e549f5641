"""
Knowledge-base entries for graphics, images and OpenGL.
"""

KEYWORDS = {
    "SCREEN": {
        "type": "statement",
        "category": "graphics",
        "description": "Sets the screen mode or makes an image handle the display surface.",
        "syntax": "SCREEN {mode% | imageHandle&}",
        "example": "SCREEN _NEWIMAGE(800, 600, 32)",
        "related": ["_NEWIMAGE", "CLS", "_DEST"],
        "version": "QBasic",
        "tags": ["graphics", "window"],
    },
    "PSET": {
        "type": "statement",
        "category": "graphics",
        "description": "Sets a single pixel to a colour.",
        "syntax": "PSET [STEP](x, y)[, color]",
        "example": "PSET (10, 20), _RGB32(255, 0, 0)",
        "related": ["PRESET", "POINT", "LINE"],
        "version": "QBasic",
        "tags": ["drawing"],
    },
    "PRESET": {"type": "statement", "category": "graphics", "description": "Sets a pixel to the background colour.", "syntax": "PRESET [STEP](x, y)[, color]", "related": ["PSET"], "version": "QBasic"},
    "POINT": {"type": "function", "category": "graphics", "description": "Returns the colour of a pixel.", "syntax": "clr& = POINT(x, y)", "related": ["PSET"], "version": "QBasic"},
    "LINE": {
        "type": "statement",
        "category": "graphics",
        "description": "Draws a line, box or filled box.",
        "syntax": "LINE [(x1, y1)]-(x2, y2)[, color][, {B | BF}]",
        "example": "LINE (0, 0)-(100, 100), _RGB32(0, 255, 0), BF",
        "related": ["PSET", "CIRCLE"],
        "version": "QBasic",
        "tags": ["drawing"],
    },
    "CIRCLE": {
        "type": "statement",
        "category": "graphics",
        "description": "Draws a circle, ellipse or arc.",
        "syntax": "CIRCLE [STEP](x, y), radius[, color[, start, end[, aspect]]]",
        "example": "CIRCLE (320, 240), 100, _RGB32(255, 255, 0)",
        "related": ["LINE", "PAINT"],
        "version": "QBasic",
        "tags": ["drawing"],
    },
    "PAINT": {"type": "statement", "category": "graphics", "description": "Flood fills an area.", "syntax": "PAINT [STEP](x, y)[, fillColor[, borderColor]]", "related": ["CIRCLE", "LINE"], "version": "QBasic"},
    "DRAW": {"type": "statement", "category": "graphics", "description": "Draws using a turtle graphics command string.", "syntax": "DRAW commands$", "related": ["LINE"], "version": "QBasic"},
    "GET": {"type": "statement", "category": "graphics", "description": "Reads a screen area into an array, or a record from a file.", "syntax": "GET (x1, y1)-(x2, y2), array() | GET #n, [position], variable", "related": ["PUT", "_PUTIMAGE"], "version": "QBasic"},
    "PUT": {"type": "statement", "category": "graphics", "description": "Draws an array onto the screen, or writes a record to a file.", "syntax": "PUT (x, y), array() | PUT #n, [position], variable", "related": ["GET", "_PUTIMAGE"], "version": "QBasic"},
    "_NEWIMAGE": {
        "type": "function",
        "category": "images",
        "description": "Creates a new image surface and returns its handle. Free it with _FREEIMAGE.",
        "syntax": "handle& = _NEWIMAGE(width&, height&[, mode])",
        "example": "img& = _NEWIMAGE(640, 480, 32)",
        "parameters": [
            {"name": "width&", "type": "LONG"},
            {"name": "height&", "type": "LONG"},
            {"name": "mode", "type": "INTEGER", "optional": True, "description": "Screen mode or 32 for 32-bit colour."},
        ],
        "returns": "LONG",
        "related": ["_FREEIMAGE", "_PUTIMAGE", "SCREEN"],
        "version": "QB64",
        "tags": ["image", "handle"],
    },
    "_FREEIMAGE": {
        "type": "statement",
        "category": "images",
        "description": "Frees an image handle created with _NEWIMAGE or _LOADIMAGE.",
        "syntax": "_FREEIMAGE handle&",
        "related": ["_NEWIMAGE", "_LOADIMAGE"],
        "version": "QB64",
        "tags": ["image", "handle"],
    },
    "_LOADIMAGE": {"type": "function", "category": "images", "description": "Loads an image file and returns its handle.", "syntax": "handle& = _LOADIMAGE(file$[, mode])", "returns": "LONG", "related": ["_FREEIMAGE", "_SAVEIMAGE"], "version": "QB64"},
    "_SAVEIMAGE": {"type": "statement", "category": "images", "description": "Saves an image or the screen to a file.", "syntax": "_SAVEIMAGE file$[, handle&]", "related": ["_LOADIMAGE"], "version": "QB64PE"},
    "_PUTIMAGE": {
        "type": "statement",
        "category": "images",
        "description": "Copies all or part of an image onto another image or the screen.",
        "syntax": "_PUTIMAGE [(dx1, dy1)-(dx2, dy2)], [source&], [dest&]",
        "related": ["_NEWIMAGE", "_LOADIMAGE"],
        "version": "QB64",
        "tags": ["drawing", "image"],
    },
    "_DEST": {"type": "statement", "category": "images", "description": "Sets the image that graphics statements draw to.", "syntax": "_DEST handle&", "related": ["_SOURCE", "_DISPLAY"], "version": "QB64"},
    "_SOURCE": {"type": "statement", "category": "images", "description": "Sets the image that POINT and GET read from.", "syntax": "_SOURCE handle&", "related": ["_DEST"], "version": "QB64"},
    "_DISPLAY": {"type": "statement", "category": "graphics", "description": "Shows the current page and disables automatic display refresh.", "syntax": "_DISPLAY", "related": ["_AUTODISPLAY", "_LIMIT"], "version": "QB64"},
    "_AUTODISPLAY": {"type": "statement", "category": "graphics", "description": "Re-enables automatic display refresh.", "syntax": "_AUTODISPLAY", "related": ["_DISPLAY"], "version": "QB64"},
    "_WIDTH": {"type": "function", "category": "images", "description": "Returns the width of an image or the screen.", "syntax": "w& = _WIDTH[(handle&)]", "related": ["_HEIGHT"], "version": "QB64"},
    "_HEIGHT": {"type": "function", "category": "images", "description": "Returns the height of an image or the screen.", "syntax": "h& = _HEIGHT[(handle&)]", "related": ["_WIDTH"], "version": "QB64"},
    "_RGB": {"type": "function", "category": "colors", "description": "Returns the closest colour attribute for red, green and blue values.", "syntax": "clr& = _RGB(r, g, b)", "related": ["_RGB32"], "version": "QB64"},
    "_RGB32": {"type": "function", "category": "colors", "description": "Returns a 32-bit colour value.", "syntax": "clr~& = _RGB32(r, g, b[, a])", "related": ["_RGB", "_RGBA32"], "version": "QB64"},
    "_RGBA32": {"type": "function", "category": "colors", "description": "Returns a 32-bit colour value with alpha.", "syntax": "clr~& = _RGBA32(r, g, b, a)", "related": ["_RGB32"], "version": "QB64"},
    "_SCREENIMAGE": {"type": "function", "category": "images", "description": "Captures the desktop into a new image.", "syntax": "handle& = _SCREENIMAGE", "related": ["_SAVEIMAGE"], "version": "QB64"},
    "_GL": {
        "type": "opengl",
        "category": "opengl",
        "description": "SUB name reserved for custom OpenGL rendering code.",
        "syntax": "SUB _GL\n    ' OpenGL calls\nEND SUB",
        "related": ["_GLRENDER"],
        "version": "QB64",
    },
    "_GLRENDER": {"type": "opengl", "category": "opengl", "description": "Sets whether OpenGL renders behind, on top of, or only.", "syntax": "_GLRENDER {_BEHIND | _ONTOP | _ONLY}", "related": ["_GL"], "version": "QB64"},
}
