import math


class Config:
    """Global tunables for the viewer. Keep constants here to avoid magic numbers."""

    # ------------------------------------------------------------------
    # Display
    CANVAS_WIDTH       = 800
    CANVAS_HEIGHT      = 600
    FONT_NAME          = "courier"
    FONT_SIZE          = 16
    FPS                = 30
    LINE_WIDTH         = 1

    # ------------------------------------------------------------------
    # Form -> generation mapping
    FORM_MAX_PHASE     = 3 * math.pi
    FORM_OFFSET_Y      = 400

    # Initial values shown in the parameter panel
    FORM_DEFAULTS = {
        "num_terms": 6,
        "num_samples": 200,
        "scale_y": 40,
        "max_deviation_x": 2,
        "max_deviation_y": 3,
        "num_zones": 4,
        "x5_width": 30,
        "x3_width": 40,
        "x2_width": 50,
    }
    FORM_MINIMUMS = {"num_terms": 1, "num_samples": 1}
    FORM_STEP          = 1

    # ------------------------------------------------------------------
    # Landing zones
    ZONE_VARIANTS      = ("x5", "x3", "x2")
    ZONE_LABEL_GAP     = 4

    # ------------------------------------------------------------------
    # Colors
    WHITE  = (255, 255, 255)
    BLACK  = (0,   0,   0)
    GRAY   = (61, 69, 75)
    RED    = (255, 100, 100)
    YELLOW = (255, 255, 100)

    TERRAIN_COLOR    = BLACK
    ZONE_COLOR       = RED
    PANEL_COLOR      = (0, 120, 0)
    PANEL_HIGHLIGHT  = RED
    PANEL_BG_ALPHA   = 60
    PANEL_WIDTH      = 230
