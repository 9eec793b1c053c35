"""Named tolerances and drawing constants.

Tolerances are relative and unitless; they hold for whatever unit the
caller's coordinates are in.
"""

# Numeric tolerances
PARALLEL_TOLERANCE = 1e-12        # |sin| of the angle between lines below this means parallel

# SVG page, US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612
MARGIN = 36.0                     # 0.5" border around the fitted drawing

# Layer styles
SOURCE_STROKE = "#333"
SOURCE_WIDTH = 1.5
SOURCE_DASH = "6,3"               # centre line is drawn dashed
LEFT_STROKE = "#1f77b4"
RIGHT_STROKE = "#d62728"
OFFSET_WIDTH = 1.0
CORRIDOR_FILL = "#e8e8e8"
