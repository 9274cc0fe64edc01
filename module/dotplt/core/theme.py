"""Minimalist light theme + per-metric three-colour palettes.

Used by the figure shell (soft gray background, white surfaces, dark text)
and by PictogramArtist (one colour per severity bucket, switched with the
active metric). No JavaScript; all styling is inline CSS.
"""

# Light-mode defaults: subtle gray background, white cards, neutral borders.
THEME = {
    "background": "#f5f5f8",       # page background
    "surface": "#ffffff",          # cards / axes boxes / controls surface
    "foreground": "#111827",       # primary text
    "border": "#e5e7eb",           # low-contrast borders
    "pill_bg": "#f3f4f6",          # unselected pill background
    "pill_bg_checked": "#111827",  # selected pill background
    "accent": "#6366f1",           # primary accent (indigo)
    "accent_soft": "#eef2ff",      # soft accent background
    "muted": "#6b7280",            # secondary text
    "error": "#b91c1c",            # load failure message
}

# metric -> bucket -> colour, plus the legend's theme name
COLOR_SCHEMES = {
    "coffee": {
        "low": "#DEB887",     # burlywood
        "medium": "#A0522D",  # sienna
        "high": "#654321",    # dark brown
        "theme": "Coffee Theme",
    },
    "sleep": {
        "low": "#FFA07A",     # light coral: short sleep
        "medium": "#9370DB",  # medium purple
        "high": "#4169E1",    # royal blue: well rested
        "theme": "Sleep Theme",
    },
    "caffeine": {
        "low": "#FFD700",     # gold
        "medium": "#FF8C00",  # dark orange
        "high": "#DC143C",    # crimson
        "theme": "Caffeine Theme",
    },
}
