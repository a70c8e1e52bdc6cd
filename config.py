"""Configuration for the 2-D gravity sandbox."""

WINDOW = {
    "width": 1280,
    "height": 800,
    "title": "2D N-body Gravity Sandbox",
    "fps": 60,
}

# Physics parameters
SIMULATION = {
    "dt": 1.0,              # One frame = one unit time step
    "solver": "direct",     # "direct" (exact O(n^2)) or "barnes-hut"
    "theta": 0.5,           # Barnes-Hut opening angle, only used by "barnes-hut"
    "workers": 1,           # >1 spreads force accumulation over a thread pool
}

# Demo scene: a star with rings of rocky planets on either side
SCENE = {
    "star_type": "main",
    "rings": 15,
    "inner_radius": 100.0,
    "ring_spacing_fraction": 1 / 40,  # Of the window width
}

COLORS = {
    "background": (0, 0, 0),
}

LOGGING = {
    "level": "INFO",
    "log_dir": "logs",
}
