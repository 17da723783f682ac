THEME = {
    "color": {
        "muted": "#94a3b8",
        "success": "#22c55e",
        "warning": "#f59e0b",
        "danger": "#ef4444",
    },
    "font": {"size": {"xl": 20}},
}
