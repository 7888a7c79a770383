"""
Data binding for the dashboard page.

Turns a cache snapshot into the rows the template renders. Colours follow
ascending, non-overlapping temperature bands.
"""

ERROR_INDICATOR = "Error"
ERROR_COLOR = "#d08770"

# (upper bound exclusive, colour); the last band is open-ended
TEMPERATURE_BANDS = [
    (22.0, "#88c0d0"),   # blue
    (38.0, "#a3be8c"),   # green
    (42.0, "#ebcb8b"),   # yellow
    (float("inf"), "#bf616a"),  # red
]


def temperature_color(temperature):
    for upper, color in TEMPERATURE_BANDS:
        if temperature < upper:
            return color
    return TEMPERATURE_BANDS[-1][1]


def build_rows(snapshot):
    """Rows sorted by probe name; failed probes carry the error indicator"""
    rows = []
    for name in sorted(snapshot):
        temperature = snapshot[name]
        if temperature is None:
            rows.append({
                "name": name,
                "ok": False,
                "display": ERROR_INDICATOR,
                "color": ERROR_COLOR,
            })
        else:
            rows.append({
                "name": name,
                "ok": True,
                "display": f"{temperature:.2f}°C",
                "color": temperature_color(temperature),
            })
    return rows
