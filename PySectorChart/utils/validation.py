def ensure_colors(labels, colors):
    missing = [lab for lab in dict.fromkeys(labels) if lab not in colors]
    if missing:
        raise KeyError(f"no color for {', '.join(map(repr, missing))}")
