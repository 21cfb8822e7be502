from typing import Dict, Sequence

# X11 shades as hex; matplotlib only knows the base names.
# order: r, fortran, java, lua, javascript, mma, go, matlab, python, julia
DEFAULT_PALETTE = (
    "#CD0000",  # red3
    "#006400",  # darkgreen
    "#8A2BE2",  # blueviolet
    "#436EEE",  # royalblue2
    "#CD8500",  # orange3
    "#7CCD7C",  # palegreen3
    "#00CDCD",  # cyan3
    "#BC8F8F",  # rosybrown
    "#8F8F8F",  # gray56
    "#66CD00",  # chartreuse3
    "#CDAA7D",  # burlywood3
)

DEMO_PALETTE = (
    "#CD0000",  # red3
    "#006400",  # darkgreen
    "#8A2BE2",  # blueviolet
    "#E066FF",  # mediumorchid1
    "#FF8247",  # sienna1
    "#66CD00",  # chartreuse3
)


def build_color_map(names: Sequence[str], palette: Sequence[str] = DEFAULT_PALETTE) -> Dict[str, str]:
    if len(names) > len(palette):
        raise ValueError(f"palette has {len(palette)} colors but {len(names)} names need one")
    return {name: palette[i] for i, name in enumerate(names)}
