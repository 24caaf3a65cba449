"""
Font Catalog
============

The fixed list of installable Nerd Fonts. Entries are built once at import
time and never change.
"""

from nerdfonts.core.models import FontEntry

CATALOG: tuple[FontEntry, ...] = (
    FontEntry(
        name="FiraCode Nerd Font",
        asset_name="FiraCode.zip",
        description="Monospaced font with programming ligatures",
        variants=("Regular", "Bold", "Light"),
        size_mb=2.1,
    ),
    FontEntry(
        name="Hack Nerd Font",
        asset_name="Hack.zip",
        description="A typeface designed for source code",
        variants=("Regular", "Bold", "Italic"),
        size_mb=1.8,
    ),
    FontEntry(
        name="JetBrainsMono Nerd Font",
        asset_name="JetBrainsMono.zip",
        description="Typeface for developers by JetBrains",
        variants=("Regular", "Bold", "Italic"),
        size_mb=2.3,
    ),
    FontEntry(
        name="SourceCodePro Nerd Font",
        asset_name="SourceCodePro.zip",
        description="Monospaced font family by Adobe",
        variants=("Regular", "Bold", "Light"),
        size_mb=1.9,
    ),
    FontEntry(
        name="DejaVuSansMono Nerd Font",
        asset_name="DejaVuSansMono.zip",
        description="Monospaced version of DejaVu Sans",
        variants=("Regular", "Bold", "Oblique"),
        size_mb=1.5,
    ),
    FontEntry(
        name="CascadiaCode Nerd Font",
        asset_name="CascadiaCode.zip",
        description="Microsoft's programming font with ligatures",
        variants=("Regular", "SemiLight", "Light"),
        size_mb=2.0,
    ),
    FontEntry(
        name="Meslo Nerd Font",
        asset_name="Meslo.zip",
        description="Customized version of Apple's Menlo font",
        variants=("Regular", "Bold", "Italic"),
        size_mb=1.7,
    ),
)


def get_catalog() -> list[FontEntry]:
    """Get all available fonts in catalog order."""
    return list(CATALOG)
