"""
DelvForge token helpers: colors and utility-table generators.
"""

from .colors import (
    OPACITY_STEPS,
    RGBA,
    generate_color_variants,
    parse_color,
    with_opacity,
)
from .generators import (
    class_name,
    compose_component_classes,
    generate_fluid_typography,
    generate_spacing_utilities,
    parse_declarations,
    scale_length,
    spacing_directions,
)

__all__ = [
    # Colors
    "OPACITY_STEPS",
    "RGBA",
    "generate_color_variants",
    "parse_color",
    "with_opacity",
    # Generators
    "class_name",
    "compose_component_classes",
    "generate_fluid_typography",
    "generate_spacing_utilities",
    "parse_declarations",
    "scale_length",
    "spacing_directions",
]
