"""
Default design tokens for DelvForge.

These tables are used for every top-level option the user does not supply.
A user-supplied table replaces the default table whole (shallow merge).
"""

from __future__ import annotations

from typing import Any

DEFAULT_PREFIX = "df-"
DEFAULT_SEPARATOR = ":"

# =============================================================================
# Breakpoints & Containers
# =============================================================================

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "xs": "480px",
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
    "3xl": "1920px",
}

DEFAULT_CONTAINERS: dict[str, str] = {
    "xs": "100%",
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1400px",
    "3xl": "1600px",
}

DEFAULT_GRID: dict[str, Any] = {
    "columns": 24,
    "gap": "0.5rem",
    "gutters": {
        "xs": "0.5rem",
        "sm": "1rem",
        "md": "1.5rem",
        "lg": "2rem",
        "xl": "3rem",
    },
}

# =============================================================================
# Spacing & Typography
# =============================================================================

# Bare numbers are rem.
DEFAULT_SPACING: dict[str, int | float | str] = {
    "0": 0,
    "px": "1px",
    "0.5": 0.125,
    "1": 0.25,
    "1.5": 0.375,
    "2": 0.5,
    "2.5": 0.625,
    "3": 0.75,
    "3.5": 0.875,
    "4": 1,
    "5": 1.25,
    "6": 1.5,
    "7": 1.75,
    "8": 2,
    "9": 2.25,
    "10": 2.5,
    "11": 2.75,
    "12": 3,
    "14": 3.5,
    "16": 4,
    "20": 5,
    "24": 6,
    "28": 7,
    "32": 8,
    "36": 9,
    "40": 10,
    "44": 11,
    "48": 12,
    "52": 13,
    "56": 14,
    "60": 15,
    "64": 16,
    "72": 18,
    "80": 20,
    "96": 24,
    "128": 32,
    "160": 40,
    "192": 48,
    "224": 56,
    "256": 64,
}

# size -> (font-size, {"lineHeight": ...})
DEFAULT_FONT_SIZE: dict[str, Any] = {
    "xs": ("0.75rem", {"lineHeight": "1rem"}),
    "sm": ("0.875rem", {"lineHeight": "1.25rem"}),
    "base": ("1rem", {"lineHeight": "1.5rem"}),
    "lg": ("1.125rem", {"lineHeight": "1.75rem"}),
    "xl": ("1.25rem", {"lineHeight": "1.75rem"}),
    "2xl": ("1.5rem", {"lineHeight": "2rem"}),
    "3xl": ("1.875rem", {"lineHeight": "2.25rem"}),
    "4xl": ("2.25rem", {"lineHeight": "2.5rem"}),
    "5xl": ("3rem", {"lineHeight": "1"}),
    "6xl": ("3.75rem", {"lineHeight": "1"}),
    "7xl": ("4.5rem", {"lineHeight": "1"}),
    "8xl": ("6rem", {"lineHeight": "1"}),
    "9xl": ("8rem", {"lineHeight": "1"}),
}

# =============================================================================
# Colors
# =============================================================================

_SHADES = ("25", "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _scale(*values: str) -> dict[str, str]:
    return dict(zip(_SHADES, values, strict=True))


DEFAULT_COLORS: dict[str, Any] = {
    "primary": _scale(
        "#f8faff", "#f0f6ff", "#e0edff", "#b8d9ff", "#85c2ff", "#52a9ff",
        "#2196f3", "#1976d2", "#1565c0", "#0d47a1", "#0a3e82", "#0d2847",
    ),
    "secondary": _scale(
        "#fafafa", "#f5f5f5", "#eeeeee", "#e0e0e0", "#bdbdbd", "#9e9e9e",
        "#757575", "#616161", "#424242", "#303030", "#212121", "#0f0f0f",
    ),
    "success": _scale(
        "#f6fef9", "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399",
        "#10b981", "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
    ),
    "warning": _scale(
        "#fffcf5", "#fff8e1", "#ffecb3", "#ffe082", "#ffd54f", "#ffca28",
        "#ffc107", "#ffb300", "#ffa000", "#ff8f00", "#ff6f00", "#e65100",
    ),
    "danger": _scale(
        "#fffbfa", "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171",
        "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "info": _scale(
        "#f8faff", "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa",
        "#3b82f6", "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
}

# =============================================================================
# Components
# =============================================================================

DEFAULT_COMPONENTS: dict[str, Any] = {
    "card": {
        "base": "rounded-lg border bg-white shadow-sm",
        "variants": {
            "elevated": "shadow-lg",
            "bordered": "border-2",
            "flat": "shadow-none",
        },
    },
    "button": {
        "base": (
            "inline-flex items-center justify-center rounded-md font-medium "
            "transition-colors focus:outline-none focus:ring-2 focus:ring-offset-2"
        ),
        "sizes": {
            "sm": "h-9 px-3 text-sm",
            "md": "h-10 px-4",
            "lg": "h-11 px-8",
            "xl": "h-12 px-10 text-lg",
        },
        "variants": {
            "default": "bg-primary-500 text-white hover:bg-primary-600",
            "secondary": "bg-secondary-100 text-secondary-900 hover:bg-secondary-200",
            "outline": "border border-primary-500 text-primary-500 hover:bg-primary-50",
        },
    },
}

# =============================================================================
# Themes
# =============================================================================

DEFAULT_THEMES: dict[str, Any] = {
    "light": {
        "name": "light",
        "default": True,
        "colorScheme": "light",
        "colors": {
            "background": "#ffffff",
            "foreground": "#0a0a0a",
            "surface": {
                "50": "#f8fafc",
                "100": "#f1f5f9",
                "200": "#e2e8f0",
                "300": "#cbd5e1",
                "400": "#94a3b8",
                "500": "#64748b",
                "600": "#475569",
                "700": "#334155",
                "800": "#1e293b",
                "900": "#0f172a",
            },
        },
    },
    "dark": {
        "name": "dark",
        "colorScheme": "dark",
        "colors": {
            "background": "#0a0a0a",
            "foreground": "#fafafa",
            "surface": {
                "50": "#0f172a",
                "100": "#1e293b",
                "200": "#334155",
                "300": "#475569",
                "400": "#64748b",
                "500": "#94a3b8",
                "600": "#cbd5e1",
                "700": "#e2e8f0",
                "800": "#f1f5f9",
                "900": "#f8fafc",
            },
        },
    },
}

# =============================================================================
# Animation & Features
# =============================================================================

DEFAULT_ANIMATIONS: dict[str, Any] = {
    "durations": {
        "75": "75ms",
        "100": "100ms",
        "150": "150ms",
        "200": "200ms",
        "300": "300ms",
        "500": "500ms",
        "700": "700ms",
        "1000": "1000ms",
    },
    "easings": {
        "linear": "linear",
        "in": "cubic-bezier(0.4, 0, 1, 1)",
        "out": "cubic-bezier(0, 0, 0.2, 1)",
        "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
        "bounce": "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
        "elastic": "cubic-bezier(0.175, 0.885, 0.32, 1.275)",
    },
}

DEFAULT_FEATURES: dict[str, bool] = {
    "containerQueries": True,
    "customProperties": True,
    "modernSelectors": True,
    "advancedGrid": True,
    "fluidTypography": True,
    "logicalProperties": True,
}
