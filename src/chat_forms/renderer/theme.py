"""
Theme lookup.

Maps a form's accent color to a bundle of CSS classes and its icon name to
a glyph. Presentation only: nothing here affects values or dispatch.
"""

from pydantic import BaseModel, ConfigDict

from chat_forms.models.form_schema import AccentColor, IconName


class ColorTheme(BaseModel):
    """CSS classes for one accent color."""

    model_config = ConfigDict(frozen=True)

    button: str
    choice_on: str
    choice_off: str
    ring: str
    header_bg: str
    header_text: str
    rating_color: str
    toggle_on: str
    slider_accent: str


def _solid(color: str, header_bg: str, header_text: str = "text-white") -> ColorTheme:
    return ColorTheme(
        button=f"bg-{color}-600 hover:bg-{color}-700 text-white shadow-md",
        choice_on=f"bg-{color}-600 text-white border-{color}-600 shadow-md",
        choice_off=f"bg-white text-zinc-600 border-zinc-200 hover:border-{color}-300",
        ring=f"focus-visible:ring-{color}-500",
        header_bg=header_bg,
        header_text=header_text,
        rating_color="text-yellow-400",
        toggle_on=f"bg-{color}-600",
        slider_accent=f"accent-{color}-600",
    )


COLOR_THEMES: dict[AccentColor, ColorTheme] = {
    AccentColor.BLUE: _solid("blue", "bg-gradient-to-r from-blue-600 to-blue-700"),
    AccentColor.AMBER: ColorTheme(
        button="bg-gradient-to-r from-amber-500 to-orange-500 text-white shadow-md",
        choice_on="bg-amber-100 border-amber-400 shadow-md scale-110",
        choice_off="bg-white text-zinc-600 border-zinc-200 hover:border-amber-300",
        ring="focus-visible:ring-amber-500",
        header_bg="bg-gradient-to-br from-amber-50 via-orange-50 to-yellow-50",
        header_text="text-amber-800",
        rating_color="text-amber-400",
        toggle_on="bg-amber-500",
        slider_accent="accent-amber-500",
    ),
    AccentColor.EMERALD: _solid("emerald", "bg-gradient-to-r from-emerald-600 to-teal-600"),
    AccentColor.RED: _solid("red", "bg-gradient-to-r from-red-50 to-orange-50", "text-red-800"),
    AccentColor.INDIGO: _solid("indigo", "bg-gradient-to-br from-indigo-50 to-violet-50", "text-indigo-800"),
    AccentColor.PURPLE: _solid("purple", "bg-gradient-to-r from-purple-600 via-fuchsia-500 to-pink-500"),
    AccentColor.PINK: _solid("pink", "bg-gradient-to-r from-pink-500 to-rose-500"),
    AccentColor.ZINC: ColorTheme(
        button="bg-zinc-900 hover:bg-zinc-800 text-white shadow-md",
        choice_on="bg-zinc-900 text-white border-zinc-900",
        choice_off="bg-white text-zinc-600 border-zinc-200 hover:border-zinc-400",
        ring="focus-visible:ring-zinc-500",
        header_bg="bg-gradient-to-r from-zinc-800 to-zinc-900",
        header_text="text-white",
        rating_color="text-yellow-400",
        toggle_on="bg-zinc-800",
        slider_accent="accent-zinc-800",
    ),
}

ICON_GLYPHS: dict[IconName, str | None] = {
    IconName.SEND: "📤",
    IconName.MESSAGE: "💬",
    IconName.CARD: "💳",
    IconName.HEADPHONES: "🎧",
    IconName.CLIPBOARD: "📋",
    IconName.PARTY: "🎉",
    IconName.STAR: "⭐",
    IconName.LOCK: "🔒",
    IconName.CALENDAR: "📅",
    IconName.USER: "👤",
    IconName.SETTINGS: "⚙️",
    IconName.SEARCH: "🔍",
    IconName.HEART: "❤️",
    IconName.BELL: "🔔",
    IconName.NONE: None,
}


def get_theme(accent_color: AccentColor | str | None) -> ColorTheme:
    """Theme for an accent color; unknown or missing colors get blue."""
    try:
        return COLOR_THEMES[AccentColor(accent_color or AccentColor.BLUE)]
    except ValueError:
        return COLOR_THEMES[AccentColor.BLUE]


def get_glyph(icon: IconName | str | None) -> str | None:
    try:
        return ICON_GLYPHS[IconName(icon or IconName.NONE)]
    except ValueError:
        return None
