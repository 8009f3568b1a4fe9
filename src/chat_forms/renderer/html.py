"""
HTML rendering of form views.

Converts a FormView or SubmittedView into an HTML fragment. All text from
the schema is escaped.
"""

from typing import Callable

from markupsafe import Markup, escape

from chat_forms.renderer.theme import ColorTheme
from chat_forms.renderer.views import (
    CheckboxGroupView,
    CheckboxView,
    ChoiceView,
    ControlView,
    FieldBlock,
    FormView,
    InputView,
    RankView,
    RatingView,
    SelectView,
    SliderView,
    SubmittedView,
    SwitchView,
    TextAreaView,
)


def _attr(name: str, value) -> str:
    if value is None:
        return ""
    return f' {name}="{escape(str(value))}"'


def _render_input(view: InputView, theme: ColorTheme) -> str:
    return (
        f'<input id="{escape(view.field_id)}" name="{escape(view.field_id)}"'
        f' type="{escape(view.input_type)}" value="{escape(view.value)}"'
        f'{_attr("placeholder", view.placeholder)}{_attr("min", view.min)}'
        f'{_attr("max", view.max)}{_attr("step", view.step)}'
        f' class="field-input {theme.ring}">'
    )


def _render_textarea(view: TextAreaView, theme: ColorTheme) -> str:
    return (
        f'<textarea id="{escape(view.field_id)}" name="{escape(view.field_id)}"'
        f'{_attr("placeholder", view.placeholder)} class="field-input {theme.ring}">'
        f"{escape(view.value)}</textarea>"
    )


def _render_choice(view: ChoiceView, theme: ColorTheme) -> str:
    size = "choice-compact" if view.compact else "choice-labeled"
    buttons = "".join(
        f'<button type="button" name="{escape(view.field_id)}" value="{escape(opt.label)}"'
        f' aria-pressed="{str(opt.selected).lower()}"'
        f' class="choice {size} {theme.choice_on if opt.selected else theme.choice_off}">'
        f"{escape(opt.label)}</button>"
        for opt in view.options
    )
    return f'<div class="choice-group" role="radiogroup">{buttons}</div>'


def _render_select(view: SelectView, theme: ColorTheme) -> str:
    options = f'<option value="">{escape(view.placeholder)}</option>'
    options += "".join(
        f'<option value="{escape(opt.label)}"{" selected" if opt.selected else ""}>'
        f"{escape(opt.label)}</option>"
        for opt in view.options
    )
    return (
        f'<select id="{escape(view.field_id)}" name="{escape(view.field_id)}"'
        f' class="field-input {theme.ring}">{options}</select>'
    )


def _render_checkbox(view: CheckboxView, theme: ColorTheme) -> str:
    return (
        f'<label for="{escape(view.field_id)}" class="checkbox">'
        f'<input id="{escape(view.field_id)}" name="{escape(view.field_id)}" type="checkbox"'
        f'{" checked" if view.checked else ""}>'
        f"<span>{escape(view.label)}</span></label>"
    )


def _render_checkbox_group(view: CheckboxGroupView, theme: ColorTheme) -> str:
    items = "".join(
        f'<label class="checkbox"><input type="checkbox" name="{escape(view.field_id)}"'
        f' value="{escape(opt.label)}"{" checked" if opt.selected else ""}>'
        f"<span>{escape(opt.label)}</span></label>"
        for opt in view.options
    )
    return f'<div class="checkbox-group">{items}</div>'


def _render_switch(view: SwitchView, theme: ColorTheme) -> str:
    state = theme.toggle_on if view.on else "bg-zinc-200"
    return (
        f'<button type="button" role="switch" name="{escape(view.field_id)}"'
        f' aria-checked="{str(view.on).lower()}" class="switch {state}"></button>'
    )


def _render_slider(view: SliderView, theme: ColorTheme) -> str:
    return (
        f'<div class="slider"><input id="{escape(view.field_id)}" name="{escape(view.field_id)}"'
        f' type="range"{_attr("min", view.min)}{_attr("max", view.max)}{_attr("step", view.step)}'
        f'{_attr("value", view.display)} class="{theme.slider_accent}">'
        f'<span class="slider-value">{escape(view.display)}</span></div>'
    )


def _render_rating(view: RatingView, theme: ColorTheme) -> str:
    stars = "".join(
        f'<button type="button" name="{escape(view.field_id)}" value="{i}"'
        f' class="star {theme.rating_color + " filled" if filled else "empty"}">'
        f'{"★" if filled else "☆"}</button>'
        for i, filled in enumerate(view.stars, start=1)
    )
    return f'<div class="rating">{stars}</div>'


def _render_rank(view: RankView, theme: ColorTheme) -> str:
    items = "".join(
        f'<li data-index="{i}">{escape(item)}</li>' for i, item in enumerate(view.items)
    )
    return f'<ol class="rank" id="{escape(view.field_id)}">{items}</ol>'


_CONTROL_RENDERERS: dict[type[ControlView], Callable[..., str]] = {
    InputView: _render_input,
    TextAreaView: _render_textarea,
    ChoiceView: _render_choice,
    SelectView: _render_select,
    CheckboxView: _render_checkbox,
    CheckboxGroupView: _render_checkbox_group,
    SwitchView: _render_switch,
    SliderView: _render_slider,
    RatingView: _render_rating,
    RankView: _render_rank,
}


def render_control(view: ControlView, theme: ColorTheme) -> Markup:
    """Render a single control view."""
    renderer = _CONTROL_RENDERERS.get(type(view))
    if renderer is None:
        raise TypeError(f"No HTML renderer for {type(view).__name__}")
    return Markup(renderer(view, theme))


def _render_block(block: FieldBlock, theme: ColorTheme) -> str:
    label = ""
    if block.label is not None:
        label = f'<label for="{escape(block.field_id)}" class="field-label">{escape(block.label)}</label>'
    return f'<div class="field-group">{label}{render_control(block.control, theme)}</div>'


def render_html(view: FormView | SubmittedView) -> Markup:
    """Render a whole form view to an HTML fragment."""
    if isinstance(view, SubmittedView):
        return Markup(
            f'<div class="form-card submitted"><span class="check">✓</span>'
            f"<p>{escape(view.message)}</p></div>"
        )

    theme = view.theme
    header = ""
    if view.title:
        glyph = f'<span class="icon">{escape(view.glyph)}</span>' if view.glyph else ""
        header = (
            f'<div class="form-header {theme.header_bg} {theme.header_text}">'
            f'{glyph}<span class="form-title">{escape(view.title)}</span></div>'
        )
    blocks = "".join(_render_block(block, theme) for block in view.fields)
    return Markup(
        f'<div class="form-card accent-{view.accent_color.value}">{header}'
        f'<form class="form-body">{blocks}'
        f'<button type="submit" class="submit {theme.button}">{escape(view.submit_label)}</button>'
        f"</form></div>"
    )
