"""Tests for wrapper module rendering."""

from __future__ import annotations

from datetime import UTC, datetime

from wrapgen.models import Component, Variant
from wrapgen.render.templating import format_timestamp
from wrapgen.render.wrapper import WrapperGenerator, humanize_class_name, render_events

EXPECTED_DIVIDER = """/**
 * @fileoverview React wrappers for Material Web divider components
 *
 * This file was auto-generated on 2024-05-17T09:30:12.345Z
 *
 * DO NOT EDIT MANUALLY - This file is generated by wrapgen
 * To regenerate, run: wrapgen generate
 *
 * @generated
 */

'use client'

import { createComponent } from '@lit/react'
import React, { ComponentProps } from 'react'
import { MdDivider as _MdDivider } from '@material/web/divider/divider.js'

/**
 * Props for the `MdDivider` component.
 * This type is used to provide the props for the `MdDivider` component.
 */
export type MdDividerProps = ComponentProps<typeof MdDivider>

export interface MdDividerElement extends _MdDivider {}

/**
 * Material Design Divider component.
 * This component is a React wrapper around the `md-divider` custom element.
 *
 * @component
 */
export const MdDivider = createComponent({
    react: React,
    tagName: 'md-divider',
    elementClass: _MdDivider,
    events: {},
})
"""


def _variant(class_name: str, tag_name: str, folder: str, stem: str, **kwargs) -> Variant:  # type: ignore[no-untyped-def]
    return Variant(
        file_name=stem,
        class_name=class_name,
        tag_name=tag_name,
        import_path=f"@material/web/{folder}/{stem}.js",
        **kwargs,
    )


def test_render_matches_expected_module(fixed_clock) -> None:
    component = Component(
        name="divider",
        variants=[_variant("MdDivider", "md-divider", "divider", "divider")],
    )

    text = WrapperGenerator(clock=fixed_clock).render(component)

    assert text == EXPECTED_DIVIDER


def test_render_empty_component_returns_empty_string(fixed_clock) -> None:
    assert WrapperGenerator(clock=fixed_clock).render(Component(name="empty", variants=[])) == ""


def test_render_sections_appear_in_fixed_order(fixed_clock) -> None:
    component = Component(
        name="button",
        variants=[
            _variant("MdFilledButton", "md-filled-button", "button", "filled-button"),
            _variant("MdTextButton", "md-text-button", "button", "text-button"),
        ],
    )

    text = WrapperGenerator(clock=fixed_clock).render(component)

    markers = [
        "DO NOT EDIT MANUALLY",
        "import { MdFilledButton as _MdFilledButton } from '@material/web/button/filled-button.js'",
        "import { MdTextButton as _MdTextButton } from '@material/web/button/text-button.js'",
        "export type MdFilledButtonProps",
        "export type MdTextButtonProps",
        "export interface MdFilledButtonElement extends _MdFilledButton {}",
        "export interface MdTextButtonElement extends _MdTextButton {}",
        "export const MdFilledButton = createComponent({",
        "export const MdTextButton = createComponent({",
    ]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_render_uses_extracted_documentation_and_param_lines(fixed_clock) -> None:
    variant = _variant(
        "MdFilledButton",
        "md-filled-button",
        "button",
        "filled-button",
        documentation="Buttons help people take action.\nSecond line.",
        property_docs={"disabled": "Whether the button is disabled.", "href": "Link target."},
    )

    text = WrapperGenerator(clock=fixed_clock).render(Component(name="button", variants=[variant]))

    assert (
        "/**\n"
        " * Buttons help people take action.\n"
        " * Second line.\n"
        " *\n"
        " * @component\n"
        " * @param {any} disabled - Whether the button is disabled.\n"
        " * @param {any} href - Link target.\n"
        " */\n"
        "export const MdFilledButton = createComponent({"
    ) in text
    assert "Material Design Filled Button component." not in text


def test_render_includes_events_object(fixed_clock) -> None:
    variant = _variant(
        "MdCheckbox",
        "md-checkbox",
        "checkbox",
        "checkbox",
        events={"onInput": "input", "onChange": "change"},
    )

    text = WrapperGenerator(clock=fixed_clock).render(Component(name="checkbox", variants=[variant]))

    assert (
        "    events: {\n"
        "        onInput: 'input',\n"
        "        onChange: 'change',\n"
        "    },\n"
        "})\n"
    ) in text


def test_render_is_deterministic_for_a_fixed_clock(fixed_clock) -> None:
    component = Component(
        name="divider",
        variants=[_variant("MdDivider", "md-divider", "divider", "divider")],
    )
    generator = WrapperGenerator(clock=fixed_clock)

    assert generator.render(component) == generator.render(component)


def test_render_explicit_moment_overrides_clock(fixed_clock) -> None:
    component = Component(
        name="divider",
        variants=[_variant("MdDivider", "md-divider", "divider", "divider")],
    )
    moment = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)

    text = WrapperGenerator(clock=fixed_clock).render(component, moment=moment)

    assert "auto-generated on 2025-01-02T03:04:05.000Z" in text


def test_humanize_class_name() -> None:
    assert humanize_class_name("MdFilledTonalButton") == "Filled Tonal Button"
    assert humanize_class_name("MdFab") == "Fab"


def test_render_events_empty_object() -> None:
    assert render_events({}) == "{}"


def test_format_timestamp_naive_values_are_treated_as_utc() -> None:
    assert format_timestamp(datetime(2024, 1, 1, 0, 0, 0, 999999)) == "2024-01-01T00:00:00.999Z"


def test_override_directory_replaces_only_the_templates_it_holds(tmp_path, fixed_clock) -> None:
    overrides = tmp_path / "overrides"
    overrides.mkdir()
    (overrides / "header.j2").write_text("// {{ overview }} ({{ timestamp }})\n", encoding="utf-8")
    component = Component(
        name="divider",
        variants=[_variant("MdDivider", "md-divider", "divider", "divider")],
    )

    text = WrapperGenerator(overrides, clock=fixed_clock).render(component)

    assert text.startswith(
        "// React wrappers for Material Web divider components (2024-05-17T09:30:12.345Z)\n"
    )
    assert "@fileoverview" not in text
    assert "export const MdDivider = createComponent({" in text
