#!/usr/bin/env python3
"""
Streamlit web app for interactive WCAG-compliant color palette generation.
"""

import streamlit as st
import numpy as np

from wcag_palette import (
    ExportFormat, Settings, accessibility_report, available_harmony_types,
    describe_harmony, distance_matrix, export_palettes, generate, is_valid_hex,
)

st.set_page_config(page_title="WCAG Color Palette Generator", layout="wide")

st.title("🎨 WCAG Color Palette Generator")

col1, col2 = st.columns([1, 2])

with col1:
    st.subheader("Configuration")

    base_color_hex = st.color_picker(
        "Base color:",
        value="#5500AA",
        help="First swatch of the palette; the harmony is built around its hue"
    )
    base_color_text = st.text_input(
        "Or type a hex code:",
        value="",
        help="Overrides the picker when set, e.g. #1A73E8"
    )
    if base_color_text.strip():
        if not is_valid_hex(base_color_text.strip()):
            st.error("Invalid hex code format. Use #RRGGBB or RRGGBB")
        base_color_hex = base_color_text.strip()

    harmony_type = st.selectbox(
        "Harmony:",
        options=available_harmony_types(),
        index=available_harmony_types().index("triadic"),
    )
    st.caption(describe_harmony(harmony_type))

    size_col, level_col = st.columns(2)
    with size_col:
        palette_size = st.radio("Palette size:", options=[3, 5], index=1, horizontal=True)
    with level_col:
        wcag_level = st.radio("WCAG level:", options=["AA", "AAA"], index=0, horizontal=True)

    differentiate_colors = st.checkbox(
        "Differentiate similar colors",
        value=True,
        help="Spread lightness, saturation and (as a last resort) hue of optimized colors"
    )
    with st.expander("Differentiation thresholds"):
        min_hue_difference = st.slider("Minimum hue difference (°)", 5, 30, 15,
                                       disabled=not differentiate_colors)
        min_luminance_difference = st.slider("Minimum lightness difference (%)", 5, 25, 10,
                                             disabled=not differentiate_colors)

settings = Settings.from_dict({
    "paletteSize": palette_size,
    "wcagLevel": wcag_level,
    "harmonyType": harmony_type,
    "baseColor": base_color_hex,
    "differentiationSettings": {
        "enabled": differentiate_colors,
        "minHueDifference": min_hue_difference,
        "minLuminanceDifference": min_luminance_difference,
    },
})
palettes = generate(settings)
report = accessibility_report(palettes)
for warning in palettes.warnings:
    st.warning(warning)


def render_swatch(color, background=None, info=None):
    """Render one swatch card as HTML."""
    text_color = 'white' if color.luminance() < 0.5 else '#333333'
    r, g, b = (int(round(c)) for c in color.rgb)
    badge = ""
    preview = ""
    if info is not None:
        badge_bg = {'AAA': '#1e7e34', 'AA': '#2c7be5', 'FAIL': '#c0392b'}[info.level]
        badge = (f'<div style="display: inline-block; background: {badge_bg}; color: white; '
                 f'border-radius: 4px; padding: 2px 6px; font-size: 10px; font-weight: bold;">'
                 f'{info.level}</div>')
        preview = f"""
            <div style="background-color: {background.hex}; color: {color.hex};
                        border: 1px solid #dee2e6; border-radius: 4px; padding: 6px; margin-top: 8px;
                        font-family: sans-serif;">
                <div style="font-size: 14px; font-weight: bold;">Heading</div>
                <div style="font-size: 12px;">Body text</div>
                <div style="font-size: 10px;">Small text · {info.ratio:.2f}:1</div>
            </div>
        """
    return f"""
    <div style="
        border: 2px solid #333;
        border-radius: 8px;
        overflow: hidden;
        font-family: monospace;
        box-shadow: 0 2px 8px rgba(0,0,0,0.2);
        margin-bottom: 8px;
    ">
        <div style="background-color: {color.hex}; color: {text_color}; padding: 12px;
                    min-height: 90px; text-align: center;">
            {badge}
            <div style="font-size: 12px; font-weight: bold; margin-top: 6px;">{color.hex}</div>
            <div style="font-size: 9px;">RGB({r}, {g}, {b})</div>
        </div>
        <div style="padding: 0 6px 6px 6px; background: white;">{preview}</div>
    </div>
    """


with col2:
    sections = [
        ("Base Palette", palettes.base, None, None),
        ("Optimized for Light Background", palettes.light_optimized, palettes.light_background, report.light),
        ("Optimized for Dark Background", palettes.dark_optimized, palettes.dark_background, report.dark),
    ]
    for title, palette, background, infos in sections:
        st.subheader(title)
        cols = st.columns(len(palette))
        for i, (col, color) in enumerate(zip(cols, palette)):
            with col:
                info = infos[i] if infos is not None else None
                st.markdown(render_swatch(color, background, info), unsafe_allow_html=True)

# Color statistics table
st.subheader("Color Details")
color_data = []
rows = zip(palettes.base, palettes.light_optimized, report.light,
           palettes.dark_optimized, report.dark)
for i, (base, light, light_info, dark, dark_info) in enumerate(rows, 1):
    h, s, l = base.hsl
    color_data.append({
        "Slot": i,
        "Base": base.hex,
        "HSL": f"{h:.0f}°, {s:.0f}%, {l:.0f}%",
        "Light": light.hex,
        f"Contrast ({palettes.light_background.hex})": f"{light_info.ratio:.2f}:1",
        "Light level": light_info.level,
        "Dark": dark.hex,
        f"Contrast ({palettes.dark_background.hex})": f"{dark_info.ratio:.2f}:1",
        "Dark level": dark_info.level,
    })
st.dataframe(color_data, width="stretch")

metric_cols = st.columns(4)
with metric_cols[0]:
    st.metric("Light compliant", "Yes" if report.light_compliant else "No")
with metric_cols[1]:
    st.metric("Dark compliant", "Yes" if report.dark_compliant else "No")
with metric_cols[2]:
    st.metric("Min ΔE2000 (light)", f"{report.light_min_distance:.2f}")
with metric_cols[3]:
    st.metric("Min ΔE2000 (dark)", f"{report.dark_min_distance:.2f}")

st.subheader("Export")
export_cols = st.columns(len(ExportFormat))
for col, export_fmt in zip(export_cols, ExportFormat):
    with col:
        st.download_button(
            f"Download {export_fmt.value.upper()}",
            data=export_palettes(palettes, export_fmt),
            file_name=export_fmt.filename,
            mime=export_fmt.mime_type,
        )


def render_distance_matrix(palette):
    """HTML heat-map table of pairwise CIEDE2000 distances."""
    matrix = distance_matrix(palette)
    max_distance = np.max(matrix)
    html_parts = ['''
<style>
.distance-matrix { border-collapse: collapse; margin: 20px auto; font-family: monospace; }
.distance-matrix td, .distance-matrix th {
    border: 1px solid #ddd; text-align: center; min-width: 60px; height: 60px; padding: 5px;
}
.distance-matrix .color-cell { width: 50px; height: 50px; border: 2px solid #333; margin: 0 auto; }
.distance-matrix .value-cell { font-size: 11px; font-weight: 600; }
.distance-matrix .diagonal { background-color: #f0f0f0; color: #999; }
</style>
<table class="distance-matrix">
<thead><tr><th></th>
''']
    for color in palette:
        html_parts.append(f'<th><div class="color-cell" style="background-color: {color.hex};"></div></th>')
    html_parts.append('</tr></thead>\n<tbody>\n')
    for i, color_i in enumerate(palette):
        html_parts.append(f'<tr><th><div class="color-cell" style="background-color: {color_i.hex};"></div></th>')
        for j in range(len(palette)):
            if i == j:
                html_parts.append('<td class="value-cell diagonal">&mdash;</td>')
                continue
            distance = matrix[i, j]
            intensity = distance / max_distance if max_distance > 0 else 0
            g = int(255 * (1 - intensity * 0.7))
            b = int(100 * (1 - intensity))
            html_parts.append(f'<td class="value-cell" style="background-color: rgb(255, {g}, {b});">'
                              f'{distance:.1f}</td>')
        html_parts.append('</tr>\n')
    html_parts.append('</tbody>\n</table>')
    return ''.join(html_parts)


st.subheader("CIEDE2000 Distance Matrix")
light_tab, dark_tab = st.tabs(["Light background", "Dark background"])
with light_tab:
    st.markdown(render_distance_matrix(palettes.light_optimized), unsafe_allow_html=True)
with dark_tab:
    st.markdown(render_distance_matrix(palettes.dark_optimized), unsafe_allow_html=True)
