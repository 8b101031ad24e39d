#!/usr/bin/env python3
"""
Generate WCAG-compliant color palettes for light and dark backgrounds.
"""

import argparse
import logging
import sys

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from wcag_palette import (
    ExportFormat, PaletteError, Settings, accessibility_report,
    available_harmony_types, export_palettes, generate,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate WCAG-compliant color palettes from a base color.'
    )
    parser.add_argument(
        '--base-color', '-c',
        default='#5500AA',
        help='Base color as #RRGGBB (default: %(default)s)'
    )
    parser.add_argument(
        '--size', '-n',
        default=5,
        help='Palette size, 3 or 5 (other values fall back to 5)'
    )
    parser.add_argument(
        '--level',
        choices=['AA', 'AAA'],
        default='AA',
        help='WCAG level the optimized palettes target'
    )
    parser.add_argument(
        '--harmony',
        choices=available_harmony_types(),
        default='triadic',
        help='Color harmony used for the base palette'
    )
    parser.add_argument(
        '--no-differentiation',
        action='store_true',
        help='Skip the differentiation pass on optimized palettes'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on an invalid base color or size instead of substituting defaults'
    )
    parser.add_argument(
        '--plot', '-o',
        help='Save a swatch figure to this path'
    )
    parser.add_argument(
        '--show',
        action='store_true',
        help='Open the swatch figure in a window'
    )
    parser.add_argument(
        '--export',
        choices=[fmt.value for fmt in ExportFormat],
        help='Also write the palettes as CSS custom properties or JSON design tokens'
    )
    parser.add_argument(
        '--export-path',
        help='Export file path (default: color-palette.<format>)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log search and differentiation steps'
    )
    return parser.parse_args(argv)


def print_statistics(palettes, report):
    """Print the palettes with contrast and distance statistics."""
    settings = palettes.settings
    print("\n" + "=" * 70)
    print("COLOR PALETTE STATISTICS")
    print("=" * 70)
    print(f"Base color: {settings.base_color} | Harmony: {settings.harmony_type.value} "
          f"| WCAG: {settings.wcag_level.value} | Size: {settings.palette_size}")
    for warning in palettes.warnings:
        print(f"  Warning: {warning}")

    rows = zip(palettes.base, palettes.light_optimized, report.light,
               palettes.dark_optimized, report.dark)
    for i, (base, light, light_info, dark, dark_info) in enumerate(rows, 1):
        h, s, l = base.hsl
        print(f"\nColor {i}: {base.hex} | HSL({h:5.1f}, {s:5.1f}%, {l:5.1f}%)")
        print(f"  Light: {light.hex} | CR {light_info.ratio:5.2f}:1 [{light_info.level}]")
        print(f"  Dark:  {dark.hex} | CR {dark_info.ratio:5.2f}:1 [{dark_info.level}]")

    print("\n" + "-" * 70)
    print("SUMMARY STATISTICS:")
    print("-" * 70)
    print(f"Light background compliant: {'yes' if report.light_compliant else 'no'}")
    print(f"Dark background compliant:  {'yes' if report.dark_compliant else 'no'}")
    print(f"Min pairwise ΔE2000 (light): {report.light_min_distance:.2f}")
    print(f"Min pairwise ΔE2000 (dark):  {report.dark_min_distance:.2f}")
    print("=" * 70)


def visualize_palettes(palettes, report):
    """Draw base, light-optimized and dark-optimized swatches, one row each."""
    rows = [
        ("Base palette", palettes.base, None, None),
        ("Optimized for light background", palettes.light_optimized, palettes.light_background, report.light),
        ("Optimized for dark background", palettes.dark_optimized, palettes.dark_background, report.dark),
    ]
    n_colors = len(palettes.base)
    fig, axes = plt.subplots(len(rows), 1, figsize=(2.2 * n_colors, 7))

    for ax, (title, palette, background, infos) in zip(axes, rows):
        ax.set_xlim(0, n_colors)
        ax.set_ylim(0, 1)
        ax.set_xticks([])
        ax.set_yticks([])
        if background is not None:
            ax.set_facecolor(background.hex)
        ax.set_title(title, fontsize=11, fontweight='bold')

        for i, color in enumerate(palette):
            ax.add_patch(Rectangle((i + 0.1, 0.35), 0.8, 0.6,
                                   facecolor=color.hex, edgecolor='black', linewidth=1))
            # Optimized rows label in the swatch color, as text on that background
            label_color = 'black' if background is None else color.hex
            ax.text(i + 0.5, 0.22, color.hex, ha='center', va='center',
                    fontsize=10, fontweight='bold', color=label_color, family='monospace')
            if infos is not None:
                info = infos[i]
                ax.text(i + 0.5, 0.08, f"CR {info.ratio:.2f} {info.level}", ha='center',
                        va='center', fontsize=8, color=label_color)

    plt.tight_layout()
    return fig


def main(argv=None):
    """Main function."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    settings = Settings.from_dict({
        'palette_size': args.size,
        'wcag_level': args.level,
        'harmony_type': args.harmony,
        'base_color': args.base_color,
        'differentiation': {'enabled': not args.no_differentiation},
    })

    try:
        palettes = generate(settings, strict=args.strict)
    except PaletteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    report = accessibility_report(palettes)
    print_statistics(palettes, report)

    if args.plot or args.show:
        fig = visualize_palettes(palettes, report)
        if args.plot:
            fig.savefig(args.plot, dpi=150, bbox_inches='tight')
            print(f"\nVisualization saved to: {args.plot}")
        if args.show:
            plt.show()
        plt.close(fig)

    if args.export:
        export_fmt = ExportFormat.from_value(args.export)
        path = args.export_path or export_fmt.filename
        with open(path, 'w', encoding='utf-8') as f:
            f.write(export_palettes(palettes, export_fmt))
        print(f"\nPalette exported to: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
