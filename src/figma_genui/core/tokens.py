"""Design token payloads.

The token set is fixed and does not reflect the file's actual styles yet; reading
styles and variables from the file is still to be implemented.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from figma_genui.models import DesignTokens, TypographyToken

TOKEN_FORMATS = ("json", "css", "scss", "swift")
DEFAULT_TOKEN_FORMAT = "json"


@dataclass(frozen=True)
class RenderedTokens:
    format: str
    language: str
    text: str


def extract_design_tokens() -> DesignTokens:
    return DesignTokens(
        colors={
            "primary": "#0066FF",
            "secondary": "#FF6600",
            "background": "#FFFFFF",
            "text": "#333333",
        },
        typography={
            "heading": TypographyToken(font_family="Inter, sans-serif", font_size="24px", font_weight="600"),
            "body": TypographyToken(font_family="Inter, sans-serif", font_size="16px", font_weight="400"),
        },
        spacing={"small": "8px", "medium": "16px", "large": "24px"},
    )


def _px(value: str) -> str:
    return value.removesuffix("px")


def _css(tokens: DesignTokens) -> str:
    heading, body = tokens.typography["heading"], tokens.typography["body"]
    lines = [":root {", "  /* Colors */"]
    lines += [f"  --color-{name}: {value};" for name, value in tokens.colors.items()]
    lines += [
        "",
        "  /* Typography */",
        f"  --font-family: {heading.font_family};",
        f"  --font-size-heading: {heading.font_size};",
        f"  --font-weight-heading: {heading.font_weight};",
        f"  --font-size-body: {body.font_size};",
        f"  --font-weight-body: {body.font_weight};",
        "",
        "  /* Spacing */",
    ]
    lines += [f"  --spacing-{name}: {value};" for name, value in tokens.spacing.items()]
    lines.append("}")
    return "\n".join(lines)


def _scss(tokens: DesignTokens) -> str:
    heading, body = tokens.typography["heading"], tokens.typography["body"]
    lines = ["// Colors"]
    lines += [f"$color-{name}: {value};" for name, value in tokens.colors.items()]
    lines += [
        "",
        "// Typography",
        f"$font-family: {heading.font_family};",
        f"$font-size-heading: {heading.font_size};",
        f"$font-weight-heading: {heading.font_weight};",
        f"$font-size-body: {body.font_size};",
        f"$font-weight-body: {body.font_weight};",
        "",
        "// Spacing",
    ]
    lines += [f"$spacing-{name}: {value};" for name, value in tokens.spacing.items()]
    return "\n".join(lines)


_SWIFT_WEIGHTS = {"400": ".regular", "500": ".medium", "600": ".semibold", "700": ".bold"}


def _swift(tokens: DesignTokens) -> str:
    lines = ["import SwiftUI", "", "struct DesignTokens {", "    // MARK: - Colors", "    struct Colors {"]
    lines += [f"        static let {name} = Color(hex: 0x{value.lstrip('#')})" for name, value in tokens.colors.items()]
    lines += ["    }", "", "    // MARK: - Typography", "    struct Typography {"]
    for i, (name, style) in enumerate(tokens.typography.items()):
        if i:
            lines.append("")
        lines += [
            f"        struct {name.capitalize()} {{",
            f'            static let fontFamily = "{style.font_family.split(",")[0].strip()}"',
            f"            static let fontSize: CGFloat = {_px(style.font_size)}",
            f"            static let fontWeight: Font.Weight = {_SWIFT_WEIGHTS.get(style.font_weight, '.regular')}",
            "        }",
        ]
    lines += ["    }", "", "    // MARK: - Spacing", "    struct Spacing {"]
    lines += [f"        static let {name}: CGFloat = {_px(value)}" for name, value in tokens.spacing.items()]
    lines += [
        "    }",
        "}",
        "",
        "// Helper extension for hex colors",
        "extension Color {",
        "    init(hex: UInt, alpha: Double = 1) {",
        "        self.init(",
        "            .sRGB,",
        "            red: Double((hex >> 16) & 0xff) / 255,",
        "            green: Double((hex >> 8) & 0xff) / 255,",
        "            blue: Double(hex & 0xff) / 255,",
        "            opacity: alpha",
        "        )",
        "    }",
        "}",
    ]
    return "\n".join(lines)


def render_tokens(tokens: DesignTokens, fmt: str = DEFAULT_TOKEN_FORMAT) -> RenderedTokens:
    """Render ``tokens`` as json, css, scss or swift. Unknown formats render as an empty block."""
    if fmt == "json":
        return RenderedTokens(fmt, "json", json.dumps(tokens.model_dump(by_alias=True), indent=2))
    if fmt == "css":
        return RenderedTokens(fmt, "css", _css(tokens))
    if fmt == "scss":
        return RenderedTokens(fmt, "scss", _scss(tokens))
    if fmt == "swift":
        return RenderedTokens(fmt, "swift", _swift(tokens))
    return RenderedTokens(fmt, "", "")
