from collections import namedtuple

from .color import hex_to_rgb, linearize
from .config import WCAG_AA, WCAG_AA_LARGE, WCAG_AAA

AAA = "aaa"
AA = "aa"
AA_LARGE = "aa18"
FAIL = "fail"

Background = namedtuple("Background", ["label", "hex"])
ContrastResult = namedtuple("ContrastResult", ["bg", "hex", "ratio", "level"])

# Approximate sRGB equivalents of the editor's light/gray/dark surfaces
THEME_BACKGROUNDS = (
    Background("light", "#f5f5f5"),
    Background("gray", "#777777"),
    Background("dark", "#1a1a1a"),
)

_LEVEL_MARKS = {AAA: "✓ AAA", AA: "✓ AA", AA_LARGE: "~ AA large", FAIL: "✗ FAIL"}


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.1"""
    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def contrast_ratio(hex1, hex2):
    """Contrast ratio between two colors, symmetric and always >= 1."""
    l1 = relative_luminance(hex1)
    l2 = relative_luminance(hex2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio):
    """Compliance tier for a contrast ratio; thresholds are inclusive."""
    if ratio >= WCAG_AAA:
        return AAA
    if ratio >= WCAG_AA:
        return AA
    if ratio >= WCAG_AA_LARGE:
        return AA_LARGE
    return FAIL


def _join_list(items):
    if len(items) <= 1:
        return items[0] if items else ""
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])} and {items[-1]}"


def _bg_and_level(result):
    if isinstance(result, dict):
        return result["bg"], result["level"]
    return result.bg, result.level


def describe_contrast(results):
    """Summarize per-background levels as one readable sentence.

    Args:
        results: Iterable of ContrastResult, or dicts with ``bg`` and ``level``

    Returns:
        str: e.g. "excellent on dark · large text only on gray and light"
    """
    excellent, readable, large_only, insufficient = [], [], [], []
    results = [_bg_and_level(r) for r in results]

    for bg, level in results:
        if level == AAA:
            excellent.append(bg)
        elif level == AA:
            readable.append(bg)
        elif level == AA_LARGE:
            large_only.append(bg)
        else:
            insufficient.append(bg)

    if len(excellent) == len(results):
        return "excellent readability on all backgrounds"
    if len(insufficient) == len(results):
        return "insufficient contrast on all backgrounds — consider adjusting"

    parts = []
    if excellent:
        parts.append(f"excellent on {_join_list(excellent)}")
    if readable:
        parts.append(f"readable on {_join_list(readable)}")
    if large_only:
        parts.append(f"large text only on {_join_list(large_only)}")
    if insufficient:
        parts.append(f"not suitable on {_join_list(insufficient)}")
    return " · ".join(parts)


def check_contrast(hex_color, backgrounds=THEME_BACKGROUNDS):
    """Contrast of one color against each background."""
    results = []
    for bg in backgrounds:
        ratio = contrast_ratio(hex_color, bg.hex)
        results.append(ContrastResult(bg.label, bg.hex, ratio, wcag_level(ratio)))
    return results


def contrast_matrix(colors):
    """Pairwise (ratio, level) grid; the diagonal is 1:1."""
    matrix = []
    for a in colors:
        row = []
        for b in colors:
            ratio = contrast_ratio(a, b)
            row.append((ratio, wcag_level(ratio)))
        matrix.append(row)
    return matrix


def readability_report(colors, backgrounds=THEME_BACKGROUNDS):
    """Generate a readability report for inspection

    Returns:
        tuple: (report text, list of (color, background label, ratio) failures)
    """
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(
        "Backgrounds: " + ", ".join(f"{bg.label} {bg.hex}" for bg in backgrounds)
    )

    issues = []
    for color in colors:
        results = check_contrast(color, backgrounds)
        report.append(f"\n{color}")
        report.append("-" * 50)
        for r in results:
            report.append(f"  vs {r.bg:8} {r.hex}  {r.ratio:5.2f}:1  {_LEVEL_MARKS[r.level]}")
            if r.level == FAIL:
                issues.append((color, r.bg, r.ratio))
        report.append(f"  {describe_contrast(results)}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for color, bg, ratio in issues:
            report.append(f"  - {color} on {bg}: {ratio:.1f}:1, needs {WCAG_AA_LARGE}:1")
    else:
        report.append("ALL COLORS READABLE ON EVERY BACKGROUND ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
