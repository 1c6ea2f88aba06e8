# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

This module turns a QR module matrix into a styled SVG document. Data
modules are drawn with the selected dot style, and the three finder
patterns are drawn as whole shapes using the corner and corner dot styles
instead of module by module.

All functions are pure: the same inputs always produce the same string.

Functions:
    render_matrix_svg: Render an existing module matrix as an SVG document
    render_qr_code: Encode text and render it as an SVG document
    render_qr_code_elements: Encode text and return separate SVG layers
    render_shape_preview: Small SVG thumbnail of a single style
"""

import logging
from dataclasses import dataclass
from html import escape
from types import MappingProxyType
from typing import Any, Dict, List, Sequence, Tuple

from .finder_patterns import (
    CENTER_SIZE,
    FINDER_SIZE,
    SEPARATOR_SIZE,
    get_finder_patterns,
    is_finder_pattern,
)
from .qr_generator import build_matrix
from .shapes import (
    CORNER,
    CORNER_DOT,
    DEFAULT_SHAPE_SETTINGS,
    DEFAULT_STYLE,
    DOT,
    ShapeSettings,
    fmt_number,
    get_corner_dot_path,
    get_corner_path,
    get_dot_path,
    resolve_style,
)

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'

PREVIEW_SIZE = 40
PREVIEW_PADDING = 2
PREVIEW_BACKDROP = 'white'
PREVIEW_FILL = '#2A0B4D'

_PREVIEW_FAMILIES = MappingProxyType({
    DOT: get_dot_path,
    CORNER: get_corner_path,
    CORNER_DOT: get_corner_dot_path,
    'corner_dot': get_corner_dot_path,
})


@dataclass(frozen=True)
class RenderOptions:
    """Everything needed to render one QR code."""

    text: str
    size: float = 256
    margin: float = 8
    error_correction_level: str = 'M'
    foreground_color: str = '#000000'
    background_color: str = '#FFFFFF'
    shape_settings: ShapeSettings = DEFAULT_SHAPE_SETTINGS


def _build_paths(
    matrix: Sequence[Sequence[Any]],
    size: float,
    margin: float,
    shape_settings: ShapeSettings,
) -> Tuple[List[str], List[str]]:
    """
    Build the path fragments for data modules and finder patterns.

    Args:
        matrix: Square module matrix (truthy = dark)
        size (float): Output side length in pixels
        margin (float): Quiet zone in pixels on every side
        shape_settings (ShapeSettings): Style choices

    Returns:
        Tuple[List[str], List[str]]: (data_paths, finder_paths)
    """
    module_count = len(matrix)
    module_size = (size - margin * 2) / module_count
    if module_size <= 0:
        logger.warning(
            "Degenerate geometry: size=%s margin=%s gives module size %s",
            size, margin, module_size,
        )
    logger.debug("Rendering %dx%d modules at %s px", module_count, module_count, module_size)

    for family, style in ((DOT, shape_settings.dot_style),
                          (CORNER, shape_settings.corner_style),
                          (CORNER_DOT, shape_settings.corner_dot_style)):
        if resolve_style(family, style) != style:
            logger.warning("Unknown %s style %r, drawing %r", family, style, DEFAULT_STYLE)

    data_paths = []
    for row in range(module_count):
        cells = matrix[row]
        for col in range(module_count):
            if not cells[col]:
                continue
            # Finder patterns are drawn as whole shapes below
            if is_finder_pattern(row, col, module_count):
                continue
            x = margin + col * module_size
            y = margin + row * module_size
            data_paths.append(get_dot_path(x, y, module_size, shape_settings.dot_style))

    finder_paths = []
    for finder in get_finder_patterns(module_count):
        base_x = margin + finder.x * module_size
        base_y = margin + finder.y * module_size

        # Outer ring with the separator as a second subpath, cut out by evenodd
        outer = get_corner_path(base_x, base_y, FINDER_SIZE * module_size,
                                shape_settings.corner_style)
        separator = get_corner_path(base_x + module_size, base_y + module_size,
                                    SEPARATOR_SIZE * module_size, shape_settings.corner_style)
        finder_paths.append(f'{outer} {separator}')

        finder_paths.append(get_corner_dot_path(
            base_x + 2 * module_size,
            base_y + 2 * module_size,
            CENTER_SIZE * module_size,
            shape_settings.corner_dot_style,
        ))

    return data_paths, finder_paths


def _background_rect(size: float, color: str, radius: float = 0) -> str:
    s = fmt_number(size)
    rx = f' rx="{fmt_number(radius)}"' if radius else ''
    return f'<rect x="0" y="0" width="{s}" height="{s}" fill="{escape(color)}"{rx}/>'


def _view_box(size: float) -> str:
    s = fmt_number(size)
    return f'0 0 {s} {s}'


def _svg_document(size: float, body: List[str], indent: str = '  ') -> str:
    s = fmt_number(size)
    lines = [f'<svg xmlns="{SVG_NS}" viewBox="{_view_box(size)}" width="{s}" height="{s}">']
    lines.extend(indent + element for element in body)
    lines.append('</svg>')
    return '\n'.join(lines)


def render_matrix_svg(
    matrix: Sequence[Sequence[Any]],
    size: float,
    margin: float = 0,
    foreground_color: str = '#000000',
    background_color: str = '#FFFFFF',
    shape_settings: ShapeSettings = DEFAULT_SHAPE_SETTINGS,
) -> str:
    """
    Render a module matrix as a standalone styled SVG document.

    The document holds a background rectangle and a single path filled
    with the foreground color under the evenodd rule, so the finder
    separators show the background through.

    Args:
        matrix: Square module matrix (truthy = dark), odd size >= 21
        size (float): Width, height and viewBox size in pixels
        margin (float): Quiet zone in pixels on every side
        foreground_color (str): Fill for dark modules, used as given
        background_color (str): Fill for the background, used as given
        shape_settings (ShapeSettings): Dot, corner and corner dot styles

    Returns:
        str: SVG markup
    """
    data_paths, finder_paths = _build_paths(matrix, size, margin, shape_settings)
    combined = ' '.join(data_paths + finder_paths)
    return _svg_document(size, [
        _background_rect(size, background_color),
        f'<path d="{combined}" fill="{escape(foreground_color)}" fill-rule="evenodd"/>',
    ])


def render_qr_code(options: RenderOptions) -> Dict[str, Any]:
    """
    Encode options.text and render it as a styled SVG document.

    Returns:
        Dict[str, Any]: {'svg': str, 'module_count': int}

    Raises:
        ValueError: If the text is empty or the error correction level is invalid
        segno.DataOverflowError: If the text doesn't fit in a QR code

    Example:
        >>> result = render_qr_code(RenderOptions(text="HELLO", size=180, margin=1))
        >>> result['module_count']
        21
    """
    matrix = build_matrix(options.text, ecc=options.error_correction_level)
    svg = render_matrix_svg(
        matrix,
        options.size,
        options.margin,
        options.foreground_color,
        options.background_color,
        options.shape_settings,
    )
    return {'svg': svg, 'module_count': len(matrix)}


def render_qr_code_elements(options: RenderOptions) -> Dict[str, Any]:
    """
    Encode options.text and return the SVG layers separately.

    Callers compose the layers themselves, e.g. to animate the data dots
    independently from the finder patterns.

    Returns:
        Dict[str, Any]: {
            'background': <rect> element,
            'data_dots': <path> element for data modules,
            'finder_patterns': <path> element (evenodd) for the finders,
            'module_count': int,
            'view_box': viewBox attribute value,
        }
    """
    matrix = build_matrix(options.text, ecc=options.error_correction_level)
    data_paths, finder_paths = _build_paths(
        matrix, options.size, options.margin, options.shape_settings
    )
    fill = escape(options.foreground_color)
    return {
        'background': _background_rect(options.size, options.background_color),
        'data_dots': f'<path d="{" ".join(data_paths)}" fill="{fill}"/>',
        'finder_patterns': f'<path d="{" ".join(finder_paths)}" fill="{fill}" fill-rule="evenodd"/>',
        'module_count': len(matrix),
        'view_box': _view_box(options.size),
    }


def render_shape_preview(family: str, value: str, size: float = PREVIEW_SIZE) -> str:
    """
    Render one style of one family as a small thumbnail.

    Args:
        family (str): 'dot', 'corner' or 'cornerDot'
        value (str): Style name; unknown names draw a square
        size (float): Thumbnail side length in pixels

    Returns:
        str: SVG markup

    Raises:
        ValueError: If family is unknown
    """
    generator = _PREVIEW_FAMILIES.get(family)
    if generator is None:
        raise ValueError(f"Unknown style family: {family!r}")

    inner = size - PREVIEW_PADDING * 2
    path = generator(PREVIEW_PADDING, PREVIEW_PADDING, inner, value)
    return _svg_document(size, [
        _background_rect(size, PREVIEW_BACKDROP, radius=4),
        f'<path d="{path}" fill="{PREVIEW_FILL}"/>',
    ], indent='    ')
