# -*- coding: utf-8 -*-
"""
QR Style Renderer - Core Module

This module turns QR code module matrices into styled SVG images with
selectable dot, corner and corner dot shapes.

Modules:
    qr_generator: Text to module matrix, backed by segno
    finder_patterns: Finder pattern location
    shapes: SVG path generators for every style
    frames: Decorative frames and call-to-action banners
    renderer: SVG document assembly and style previews
    templates: Built-in color, shape and frame presets
"""

__version__ = "1.0.0"

from .finder_patterns import FinderPattern, get_finder_patterns, is_finder_pattern
from .frames import CTA_PRESETS, FRAME_TYPES, FrameSettings, generate_frame_svg, get_frame_dimensions
from .qr_generator import build_matrix, make_qr
from .renderer import (
    RenderOptions,
    render_matrix_svg,
    render_qr_code,
    render_qr_code_elements,
    render_shape_preview,
)
from .shapes import (
    CORNER_DOT_STYLES,
    CORNER_STYLES,
    DEFAULT_SHAPE_SETTINGS,
    DOT_STYLES,
    ShapeSettings,
    get_corner_dot_path,
    get_corner_path,
    get_dot_path,
)
from .templates import SYSTEM_TEMPLATES, find_template

__all__ = [
    'FinderPattern',
    'get_finder_patterns',
    'is_finder_pattern',
    'CTA_PRESETS',
    'FRAME_TYPES',
    'FrameSettings',
    'generate_frame_svg',
    'get_frame_dimensions',
    'build_matrix',
    'make_qr',
    'RenderOptions',
    'render_matrix_svg',
    'render_qr_code',
    'render_qr_code_elements',
    'render_shape_preview',
    'CORNER_DOT_STYLES',
    'CORNER_STYLES',
    'DEFAULT_SHAPE_SETTINGS',
    'DOT_STYLES',
    'ShapeSettings',
    'get_corner_dot_path',
    'get_corner_path',
    'get_dot_path',
    'SYSTEM_TEMPLATES',
    'find_template',
]
