#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Style Renderer - Flask Web Application
"""

import logging
from io import BytesIO
from typing import Tuple

import segno
from flask import Flask, jsonify, request, send_file

from qrstyle.finder_patterns import count_finder_modules
from qrstyle.frames import DEFAULT_FRAME_SETTINGS, FrameSettings, generate_frame_svg
from qrstyle.renderer import RenderOptions, render_qr_code, render_qr_code_elements, render_shape_preview
from qrstyle.shapes import DEFAULT_SHAPE_SETTINGS, ShapeSettings
from qrstyle.templates import find_template, get_templates_by_category

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_SIZE = 256
MIN_SIZE = 32
MAX_SIZE = 4096
DEFAULT_MARGIN = 8

PREVIEW_DEFAULT = 40
PREVIEW_MIN = 16
PREVIEW_MAX = 256


def _read_params(req) -> Tuple[str, RenderOptions]:
    """
    Extract render options from a Flask request.

    Returns (text, options). Raises ValueError for non-numeric size or margin.
    Out-of-range size or margin falls back to the default.
    """
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or "M").strip().upper()

    size = int(req.values.get('size') or DEFAULT_SIZE)
    if size < MIN_SIZE or size > MAX_SIZE:
        size = DEFAULT_SIZE
    margin = int(req.values.get('margin') or DEFAULT_MARGIN)
    if margin < 0 or margin > size // 4:
        margin = DEFAULT_MARGIN

    # A template supplies colors and shapes unless overridden explicitly
    template = find_template(req.values.get('template') or "")
    if template is None:
        foreground, background, base = "#000000", "#FFFFFF", DEFAULT_SHAPE_SETTINGS
    else:
        foreground, background, base = template.foreground, template.background, template.shape_settings

    shapes = ShapeSettings(
        dot_style=req.values.get('dot') or base.dot_style,
        corner_style=req.values.get('corner') or base.corner_style,
        corner_dot_style=req.values.get('corner_dot') or base.corner_dot_style,
    )
    options = RenderOptions(
        text=text,
        size=size,
        margin=margin,
        error_correction_level=ecc,
        foreground_color=req.values.get('fg') or foreground,
        background_color=req.values.get('bg') or background,
        shape_settings=shapes,
    )
    return text, options


def _read_frame(req) -> FrameSettings:
    """Frame settings from the request, falling back to the template's frame."""
    template = find_template(req.values.get('template') or "")
    base = template.frame_settings if template is not None else DEFAULT_FRAME_SETTINGS
    return FrameSettings(
        type=req.values.get('frame') or base.type,
        text=req.values.get('frame_text', base.text),
        text_color=req.values.get('frame_text_color') or base.text_color,
        frame_color=req.values.get('frame_color') or base.frame_color,
    )


app = Flask(__name__)


@app.route('/render/svg', methods=['GET'])
def export_svg():
    try:
        text, options = _read_params(request)
    except ValueError as ex:
        return f"Invalid parameters: {ex}", 400
    if not text:
        return "Missing text", 400

    try:
        result = render_qr_code(options)
    except (ValueError, segno.DataOverflowError) as ex:
        logger.error(f"QR generation failed: {ex}")
        return f"Could not generate the QR code with the chosen parameters: {ex}", 400

    frame = _read_frame(request)
    svg = generate_frame_svg(frame, options.size, result['svg'])
    logger.info(f"Rendered {result['module_count']}x{result['module_count']} QR code, "
                f"styles={options.shape_settings.to_dict()}, frame={frame.type}")
    buf = BytesIO(svg.encode('utf-8'))
    as_attachment = request.values.get('download') == 'true'
    return send_file(buf, as_attachment=as_attachment, download_name='qr_code.svg',
                     mimetype='image/svg+xml')


@app.route('/render/elements', methods=['GET'])
def export_elements():
    try:
        text, options = _read_params(request)
    except ValueError as ex:
        return f"Invalid parameters: {ex}", 400
    if not text:
        return "Missing text", 400

    try:
        elements = render_qr_code_elements(options)
    except (ValueError, segno.DataOverflowError) as ex:
        logger.error(f"QR generation failed: {ex}")
        return f"Could not generate the QR code with the chosen parameters: {ex}", 400
    elements['finder_modules'] = count_finder_modules(elements['module_count'])
    return jsonify(elements)


@app.route('/preview/<family>/<value>', methods=['GET'])
def preview(family, value):
    try:
        size = int(request.values.get('size') or PREVIEW_DEFAULT)
    except ValueError:
        size = PREVIEW_DEFAULT
    if size < PREVIEW_MIN or size > PREVIEW_MAX:
        size = PREVIEW_DEFAULT
    try:
        svg = render_shape_preview(family, value, size)
    except ValueError as ex:
        return str(ex), 404
    return app.response_class(svg, mimetype='image/svg+xml')


@app.route('/templates', methods=['GET'])
def templates():
    category = request.values.get('category')
    return jsonify([t.to_dict() for t in get_templates_by_category(category)])


if __name__ == "__main__":
    app.run(debug=True)
