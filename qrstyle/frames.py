# -*- coding: utf-8 -*-
"""
QR Code Frame Module

This module wraps a rendered QR SVG in a decorative frame, optionally with
a call-to-action banner ("Scan Me!", "View Menu", ...). Frames are pure SVG
composition: the QR document is nested unchanged inside a translated group.

Frame geometry is derived from the QR size:
    - padding: 8% of the QR size on every side
    - banner: 18% of the QR size, only for banner and full-border frames
      that carry text
    - rounded corners: 0.8 * padding on the outer edge, 0.6 of that inside

Functions:
    get_frame_dimensions: Canvas size and QR offset for a frame type
    generate_frame_svg: Compose the framed SVG document
"""

import logging
import math
from dataclasses import dataclass
from html import escape
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from .shapes import fmt_number

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'

NONE = 'none'
SIMPLE = 'simple'
ROUNDED = 'rounded'
BANNER_TOP = 'banner-top'
BANNER_BOTTOM = 'banner-bottom'
FULL_BORDER = 'full-border'

FRAME_TYPES = (
    (NONE, 'None', 'No frame'),
    (SIMPLE, 'Simple', 'Basic rectangular border'),
    (ROUNDED, 'Rounded', 'Rounded corner border'),
    (BANNER_TOP, 'Banner Top', 'Text banner above QR'),
    (BANNER_BOTTOM, 'Banner Bottom', 'Text banner below QR'),
    (FULL_BORDER, 'Full Border', 'Complete frame with text'),
)

CTA_PRESETS = (
    'Scan Me!',
    'View Menu',
    'Order Here',
    'Learn More',
    'Get Discount',
    'Follow Us',
    'Download App',
    'Book Now',
    'Contact Us',
    'Visit Website',
)

PADDING_RATIO = 0.08
BANNER_RATIO = 0.18
CORNER_RATIO = 0.8
INNER_CORNER_RATIO = 0.6
FONT_RATIO = 0.5

_BANNER_TYPES = (BANNER_TOP, BANNER_BOTTOM, FULL_BORDER)
_PADDED_TYPES = (SIMPLE, ROUNDED) + _BANNER_TYPES


@dataclass(frozen=True)
class FrameSettings:
    """Frame type, call-to-action text and its colors."""

    type: str = NONE
    text: str = ''
    text_color: str = '#FFFFFF'
    frame_color: str = '#2A0B4D'

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'FrameSettings':
        """Build settings from camelCase or snake_case keys; missing keys keep defaults."""
        data = data or {}
        default = cls()
        return cls(
            type=data.get('type') or default.type,
            text=data.get('text') or default.text,
            text_color=data.get('text_color', data.get('textColor')) or default.text_color,
            frame_color=data.get('frame_color', data.get('frameColor')) or default.frame_color,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'type': self.type,
            'text': self.text,
            'textColor': self.text_color,
            'frameColor': self.frame_color,
        }


DEFAULT_FRAME_SETTINGS = FrameSettings()


class FrameDimensions(NamedTuple):
    total_width: float
    total_height: float
    qr_x: float
    qr_y: float
    padding: float
    banner_height: float


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_frame_dimensions(qr_size: float, frame_type: str, has_text: bool) -> FrameDimensions:
    """
    Compute the framed canvas and where the QR code sits inside it.

    Unknown frame types get no frame.

    Example:
        >>> get_frame_dimensions(200, 'banner-top', True)
        FrameDimensions(total_width=232, total_height=268, qr_x=16, qr_y=52, padding=16, banner_height=36)
    """
    if frame_type not in _PADDED_TYPES:
        return FrameDimensions(qr_size, qr_size, 0, 0, 0, 0)

    padding = _round_half_up(qr_size * PADDING_RATIO)
    banner = _round_half_up(qr_size * BANNER_RATIO) if has_text and frame_type in _BANNER_TYPES else 0
    width = qr_size + padding * 2
    qr_y = padding + banner if frame_type == BANNER_TOP else padding
    return FrameDimensions(width, width + banner, padding, qr_y, padding, banner)


def _rect(x: float, y: float, width: float, height: float, fill: str, rx: float = 0) -> str:
    corner = f' rx="{fmt_number(rx)}"' if rx else ''
    return (f'<rect x="{fmt_number(x)}" y="{fmt_number(y)}" width="{fmt_number(width)}" '
            f'height="{fmt_number(height)}" fill="{escape(fill)}"{corner}/>')


def _text(x: float, y: float, font_size: int, settings: FrameSettings) -> str:
    return (f'<text x="{fmt_number(x)}" y="{fmt_number(y)}" font-family="Arial, sans-serif" '
            f'font-size="{font_size}" font-weight="bold" fill="{escape(settings.text_color)}" '
            f'text-anchor="middle" dominant-baseline="middle">{escape(settings.text.strip())}</text>')


def generate_frame_svg(settings: FrameSettings, qr_size: float, qr_svg: str) -> str:
    """
    Wrap a QR SVG document of side ``qr_size`` in the frame described by ``settings``.

    A 'none' frame returns ``qr_svg`` unchanged. An unknown frame type is
    drawn as no frame around a nested QR document.

    Args:
        settings (FrameSettings): Frame type, text and colors
        qr_size (float): Side length of the QR document in pixels
        qr_svg (str): Complete QR SVG markup

    Returns:
        str: SVG markup
    """
    if settings.type == NONE:
        return qr_svg
    if settings.type not in _PADDED_TYPES:
        logger.warning("Unknown frame type %r, drawing no frame", settings.type)

    has_text = bool(settings.text.strip())
    dims = get_frame_dimensions(qr_size, settings.type, has_text)
    width, height = dims.total_width, dims.total_height
    padding, banner = dims.padding, dims.banner_height
    corner = _round_half_up(padding * CORNER_RATIO) if settings.type == ROUNDED else 0
    font_size = _round_half_up(banner * FONT_RATIO)

    elements: List[str] = []
    if settings.type in (SIMPLE, ROUNDED):
        elements.append(_rect(0, 0, width, height, settings.frame_color, corner))
        elements.append(_rect(padding / 2, padding / 2, width - padding, height - padding,
                              'white', corner * INNER_CORNER_RATIO))
    elif settings.type == BANNER_TOP:
        elements.append(_rect(0, 0, width, height, 'white'))
        elements.append(_rect(0, 0, width, banner + padding / 2, settings.frame_color))
    elif settings.type == BANNER_BOTTOM:
        elements.append(_rect(0, 0, width, height, 'white'))
        elements.append(_rect(0, height - banner - padding / 2, width, banner + padding / 2,
                              settings.frame_color))
    elif settings.type == FULL_BORDER:
        elements.append(_rect(0, 0, width, height, settings.frame_color))
        elements.append(_rect(padding / 2, padding / 2, width - padding, qr_size + padding, 'white'))

    elements.append(f'<g transform="translate({fmt_number(dims.qr_x)}, {fmt_number(dims.qr_y)})">')
    elements.append(qr_svg)
    elements.append('</g>')

    if has_text and banner:
        if settings.type == BANNER_TOP:
            text_y = banner / 2 + padding / 4
        elif settings.type == BANNER_BOTTOM:
            text_y = height - banner / 2 - padding / 4
        else:
            text_y = qr_size + padding + banner / 2 + padding / 4
        elements.append(_text(width / 2, text_y, font_size, settings))

    w, h = fmt_number(width), fmt_number(height)
    lines = [f'<svg xmlns="{SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">']
    lines.extend(elements)
    lines.append('</svg>')
    return '\n'.join(lines)
