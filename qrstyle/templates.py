# -*- coding: utf-8 -*-
"""
Built-in design templates: a color pair, shape settings and a frame.
"""

from typing import List, NamedTuple, Optional

from .frames import DEFAULT_FRAME_SETTINGS, FrameSettings
from .renderer import RenderOptions
from .shapes import ShapeSettings

CATEGORIES = (
    ('professional', 'Professional'),
    ('minimalist', 'Minimalist'),
    ('bold', 'Bold'),
    ('elegant', 'Elegant'),
    ('playful', 'Playful'),
)


class QRTemplate(NamedTuple):
    id: str
    name: str
    description: str
    category: str
    foreground: str
    background: str
    shape_settings: ShapeSettings
    frame_settings: FrameSettings = DEFAULT_FRAME_SETTINGS

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'colors': {'foreground': self.foreground, 'background': self.background},
            'shapeSettings': self.shape_settings.to_dict(),
            'frameSettings': self.frame_settings.to_dict(),
        }


SYSTEM_TEMPLATES = (
    QRTemplate('system-classic', 'Classic', 'Traditional black and white QR code',
               'professional', '#000000', '#FFFFFF',
               ShapeSettings('square', 'square', 'square'),
               FrameSettings('none', '', '#FFFFFF', '#000000')),
    QRTemplate('system-qrmory', 'QRmory Purple', 'Our signature purple style',
               'professional', '#2A0B4D', '#FFFFFF',
               ShapeSettings('rounded', 'dot', 'dot'),
               FrameSettings('none', '', '#FFFFFF', '#2A0B4D')),
    QRTemplate('system-ocean', 'Ocean Blue', 'Calm and professional blue tones',
               'professional', '#1E40AF', '#DBEAFE',
               ShapeSettings('rounded', 'dot', 'dot'),
               FrameSettings('none', '', '#FFFFFF', '#1E40AF')),
    QRTemplate('system-forest', 'Forest Green', 'Natural and eco-friendly feel',
               'elegant', '#166534', '#DCFCE7',
               ShapeSettings('extra-rounded', 'extra-rounded', 'dot'),
               FrameSettings('none', '', '#FFFFFF', '#166534')),
    QRTemplate('system-sunset', 'Sunset Orange', 'Warm and inviting design',
               'bold', '#EA580C', '#FFF7ED',
               ShapeSettings('dots', 'dot', 'dot'),
               FrameSettings('none', '', '#FFFFFF', '#EA580C')),
    QRTemplate('system-midnight', 'Midnight', 'Dark and sophisticated',
               'elegant', '#1E1B4B', '#E0E7FF',
               ShapeSettings('classy', 'square', 'square'),
               FrameSettings('none', '', '#FFFFFF', '#1E1B4B')),
    QRTemplate('system-rose', 'Rose Gold', 'Elegant and feminine style',
               'elegant', '#9F1239', '#FFF1F2',
               ShapeSettings('classy-rounded', 'extra-rounded', 'dot'),
               FrameSettings('none', '', '#FFFFFF', '#9F1239')),
    QRTemplate('system-neon', 'Neon Pop', 'Bold and eye-catching',
               'playful', '#7C3AED', '#FEF3C7',
               ShapeSettings('dots', 'extra-rounded', 'dot'),
               FrameSettings('rounded', 'SCAN ME', '#FFFFFF', '#7C3AED')),
    QRTemplate('system-minimal-dark', 'Minimal Dark', 'Clean dark mode aesthetic',
               'minimalist', '#18181B', '#F4F4F5',
               ShapeSettings('square', 'square', 'square'),
               FrameSettings('simple', '', '#FFFFFF', '#18181B')),
    QRTemplate('system-cafe', 'Cafe Menu', 'Perfect for restaurants and cafes',
               'professional', '#78350F', '#FFFBEB',
               ShapeSettings('rounded', 'dot', 'dot'),
               FrameSettings('banner-bottom', 'View Menu', '#FFFBEB', '#78350F')),
)


def get_templates_by_category(category: Optional[str] = None) -> List[QRTemplate]:
    """All system templates, or only those in ``category``."""
    if not category:
        return list(SYSTEM_TEMPLATES)
    return [t for t in SYSTEM_TEMPLATES if t.category == category]


def find_template(template_id: str) -> Optional[QRTemplate]:
    for template in SYSTEM_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def template_render_options(
    template: QRTemplate,
    text: str,
    size: float = 256,
    margin: float = 8,
    error_correction_level: str = 'M',
) -> RenderOptions:
    """Render options that draw ``text`` with the template's colors and shapes."""
    return RenderOptions(
        text=text,
        size=size,
        margin=margin,
        error_correction_level=error_correction_level,
        foreground_color=template.foreground,
        background_color=template.background,
        shape_settings=template.shape_settings,
    )
