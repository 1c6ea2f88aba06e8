# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module wraps the segno library, which performs data encoding, error
correction and format/version information placement. The styled renderer
only needs the finished module matrix, so this module is the single place
where text turns into dark and light modules.

Functions:
    make_qr: Generate a full-size QR code symbol
    build_matrix: Generate a symbol and return its boolean module matrix
"""

import logging
from typing import List, Optional, Union

import segno

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = ('L', 'M', 'Q', 'H')


def make_qr(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    encoding: Optional[str] = None,
    eci: bool = False,
    mask: Union[str, int] = 'auto',
    boost_error: bool = False,
) -> segno.QRCode:
    """
    Generate a QR code symbol with the requested error correction level.

    Micro QR codes are never produced: the styled renderer relies on the
    three finder patterns of a full-size symbol.

    Args:
        text (str): The data to encode
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
            - L: ~7% recovery capability
            - M: ~15% recovery capability
            - Q: ~25% recovery capability
            - H: ~30% recovery capability
        version (Optional[Union[int, str]]): 1-40, or None/'auto' for the
            smallest version that fits
        mode (Optional[str]): Encoding mode, None lets segno pick
        encoding (Optional[str]): Character encoding for byte mode
        eci (bool): Add an ECI header naming the encoding
        mask (Union[str, int]): 'auto' or a mask pattern 0-7
        boost_error (bool): Raise the ECC level when the version has room

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        ValueError: If text is empty or the parameters are invalid
        segno.DataOverflowError: If the data doesn't fit
    """
    if not text:
        raise ValueError("QR data cannot be empty.")

    mask_arg = None if mask == 'auto' else int(mask)
    ver_arg = None if (version in (None, 'auto')) else int(version)

    symbol = segno.make(
        text,
        error=ecc,
        version=ver_arg,
        mode=mode,
        encoding=encoding,
        eci=bool(eci),
        mask=mask_arg,
        boost_error=bool(boost_error),
        micro=False,
    )
    logger.debug("Encoded %d chars as version %s-%s", len(text), symbol.version, symbol.error)
    return symbol


def build_matrix(text: str, ecc: str = 'M') -> List[List[bool]]:
    """
    Encode text and return the module matrix without quiet zone.

    Example:
        >>> matrix = build_matrix("HELLO", ecc='M')
        >>> len(matrix), len(matrix[0])
        (21, 21)
    """
    symbol = make_qr(text, ecc=ecc)
    return [[bool(module) for module in row] for row in symbol.matrix]
