# notices/markdown/renderer.py

import logging

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw page source (template syntax and markdown)
        context: Optional dict for processors that need additional data
    """
    context = context or {}

    # Pre-processing: expand notice tags before markdown conversion
    text = apply_preprocessors(text or "", context)

    pandoc_config = get_pandoc_config()
    logger.debug("Converting markdown with pandoc format %s", pandoc_config["format"])

    html = pypandoc.convert_text(
        text,
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
