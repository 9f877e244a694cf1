# notices/markdown/postprocessors/notice_enhancer.py
"""
Postprocessor that gives notice blocks accessible structure.

The notice block tags emit:
    <aside class="notice warning" markdown="1">
     Disk **almost** full
    </aside>

Pandoc parses the inner markdown. A single line of text comes out as bare
inline content, without a paragraph:
    <aside class="notice warning">
    Disk <strong>almost</strong> full
    </aside>

This postprocessor transforms it to:
    <aside class="notice warning" role="alert" aria-label="Warning">
    <p class="first-graf">Disk <strong>almost</strong> full</p>
    </aside>

Notices whose content already holds block elements (paragraphs, lists, ...)
keep them; only the first direct paragraph is marked. The class attribute is
never changed.

Supported kinds: standard, info, warning, success, error
"""

from bs4 import BeautifulSoup, NavigableString

from notices.templatetags.notice_tags import NOTICE_KINDS

# Kinds that interrupt the reader get role="alert"; the rest are plain notes
ALERT_KINDS = {"warning", "error"}

BLOCK_TAGS = {
    "address", "aside", "blockquote", "details", "div", "dl", "figure",
    "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr",
    "ol", "p", "pre", "section", "table", "ul",
}


def _notice_kind(classes):
    if len(classes) < 2 or classes[0] != "notice":
        return None
    return classes[1] if classes[1] in NOTICE_KINDS else None


def _wrap_inline_content(soup, aside):
    """Move bare inline content of ``aside`` into a paragraph."""
    if any(child.name in BLOCK_TAGS for child in aside.children):
        return
    if not aside.get_text(strip=True) and aside.find(True) is None:
        return

    paragraph = soup.new_tag("p")
    for child in list(aside.contents):
        paragraph.append(child.extract())

    # Trim the newlines Pandoc leaves around the inline run
    first = paragraph.contents[0]
    if isinstance(first, NavigableString):
        first.replace_with(NavigableString(first.lstrip()))
    last = paragraph.contents[-1]
    if isinstance(last, NavigableString):
        last.replace_with(NavigableString(last.rstrip()))

    aside.append("\n")
    aside.append(paragraph)
    aside.append("\n")


def notice_enhancer(html: str, context: dict) -> str:
    """
    Enhance notice asides with roles, labels and a first-paragraph marker.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        Processed HTML with enhanced notices
    """
    if "notice" not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")

    for aside in soup.find_all("aside", class_="notice"):
        kind = _notice_kind(aside.get("class", []))
        if kind is None:
            continue

        aside["role"] = "alert" if kind in ALERT_KINDS else "note"
        aside["aria-label"] = kind.capitalize()

        # Pandoc drops markdown="1"; clear it if the source bypassed Pandoc
        if "markdown" in aside.attrs:
            del aside["markdown"]

        _wrap_inline_content(soup, aside)

        first_paragraph = aside.find("p", recursive=False)
        if first_paragraph is not None:
            p_classes = first_paragraph.get("class", [])
            if "first-graf" not in p_classes:
                p_classes.insert(0, "first-graf")
            first_paragraph["class"] = p_classes

    return str(soup)


def notice_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for notice_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return notice_enhancer(html, context)
