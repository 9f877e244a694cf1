from notices import conf


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The reader format enables Pandoc's markdown_attribute extension so that the
    content of notice blocks (<aside ... markdown="1">) is parsed as markdown.
    Pandoc strips the attribute from the generated HTML.
    """
    return {
        "format": conf.pandoc_format(),
        "extra_args": conf.pandoc_extra_args(),
    }
