# clarity/design.py
from .base_module import AuditModule
from .page import ParsedPage
from .scoring import score_design
from .util import leading_int, parse_inline_style


def collect_font_sizes(page: ParsedPage) -> list:
    """Integer font sizes declared in inline styles, in document order."""
    sizes = []
    for tag in page.soup.find_all(style=True):
        size = leading_int(parse_inline_style(tag.get("style")).get("font-size"))
        if size is not None:
            sizes.append(size)
    return sizes


def assess_visual_hierarchy(page: ParsedPage) -> int:
    h1 = page.select_count('h1')
    h2 = page.select_count('h2')
    h3 = page.select_count('h3')
    if h1 == 1 and h2 >= 2 and h3 >= 1:
        return 90
    if h1 == 1 and h2 >= 1:
        return 75
    return 50


def assess_whitespace(page: ParsedPage) -> int:
    # More elements per character of text reads as more breathing room.
    elements = len(page.soup.find_all(True))
    density = elements / max(len(page.body_text), 1)
    if density > 0.01:
        return 80
    if density > 0.005:
        return 65
    return 50


def calculate_image_text_balance(images: int, text_length: int) -> dict:
    ratio = images / max(text_length / 1000, 1)
    if ratio > 5:
        return {"score": 50, "recommendation": "Too many images relative to text content"}
    if ratio < 0.5 and images > 0:
        return {"score": 60, "recommendation": "Consider adding more visuals to break up text"}
    if images == 0:
        return {"score": 40, "recommendation": "Add images to enhance visual appeal"}
    return {"score": 85, "recommendation": "Good balance between images and text"}


class DesignAnalyzer(AuditModule):
    def __init__(self, config=None):
        super().__init__(config=config)
        self.sizes_listed = self.config.get("font_sizes_listed", 10)
        self.readable_font_size = self.config.get("readable_font_size", 16)

    def analyze(self, page: ParsedPage) -> dict:
        font_sizes = collect_font_sizes(page)
        unique_sizes = list(dict.fromkeys(font_sizes))
        readable_size = any(size >= self.readable_font_size for size in font_sizes)
        visual_hierarchy = assess_visual_hierarchy(page)
        whitespace = assess_whitespace(page)
        balance = calculate_image_text_balance(page.select_count('img'), len(page.body_text))

        return {
            "score": score_design(visual_hierarchy, whitespace, readable_size, len(unique_sizes)),
            "visualHierarchy": visual_hierarchy,
            "whitespace": whitespace,
            # Constant: contrast needs computed colours, and external stylesheets are never fetched.
            "colorContrast": {"score": 75, "issues": []},
            "typography": {
                "fontSizes": unique_sizes[:self.sizes_listed],
                "readableSize": readable_size,
                "fontVariety": len(unique_sizes),
            },
            "imageTextBalance": balance,
        }
