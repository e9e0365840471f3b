from ..base_module import AuditModule
from ..page import ParsedPage
from ..scoring import score_seo
from .links_images import check_images, count_links, has_schema_markup
from .meta import check_meta_description, check_title, extract_keywords, is_mobile_optimized


class SEOAnalyzer(AuditModule):
    """Meta tags, heading counts, image alt text, links, structured data and viewport."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.title_min_len = self.config.get("title_min_length", 30)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_min_len = self.config.get("desc_min_length", 120)
        self.desc_max_len = self.config.get("desc_max_length", 160)

    def analyze(self, page: ParsedPage) -> dict:
        title = check_title(page, self.title_min_len, self.title_max_len)
        description = check_meta_description(page, self.desc_min_len, self.desc_max_len)
        h1_count = page.select_count('h1')
        proper_structure = h1_count == 1 and page.select_count('h2') > 0
        schema_markup = has_schema_markup(page)
        mobile_optimized = is_mobile_optimized(page)

        score = score_seo(
            title["length"], description["length"], proper_structure, schema_markup, mobile_optimized,
            title_range=(self.title_min_len, self.title_max_len), desc_min_length=self.desc_min_len,
        )
        return {
            "score": score,
            "metaTags": {
                "title": title,
                "description": description,
                "keywords": extract_keywords(page),
            },
            "headings": {"h1Count": h1_count, "properStructure": proper_structure},
            "images": check_images(page),
            **count_links(page),
            "schemaMarkup": schema_markup,
            "mobileOptimized": mobile_optimized,
        }
