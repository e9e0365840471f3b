from ..page import ParsedPage


def check_images(page: ParsedPage) -> dict:
    images = page.select('img')
    missing_alt = sum(1 for img in images if not img.get("alt"))
    total = len(images)
    return {
        "total": total,
        "missingAlt": missing_alt,
        "optimizationScore": (total - missing_alt) / max(total, 1) * 100,
    }


def count_links(page: ParsedPage) -> dict:
    """Internal: root-relative or prefixed by the page URL. External: other http(s) hrefs."""
    internal = external = 0
    for a_tag in page.select('a[href]'):
        href = a_tag["href"]
        same_page_prefix = href.startswith(page.url)
        if href.startswith('/') or same_page_prefix:
            internal += 1
        if href.startswith('http') and not same_page_prefix:
            external += 1
    return {"internalLinks": internal, "externalLinks": external}


def has_schema_markup(page: ParsedPage) -> bool:
    return page.select_count('script[type="application/ld+json"]') > 0
