from ..page import ParsedPage


def _meta_content(page: ParsedPage, name: str) -> str | None:
    tag = page.soup.select_one(f'meta[name="{name}"]')
    return tag.get("content") if tag else None


def check_title(page: ParsedPage, min_len: int, max_len: int) -> dict:
    title = page.all_text('title')
    return {
        "present": len(title) > 0,
        "length": len(title),
        "optimized": min_len <= len(title) <= max_len,
    }


def check_meta_description(page: ParsedPage, min_len: int, max_len: int) -> dict:
    description = _meta_content(page, "description") or ""
    return {
        "present": len(description) > 0,
        "length": len(description),
        "optimized": min_len <= len(description) <= max_len,
    }


def extract_keywords(page: ParsedPage) -> list:
    raw = _meta_content(page, "keywords")
    if not raw:
        return []
    return [kw.strip() for kw in raw.split(',') if kw.strip()]


def is_mobile_optimized(page: ParsedPage) -> bool:
    viewport = _meta_content(page, "viewport")
    return bool(viewport) and 'width=device-width' in viewport
