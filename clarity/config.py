# clarity/config.py
import copy
import json

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ClarityBot/1.0; +https://clarity.nxtwaves.in)"

DEFAULT_CONFIG = {
    "Global": {
        "request_timeout": 10,
        "user_agent": DEFAULT_USER_AGENT,
        "accept_language": "en-US,en;q=0.8",
        "debug": False,
    },
    "ContentAnalyzer": {
        "free_tier_issue_limit": 5,
        "min_words": 300,
        "dictionary_check": True,
        "spellcheck_language": "en",
    },
    "SEOAnalyzer": {
        "title_min_length": 30, "title_max_length": 60,
        "desc_min_length": 120, "desc_max_length": 160,
    },
    "PerformanceAnalyzer": {"max_scripts": 10},
    "DesignAnalyzer": {"font_sizes_listed": 10, "readable_font_size": 16},
    "PsychologyAnalyzer": {},
    "AccessibilityAnalyzer": {},
    "Scoring": {
        "category_weights": {
            "content": 0.25, "seo": 0.20, "performance": 0.15,
            "design": 0.15, "psychology": 0.15, "accessibility": 0.10,
        }
    },
    "Api": {
        "booking_url": "https://calendly.com/nxtwave-ventures/30min",
        "workers": 6,
    },
}


def merge_config(base: dict, overrides: dict) -> dict:
    """Shallow merge per section: dict sections are updated, anything else replaced."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> dict:
    """DEFAULT_CONFIG merged with an optional JSON file. Bad files keep the defaults."""
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, 'r') as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.")
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.")
        return copy.deepcopy(DEFAULT_CONFIG)
    print(f"Loaded custom configuration from {path}")
    return merge_config(DEFAULT_CONFIG, custom_config)


def module_config(config: dict, section: str) -> dict:
    """Section config for a module with the Global section passed down."""
    cfg = dict(config.get(section, {}))
    cfg["Global"] = config.get("Global", {})
    return cfg
