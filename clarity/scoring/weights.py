DEFAULT_CATEGORY_WEIGHTS = {
    "content": 0.25,
    "seo": 0.20,
    "performance": 0.15,
    "design": 0.15,
    "psychology": 0.15,
    "accessibility": 0.10,
}

# Result key in the report for each category.
CATEGORY_KEYS = {
    "content": "contentAnalysis",
    "seo": "seoAnalysis",
    "performance": "performanceAnalysis",
    "design": "designAnalysis",
    "psychology": "psychologyAnalysis",
    "accessibility": "accessibilityAnalysis",
}
