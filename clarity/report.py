# clarity/report.py
import json
import os
from datetime import datetime
from urllib.parse import urlparse

SECTIONS = [
    ("Content", "contentAnalysis"),
    ("SEO", "seoAnalysis"),
    ("Performance", "performanceAnalysis"),
    ("Design", "designAnalysis"),
    ("Psychology", "psychologyAnalysis"),
    ("Accessibility", "accessibilityAnalysis"),
]


def render_text(analysis: dict, booking_url: str | None = None) -> str:
    lines = [
        f"Website Clarity Report: {analysis.get('url')}",
        f"Generated: {analysis.get('timestamp')}",
        f"Overall score: {analysis.get('overallScore')}/100",
        "",
    ]
    for label, key in SECTIONS:
        lines.append(f"  {label:<14}{analysis.get(key, {}).get('score', 'n/a')}")

    issues = analysis.get("criticalIssues", [])
    if issues:
        lines += ["", "Critical issues:"]
        lines += [f"  [{i['severity']}] {i['title']}: {i['description']}" for i in issues]

    free_wins = [r for r in analysis.get("quickWins", []) if not r["premium"]]
    if free_wins:
        lines += ["", "Quick wins:"]
        lines += [f"  - {r['title']} ({r['impact']} impact, {r['effort']} effort)" for r in free_wins]

    premium = analysis.get("premiumInsightsAvailable", 0)
    if premium:
        lines += ["", f"{premium} more insight(s) available in the full report."]
    if booking_url:
        lines += ["", f"Book a free consultation: {booking_url}"]
    return "\n".join(lines) + "\n"


def save_report_to_file(analysis: dict, output_format: str = "json", booking_url: str | None = None,
                        directory: str = "reports", filename_prefix: str = "clarity") -> str | None:
    if not os.path.exists(directory):
        os.makedirs(directory)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_domain_name = urlparse(analysis.get("url", "")).netloc.replace(".", "_").replace(":", "_") or "site"
    filename = os.path.join(directory, f"{filename_prefix}_{safe_domain_name}_{timestamp}.{output_format}")
    try:
        with open(filename, "w") as f:
            if output_format == "json":
                json.dump(analysis, f, indent=4)
            else:
                f.write(render_text(analysis, booking_url))
    except IOError as e:
        print(f"Error saving report: {e}")
        return None
    print(f"Report saved to {filename}")
    return filename
