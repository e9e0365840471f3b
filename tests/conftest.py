import copy

import pytest

from clarity.config import DEFAULT_CONFIG
from clarity.page import ParsedPage


@pytest.fixture
def make_page():
    def _make(html: str, url: str = "https://example.com", final_url: str = ""):
        return ParsedPage(url=url, html=html, final_url=final_url)
    return _make


@pytest.fixture
def config():
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg["ContentAnalyzer"]["dictionary_check"] = False
    return cfg


RICH_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Acme Analytics - Clear dashboards for teams</title>
  <meta name="description" content="Acme Analytics turns raw product data into clear dashboards your whole team can read. Start a free trial and see results in minutes today.">
  <meta name="keywords" content="analytics, dashboards , , teams">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://acme.test/">
  <link rel="stylesheet" href="/static/app.min.css">
  <script src="/static/app.min.js"></script>
  <script type="application/ld+json">{"@type": "Organization"}</script>
</head>
<body>
  <header><nav><a href="/pricing" aria-label="Pricing">Pricing</a></nav></header>
  <main>
    <h1 style="font-size: 32px">Dashboards everyone understands</h1>
    <h2 style="font-size: 24px">Why teams switch</h2>
    <p style="font-size: 16px">Our customers read their numbers in seconds. Setup takes minutes.</p>
    <h2>Features</h2>
    <h3>Sharing</h3>
    <img src="/a.png" alt="Dashboard screenshot" loading="lazy">
    <section class="testimonial">"Great tool." Contact us by email.</section>
    <button class="cta" aria-label="Start trial">Get started now</button>
  </main>
  <footer><a href="/privacy">Privacy</a> <a href="/terms">Terms</a> <a href="https://twitter.com/acme">Twitter</a></footer>
</body>
</html>
"""


@pytest.fixture
def rich_html():
    return RICH_PAGE
