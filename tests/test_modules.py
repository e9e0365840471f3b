"""Tests for the performance, design, psychology and accessibility analyzers."""

from clarity.accessibility import AccessibilityAnalyzer, wcag_level
from clarity.design import DesignAnalyzer, calculate_image_text_balance, collect_font_sizes
from clarity.performance import PerformanceAnalyzer
from clarity.psychology import PsychologyAnalyzer, assess_cta_clarity, detect_trust_signals


class TestPerformanceAnalyzer:
    def test_rich_page(self, make_page, rich_html):
        result = PerformanceAnalyzer().analyze(make_page(rich_html))
        assert result["resourcesSize"] == {"images": 1, "scripts": 1, "styles": 1}
        assert result["estimatedLoadTime"] == 0.45
        assert result["optimizations"] == {
            "minifiedCSS": True, "minifiedJS": True, "compressedImages": False, "lazyLoading": True,
        }
        assert result["score"] == 100

    def test_many_unminified_scripts(self, make_page):
        html = "<html><head>" + '<script src="/s.js"></script>' * 11 + "</head><body></body></html>"
        result = PerformanceAnalyzer().analyze(make_page(html))
        assert result["resourcesSize"]["scripts"] == 11
        assert result["estimatedLoadTime"] == 2.2
        assert result["score"] == 70


class TestDesignAnalyzer:
    def test_font_sizes_use_integer_prefix(self, make_page):
        html = '<body><p style="font-size: 1.5em">a</p><p style="color: red; font-size:14px">b</p><p style="font-size: inherit">c</p></body>'
        assert collect_font_sizes(make_page(html)) == [1, 14]

    def test_rich_page(self, make_page, rich_html):
        result = DesignAnalyzer().analyze(make_page(rich_html))
        assert result["typography"] == {"fontSizes": [32, 24, 16], "readableSize": True, "fontVariety": 3}
        assert result["visualHierarchy"] == 90
        assert result["whitespace"] == 80
        assert result["imageTextBalance"]["score"] == 85
        assert result["colorContrast"] == {"score": 75, "issues": []}
        assert result["score"] == 100

    def test_whitespace_for_dense_text(self, make_page):
        html = "<body><p>" + "word " * 1000 + "</p></body>"
        assert DesignAnalyzer().analyze(make_page(html))["whitespace"] == 50

    def test_image_text_balance(self):
        assert calculate_image_text_balance(0, 500)["score"] == 40
        assert calculate_image_text_balance(6, 500)["score"] == 50
        assert calculate_image_text_balance(1, 5000)["score"] == 60
        assert calculate_image_text_balance(2, 800)["score"] == 85


class TestPsychologyAnalyzer:
    def test_trust_signals(self, make_page, rich_html):
        signals = detect_trust_signals(make_page(rich_html))
        assert signals["present"] == [
            "SSL Certificate", "Contact Information", "Privacy Policy", "Terms of Service", "Testimonials",
        ]
        assert signals["missing"] == ["Security Badge"]
        assert round(signals["score"], 2) == 83.33

    def test_https_from_final_url(self, make_page):
        page = make_page("<body></body>", url="http://plain.test", final_url="https://plain.test/")
        assert "SSL Certificate" in detect_trust_signals(page)["present"]
        page = make_page("<body></body>", url="http://plain.test")
        assert "SSL Certificate" in detect_trust_signals(page)["missing"]

    def test_security_badge(self, make_page):
        page = make_page('<body><img src="b.png" alt="verified merchant"></body>', url="http://x.test")
        assert "Security Badge" in detect_trust_signals(page)["present"]

    def test_rich_page(self, make_page, rich_html):
        result = PsychologyAnalyzer().analyze(make_page(rich_html))
        assert result["ctaPlacement"] == {"score": 90, "ctaCount": 1, "aboveFold": True, "clarity": 90}
        assert result["urgencyTriggers"] is True
        assert result["socialProof"] is True
        assert result["score"] == 100

    def test_no_ctas(self, make_page):
        result = PsychologyAnalyzer().analyze(make_page("<body><p>Nothing here</p></body>", url="http://x.test"))
        assert result["ctaPlacement"]["ctaCount"] == 0
        assert result["ctaPlacement"]["clarity"] == 0
        assert result["urgencyTriggers"] is False
        assert result["score"] == 50

    def test_cta_clarity(self):
        assert assess_cta_clarity(0, "") == 0
        assert assess_cta_clarity(2, "get started") == 90
        assert assess_cta_clarity(5, "download") == 75
        assert assess_cta_clarity(2, "hello") == 60


class TestAccessibilityAnalyzer:
    def test_rich_page(self, make_page, rich_html):
        result = AccessibilityAnalyzer().analyze(make_page(rich_html))
        assert result["ariaLabels"] == {"score": 40.0, "missing": 3}
        assert result["score"] == 85
        assert result["wcagCompliance"] == "AA"
        assert result["screenReaderFriendly"] is False

    def test_empty_page_is_fully_compliant_on_ratios(self, make_page):
        result = AccessibilityAnalyzer().analyze(make_page("<html><body><p>x</p></body></html>"))
        assert result["ariaLabels"]["score"] == 100
        assert result["altTextScore"] == 100
        assert result["score"] == 100

    def test_wcag_levels(self):
        assert wcag_level(80) == "AA"
        assert wcag_level(60) == "A"
        assert wcag_level(59) == "Needs Improvement"
