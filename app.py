# app.py
import argparse
import copy
import logging

from flask import Flask, request, jsonify

from clarity import __version__
from clarity.analyzer import CAPABILITIES, WebsiteAnalyzer, is_valid_url
from clarity.config import DEFAULT_CONFIG, load_config
from clarity.errors import AnalysisError
from clarity.report import render_text, save_report_to_file

logger = logging.getLogger("clarity.app")

USER_MESSAGES = {
    "not_found": "Could not reach the website. Please check the URL and try again.",
    "timeout": "Website took too long to respond. Please try again.",
}
DEFAULT_USER_MESSAGE = "Unable to analyze the website. Please try a different URL."

app = Flask(__name__)
# Replaced by run_cli() when a --config file is given.
flask_app_config = copy.deepcopy(DEFAULT_CONFIG)


def build_response(analysis: dict, config: dict) -> dict:
    return {
        "success": True,
        "analysis": analysis,
        "tier": "free",
        "upgradeAvailable": analysis["premiumInsightsAvailable"] > 0,
        "bookingUrl": config.get("Api", {}).get("booking_url"),
    }


def error_payload(error: AnalysisError, debug: bool = False) -> dict:
    payload = {
        "error": "Analysis failed",
        "message": USER_MESSAGES.get(error.reason, DEFAULT_USER_MESSAGE),
    }
    if debug:
        payload["details"] = str(error)
    return payload


@app.route('/api/analyze', methods=['POST'])
def analyze_endpoint():
    data = request.get_json(silent=True) or {}
    url_to_analyze = data.get('url') if isinstance(data, dict) else None
    if not url_to_analyze:
        return jsonify({"error": "URL is required"}), 400
    if not isinstance(url_to_analyze, str) or not is_valid_url(url_to_analyze):
        return jsonify({"error": "Invalid URL format. Please enter a valid website URL."}), 400

    config = flask_app_config
    logger.info("Starting analysis for: %s", url_to_analyze)
    try:
        analysis = WebsiteAnalyzer(config=config).analyze(url_to_analyze)
    except AnalysisError as e:
        logger.error("Analysis error for %s: %s", url_to_analyze, e)
        return jsonify(error_payload(e, config.get("Global", {}).get("debug", False))), 500

    logger.info("Analysis completed. Overall score: %s", analysis["overallScore"])
    return jsonify(build_response(analysis, config))


@app.route('/api/analyze', methods=['GET'])
def health_endpoint():
    return jsonify({
        "status": "operational",
        "version": __version__,
        "engine": "clarity-analyzer",
        "capabilities": CAPABILITIES,
    })


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="Website Clarity Audit")
    parser.add_argument("url", nargs='?', default=None, help="The URL to audit (omit to run in API/server mode).")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the saved report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--no-save", action="store_true", help="Print the report instead of saving it under reports/.")
    parser.add_argument("--host", default="127.0.0.1", help="Host for API mode.")
    parser.add_argument("--port", type=int, default=5000, help="Port for API mode.")
    args = parser.parse_args(argv)

    global flask_app_config
    current_config = load_config(args.config)
    flask_app_config = current_config
    debug = current_config.get("Global", {}).get("debug", False)
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if not args.url:
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)")
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    booking_url = current_config.get("Api", {}).get("booking_url")
    print(f"Starting clarity audit for: {args.url}")
    try:
        analysis = WebsiteAnalyzer(config=current_config).analyze(args.url)
    except AnalysisError as e:
        print(f"Error: {e}")
        return 1

    print(f"Audit complete. Overall score: {analysis['overallScore']}/100")
    if args.no_save:
        print(render_text(analysis, booking_url))
    else:
        save_report_to_file(analysis, output_format=args.output, booking_url=booking_url)
    return 0


if __name__ == '__main__':
    raise SystemExit(run_cli())
